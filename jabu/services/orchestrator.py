"""
Task orchestration for jabu.

Runs a named task after checking its tools, validating its arguments and
running its dependency tasks, one at a time on the calling thread:

    Idle -> ToolCheck -> ArgValidation -> DependencyResolution -> Running
         -> Succeeded | Failed

Dependencies are resolved in name order and fail fast. Nothing is
memoized: a task named by two siblings runs twice. A task reached again
while it is still on the active chain fails with ``CyclicDependency``.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

from ..args import ArgumentValidationError, ParsedArguments
from ..domain import JabuProject
from ..errors import (
    CyclicDependency,
    DependencyTaskDoesntExist,
    DependencyTaskFailed,
    InvalidArguments,
    MissingRequiredTaskTools,
    NoSuchTask,
    TaskError,
    TaskIOError,
    render_error,
)
from ..infra import load_project
from ..tasks.base import TaskContext
from .task_registry import TaskRegistry

logger = logging.getLogger(__name__)


class TaskState(Enum):
    IDLE = "Idle"
    TOOL_CHECK = "ToolCheck"
    ARG_VALIDATION = "ArgValidation"
    DEPENDENCY_RESOLUTION = "DependencyResolution"
    RUNNING = "Running"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"


ProjectLoader = Callable[[Path], JabuProject]
ContextFactory = Callable[[Path], TaskContext]


class Orchestrator:
    """
    Executes tasks of a registry together with their dependency chains.

    Example:
        orchestrator = Orchestrator(default_registry())
        orchestrator.execute("jar", [], "/path/to/project")
    """

    def __init__(
        self,
        registry: TaskRegistry,
        project_loader: ProjectLoader = load_project,
        context_factory: Optional[ContextFactory] = None,
        help_renderer: Optional[Callable] = None,
    ):
        """
        Initialize Orchestrator.

        Args:
            registry: Tasks that can be executed
            project_loader: Reads the project descriptor of a directory
            context_factory: Builds the TaskContext of a top-level call
            help_renderer: Called with (task_name, options) on ``--help``
        """
        self.registry = registry
        self.project_loader = project_loader
        self.context_factory = context_factory or TaskContext.create
        if help_renderer is None:
            from ..render import render_options_help
            help_renderer = render_options_help
        self.help_renderer = help_renderer
        self.transitions: List[Tuple[str, TaskState]] = []

    def execute(
        self,
        name: str,
        args: Sequence[str],
        project_dir,
        context: Optional[TaskContext] = None,
    ) -> None:
        """
        Execute ``name`` and, before it, its dependencies.

        Args:
            name: Registered task name
            args: Raw task arguments
            project_dir: Directory holding the project descriptor
            context: Shared context; built with ``context_factory`` if None

        Raises:
            TaskError: exactly one taxonomy member on failure
        """
        project_dir = Path(project_dir)
        self.transitions = []
        if context is None:
            context = self.context_factory(project_dir)
        self._execute(name, list(args), project_dir, context, chain=())

    def _transition(self, name: str, state: TaskState) -> None:
        self.transitions.append((name, state))
        logger.debug(f"[{name}] -> {state.value}")

    def _execute(
        self,
        name: str,
        args: List[str],
        project_dir: Path,
        context: TaskContext,
        chain: Tuple[str, ...],
    ) -> None:
        task = self.registry.get(name)
        if task is None:
            raise NoSuchTask(name)
        if name in chain:
            raise CyclicDependency(chain + (name,))
        chain = chain + (name,)

        self._transition(name, TaskState.IDLE)
        try:
            project = self.project_loader(project_dir) if task.needs_project else None

            self._transition(name, TaskState.TOOL_CHECK)
            tools_status = context.java_home.check_required_tools(task.required_tools)
            if not all(tools_status.values()):
                raise MissingRequiredTaskTools(tools_status)

            self._transition(name, TaskState.ARG_VALIDATION)
            parsed_args = None
            options = task.options()
            if options is not None:
                parsed_args = ParsedArguments.from_args(args)
                if parsed_args.help_requested:
                    self.help_renderer(name, options)
                    self._transition(name, TaskState.SUCCEEDED)
                    return
                try:
                    parsed_args.validate(options)
                except ArgumentValidationError as e:
                    raise InvalidArguments(e.errors) from e

            self._transition(name, TaskState.DEPENDENCY_RESOLUTION)
            for dep_name, dep_args in sorted(task.dependency_specs().items()):
                self._run_dependency(dep_name, list(dep_args), project_dir, context, chain)

            self._transition(name, TaskState.RUNNING)
            try:
                task.execute(args, parsed_args, project, context)
            except OSError as e:
                raise TaskIOError(e) from e
        except TaskError:
            self._transition(name, TaskState.FAILED)
            raise

        self._transition(name, TaskState.SUCCEEDED)

    def _run_dependency(
        self,
        dep_name: str,
        dep_args: List[str],
        project_dir: Path,
        context: TaskContext,
        chain: Tuple[str, ...],
    ) -> None:
        if dep_name not in self.registry:
            raise DependencyTaskDoesntExist(dep_name)

        logger.info(f"=> Executing dependency task '{dep_name}' with args {dep_args}")
        try:
            self._execute(dep_name, dep_args, project_dir, context, chain)
        except CyclicDependency:
            raise
        except TaskError as e:
            raise DependencyTaskFailed(dep_name, render_error(e)) from e
