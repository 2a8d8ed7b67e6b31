"""
Task interface for jabu.

A task is a named unit of work that declares:
- the JDK tools it needs (checked before anything runs)
- the tasks it depends on, with the arguments to run them with
- optionally an ``Options`` schema for its arguments

Tasks are registered into a ``TaskRegistry`` and run by the
``Orchestrator``, which hands every task body the same ``TaskContext``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..args import Options, ParsedArguments
from ..config import get_remote_timeout, get_remote_url, get_repository_path, load_config
from ..domain import JabuProject
from ..infra import RemoteClient, Repository
from ..tools import JavaHome


@dataclass
class TaskContext:
    """
    Everything a task body may touch besides its arguments.

    Built once per top-level execution and shared by the whole dependency
    chain.
    """
    project_dir: Path
    java_home: JavaHome
    repository: Repository
    remote: RemoteClient
    config: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def create(cls, project_dir, config: Optional[Dict[str, Any]] = None) -> 'TaskContext':
        config = load_config() if config is None else config
        return cls(
            project_dir=Path(project_dir),
            java_home=JavaHome.discover(),
            repository=Repository(get_repository_path(config)),
            remote=RemoteClient(get_remote_url(config), timeout=get_remote_timeout(config)),
            config=config,
        )

    def resolve(self, path) -> Path:
        """Resolve a project-relative path."""
        return self.project_dir / path


class Task(ABC):
    """
    Base class of every task.

    Subclasses set ``description`` and optionally ``required_tools``; they
    override ``dependency_specs()`` and ``options()`` when they have them.
    ``needs_project`` tasks get the project's descriptor loaded before they
    run; the others (e.g. ``new``) receive ``None``.
    """
    description: str = ""
    required_tools: Tuple[str, ...] = ()
    needs_project: bool = True

    def dependency_specs(self) -> Dict[str, List[str]]:
        """Tasks to run first, mapped to the arguments they get."""
        return {}

    def options(self) -> Optional[Options]:
        """The option schema, or None if the task doesn't parse options."""
        return None

    @abstractmethod
    def execute(
        self,
        args: Sequence[str],
        parsed_args: Optional[ParsedArguments],
        project: Optional[JabuProject],
        context: TaskContext,
    ) -> None:
        """Run the task; failures are raised as ``TaskError``."""


class TopLevelTask(Task):
    """A task that runs outside of any project."""
    needs_project = False
