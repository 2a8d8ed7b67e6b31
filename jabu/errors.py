"""
Error taxonomy for jabu.

Every orchestrated operation either succeeds or raises exactly one
``TaskError`` subclass. The set of kinds is closed; the CLI layer maps them
to exit codes (see ``jabu.exit_codes``) and renders them with
``render_error()``, the only place where messages are formatted.
"""

from typing import Iterable, Mapping, Optional, Sequence


class TaskError(Exception):
    """Base class of every task failure."""
    kind = "generic"

    def __str__(self) -> str:
        return render_error(self)


class NoSuchTask(TaskError):
    """The requested task isn't registered."""
    kind = "no_such_task"

    def __init__(self, task_name: str):
        super().__init__(task_name)
        self.task_name = task_name


class MissingRequiredTaskTools(TaskError):
    """
    Some tools required by a task are unavailable.

    ``tools`` maps every required tool name to its availability, e.g.
    ``{"java": True, "javac": False}``.
    """
    kind = "missing_required_task_tools"

    def __init__(self, tools: Mapping[str, bool]):
        super().__init__(dict(tools))
        self.tools = dict(tools)

    @property
    def missing(self):
        return sorted(name for name, available in self.tools.items() if not available)


class InvalidArguments(TaskError):
    """Every violation found while validating a task's arguments."""
    kind = "invalid_arguments"

    def __init__(self, errors: Iterable):
        self.errors = frozenset(errors)
        super().__init__(self.errors)


class DependencyTaskDoesntExist(TaskError):
    """A task declared a dependency on a task that isn't registered."""
    kind = "dependency_task_doesnt_exist"

    def __init__(self, task_name: str):
        super().__init__(task_name)
        self.task_name = task_name


class DependencyTaskFailed(TaskError):
    """
    A dependency task failed.

    Holds the dependency's name and the rendered message of its failure; the
    inner error itself is kept as ``__cause__`` only.
    """
    kind = "dependency_task_failed"

    def __init__(self, task_name: str, description: str):
        super().__init__(task_name, description)
        self.task_name = task_name
        self.description = description


class CyclicDependency(TaskError):
    """A task was reached again while it was still being resolved."""
    kind = "cyclic_dependency"

    def __init__(self, chain: Sequence[str]):
        super().__init__(tuple(chain))
        self.chain = tuple(chain)


class TaskIOError(TaskError):
    """A filesystem operation failed."""
    kind = "io_error"

    def __init__(self, error: OSError):
        super().__init__(error)
        self.error = error


class InvalidConfig(TaskError):
    """The project's descriptor couldn't be parsed."""
    kind = "invalid_config"

    def __init__(self, description: str):
        super().__init__(description)
        self.description = description


class CommandFailed(TaskError):
    """An external tool exited nonzero, had no exit code or couldn't spawn."""
    kind = "command_failed"

    def __init__(self, command: str, description: str):
        super().__init__(command, description)
        self.command = command
        self.description = description


class UnavailableResource(TaskError):
    """A network resource couldn't be obtained (transport error or non-2xx)."""
    kind = "unavailable_resource"

    def __init__(self, resource_name: str, error: Optional[str] = None,
                 status: Optional[int] = None):
        super().__init__(resource_name, error, status)
        self.resource_name = resource_name
        self.error = error
        self.status = status


class Generic(TaskError):
    """Task-specific failure with a free-form message."""
    kind = "generic"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def render_error(error: TaskError) -> str:
    """Render a taxonomy member as a human readable message."""
    if isinstance(error, NoSuchTask):
        return f"Task with name '{error.task_name}' doesn't exist."
    if isinstance(error, MissingRequiredTaskTools):
        body = "\n".join(
            f"   {name} : {'available' if available else 'missing'}"
            for name, available in sorted(error.tools.items())
        )
        return f"Missing required tools for the given task:\n{body}"
    if isinstance(error, InvalidArguments):
        lines = sorted(str(e) for e in error.errors)
        body = "\n".join(f"{index} : {line}" for index, line in enumerate(lines, 1))
        return f"Invalid arguments:\n{body}"
    if isinstance(error, DependencyTaskDoesntExist):
        return f"A task called a dependency task '{error.task_name}' which doesn't exist."
    if isinstance(error, DependencyTaskFailed):
        return (f"While executing a task there was an error executing its "
                f"dependency task '{error.task_name}': {error.description}")
    if isinstance(error, CyclicDependency):
        return f"Cyclic task dependency: {' -> '.join(error.chain)}"
    if isinstance(error, TaskIOError):
        return f"An IO error has occurred: {error.error}"
    if isinstance(error, InvalidConfig):
        return f"The project's jabu configuration is invalid: {error.description}"
    if isinstance(error, CommandFailed):
        return f"Command '{error.command}' failed: {error.description}"
    if isinstance(error, UnavailableResource):
        message = f"The following resource is unavailable: {error.resource_name}"
        if error.status is not None:
            message += f" (status {error.status})"
        if error.error:
            message += f"\n\tCause: {error.error}"
        return message
    if isinstance(error, Generic):
        return error.message
    return repr(error.args)
