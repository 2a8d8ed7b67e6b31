"""
Standard exit codes for jabu commands.

Following Unix/POSIX conventions for command-line tools.
"""
import sys
from typing import Optional

from .errors import TaskError

# Standard POSIX exit codes
SUCCESS = 0              # Successful termination
GENERAL_ERROR = 1        # General errors
USAGE_ERROR = 2          # Misuse of shell command (wrong arguments, etc.)

# Application-specific exit codes (64-113 are typically available)
MISSING_TOOLS = 64       # Required JDK tools are unavailable
CONFIG_ERROR = 66        # Project descriptor error
PERMISSION_ERROR = 67    # Insufficient permissions
NETWORK_ERROR = 68       # Network connection failed
COMMAND_ERROR = 69       # External tool failed
DEPENDENCY_ERROR = 70    # A dependency task failed or doesn't exist
IO_ERROR = 74            # Filesystem error
INTERRUPTED = 130        # Terminated by Ctrl+C (SIGINT)

# Exit code mappings for task error kinds
TASK_ERROR_EXIT_CODES = {
    'no_such_task': USAGE_ERROR,
    'invalid_arguments': USAGE_ERROR,
    'missing_required_task_tools': MISSING_TOOLS,
    'dependency_task_doesnt_exist': DEPENDENCY_ERROR,
    'dependency_task_failed': DEPENDENCY_ERROR,
    'cyclic_dependency': DEPENDENCY_ERROR,
    'io_error': IO_ERROR,
    'invalid_config': CONFIG_ERROR,
    'command_failed': COMMAND_ERROR,
    'unavailable_resource': NETWORK_ERROR,
    'generic': GENERAL_ERROR,
}

# Exit code mappings for exceptions escaping outside the taxonomy
EXCEPTION_EXIT_CODES = {
    'FileNotFoundError': IO_ERROR,
    'PermissionError': PERMISSION_ERROR,
    'ConnectionError': NETWORK_ERROR,
    'TimeoutError': NETWORK_ERROR,
    'ValueError': USAGE_ERROR,
}


def get_exit_code_for_exception(exc: BaseException) -> int:
    """
    Get the appropriate exit code for an exception.

    Args:
        exc: The exception that occurred

    Returns:
        Appropriate exit code
    """
    if isinstance(exc, TaskError):
        return TASK_ERROR_EXIT_CODES.get(exc.kind, GENERAL_ERROR)
    exc_name = exc.__class__.__name__
    return EXCEPTION_EXIT_CODES.get(exc_name, GENERAL_ERROR)


def exit_with_code(code: int, message: Optional[str] = None):
    """
    Exit with a specific code and optional message.

    Args:
        code: Exit code
        message: Optional message to print to stderr
    """
    if message:
        print(message, file=sys.stderr)
    sys.exit(code)
