"""
External command execution for jabu.

All JDK tools (javac, jar, java, javadoc, jpackage) are spawned through
``run_command``, which makes them:
- Easy to mock for testing
- Consistent in error handling (every failure is a ``CommandFailed``)
"""

import logging
import subprocess
from pathlib import Path
from typing import Optional, Sequence, Union

from ..errors import CommandFailed

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def run_command(
    command: PathLike,
    args: Sequence[str],
    cwd: Optional[PathLike] = None,
    name: Optional[str] = None,
) -> int:
    """
    Run an external command and wait for it.

    The child inherits stdout/stderr so the tool's own output reaches the
    user. No timeout is applied.

    Args:
        command: Path to (or name of) the binary
        args: Arguments passed to it
        cwd: Working directory
        name: Name used in error messages (defaults to ``command``)

    Returns:
        0 on success

    Raises:
        CommandFailed: if the binary can't be spawned, exits nonzero, or
            has no exit code (killed by a signal)
    """
    label = name or str(command)
    cmd = [str(command)] + [str(arg) for arg in args]
    logger.info(f"[CMD] {' '.join(cmd)}")

    try:
        result = subprocess.run(cmd, cwd=cwd)
    except OSError as e:
        logger.error(f"Couldn't spawn {label}: {e}")
        raise CommandFailed(label, str(e)) from e

    if result.returncode < 0:
        raise CommandFailed(
            label,
            f"Command has no exit code (terminated by signal {-result.returncode})",
        )
    if result.returncode != 0:
        raise CommandFailed(label, str(result.returncode))
    return result.returncode
