"""
Java installation discovery for jabu.

A ``JavaHome`` is built once per top-level task execution and passed down
the dependency chain; tasks never look tools up on their own.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional

logger = logging.getLogger(__name__)

TOOL_NAMES = ("java", "javac", "jar", "javadoc", "jpackage")


def _binary_name(tool: str) -> str:
    return f"{tool}.exe" if sys.platform.startswith("win") else tool


def find_java_home(environ: Optional[Mapping[str, str]] = None) -> Optional[Path]:
    """
    Locate the Java installation.

    ``$JAVA_HOME`` wins; otherwise the ``PATH`` is searched for a directory
    holding a ``java`` binary, and the parent of that ``bin`` directory is
    used.
    """
    environ = os.environ if environ is None else environ

    java_home = environ.get("JAVA_HOME")
    if java_home:
        return Path(java_home)

    for entry in environ.get("PATH", "").split(os.pathsep):
        if entry and (Path(entry) / _binary_name("java")).is_file():
            directory = Path(entry)
            return directory.parent if directory.name == "bin" else directory
    return None


class JavaHome:
    """
    Paths to the tools of a JDK.

    Example:
        java_home = JavaHome.discover()
        java_home.check_required_tools(["java", "javac"])
        # {"java": True, "javac": False}
    """

    def __init__(self, home: Optional[Path], tools: Optional[Mapping[str, Path]] = None):
        self.home = home
        self._tools: Dict[str, Path] = dict(tools or {})

    @classmethod
    def from_home(cls, home: Path) -> 'JavaHome':
        """Probe ``<home>/bin`` for every known tool."""
        bin_dir = Path(home) / "bin"
        tools = {}
        for tool in TOOL_NAMES:
            path = bin_dir / _binary_name(tool)
            if path.is_file():
                tools[tool] = path
        return cls(Path(home), tools)

    @classmethod
    def discover(cls, environ: Optional[Mapping[str, str]] = None) -> 'JavaHome':
        """
        Build from the environment.

        Without a Java installation this returns an empty ``JavaHome`` so
        tasks that need no tools still run.
        """
        home = find_java_home(environ)
        if home is None:
            logger.debug("No java installation found (JAVA_HOME unset, no java on PATH)")
            return cls(None)
        return cls.from_home(home)

    def get(self, tool: str) -> Optional[Path]:
        return self._tools.get(tool)

    def require(self, tool: str) -> Path:
        """Path of a tool the task declared as required."""
        path = self._tools.get(tool)
        if path is None:
            raise KeyError(f"Tool '{tool}' is not available")
        return path

    def has_tool(self, tool: str) -> bool:
        return tool in self._tools

    @property
    def is_valid(self) -> bool:
        """True if java, javac, jar and javadoc are all present."""
        return all(self.has_tool(tool) for tool in ("java", "javac", "jar", "javadoc"))

    def check_required_tools(self, required: Iterable[str]) -> Dict[str, bool]:
        """Map each required tool name to its availability."""
        return {tool: self.has_tool(tool) for tool in required}

    def tools(self) -> Dict[str, Optional[Path]]:
        """Every known tool with its path, or None when not found."""
        return {tool: self._tools.get(tool) for tool in TOOL_NAMES}
