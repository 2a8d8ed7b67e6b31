"""JDK tool discovery and command line builders."""

from .commands import (
    JarToolConfig,
    JavacConfig,
    JavadocToolConfig,
    JavaToolConfig,
    JavaVisibilityLevel,
    JPackageToolConfig,
)
from .javahome import TOOL_NAMES, JavaHome, find_java_home

__all__ = [
    'JarToolConfig',
    'JavacConfig',
    'JavadocToolConfig',
    'JavaToolConfig',
    'JavaVisibilityLevel',
    'JPackageToolConfig',
    'TOOL_NAMES',
    'JavaHome',
    'find_java_home',
]
