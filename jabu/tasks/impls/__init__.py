"""
Built-in tasks of jabu.

``default_registry()`` holds every task the ``jabu`` command knows.
"""

from ...services.task_registry import TaskRegistry
from .build import BuildTask
from .clean import CleanTask
from .deps import DepsTask, FetchDepsTask, ListDepsTask, VersionsDepsTask, deps_registry
from .info import DisplayInfoTask
from .jar import JarTask
from .javadoc import JavadocTask
from .jpackage import JPackageTask
from .publish import PublishTask
from .run import RunTask
from .toplevel import (
    ConfigTask,
    HealthCheckTask,
    NewProjectTask,
    RegisterAuthorTask,
    VersionTask,
)

__all__ = [
    'default_registry',
    'deps_registry',
    'BuildTask',
    'CleanTask',
    'ConfigTask',
    'DepsTask',
    'DisplayInfoTask',
    'FetchDepsTask',
    'HealthCheckTask',
    'JarTask',
    'JavadocTask',
    'JPackageTask',
    'ListDepsTask',
    'NewProjectTask',
    'PublishTask',
    'RegisterAuthorTask',
    'RunTask',
    'VersionTask',
    'VersionsDepsTask',
]


def default_registry() -> TaskRegistry:
    registry = TaskRegistry()
    registry.register("build", BuildTask())
    registry.register("jar", JarTask())
    registry.register("run", RunTask())
    registry.register("clean", CleanTask())
    registry.register("javadoc", JavadocTask())
    registry.register("jpackage", JPackageTask())
    registry.register("info", DisplayInfoTask())
    registry.register("deps", DepsTask())
    registry.register("publish", PublishTask())
    registry.register("new", NewProjectTask())
    registry.register("version", VersionTask())
    registry.register("health", HealthCheckTask())
    registry.register("register", RegisterAuthorTask())
    registry.register("config", ConfigTask())
    return registry
