"""
jabu - a build tool for Java projects.

jabu runs named tasks (build, jar, run, publish, ...) against a project
described by ``jabu.yaml``, resolving their tool requirements, arguments
and dependency tasks first. Artifacts are cached in a local repository
(``~/.jaburepo``) and exchanged with a remote repository over HTTP.

Quick Start:
    from jabu.services import Orchestrator
    from jabu.tasks.impls import default_registry

    Orchestrator(default_registry()).execute("jar", [], "path/to/project")

Domain Objects:
    ArtifactSpec - author:artifact:version coordinates
    JabuProject - the parsed project descriptor

Infrastructure:
    Repository - local artifact repository
    RemoteClient - remote artifact repository
"""

__version__ = "0.1.0"

from .domain import ArtifactSpec, JabuProject
from .errors import TaskError, render_error
from .infra import RemoteClient, Repository

__all__ = [
    '__version__',
    'ArtifactSpec',
    'JabuProject',
    'RemoteClient',
    'Repository',
    'TaskError',
    'render_error',
]
