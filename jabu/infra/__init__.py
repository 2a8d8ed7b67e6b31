"""
Infrastructure layer for jabu.

Contains abstractions for external systems:
- Repository: local on-disk artifact store
- RemoteClient: HTTP access to a remote repository service
- run_command: JDK tool execution
- load_project / create_project: project descriptor persistence

These provide clean interfaces that can be mocked for testing.
"""

from .command_runner import run_command
from .project_loader import create_project, dump_project, load_project
from .remote_client import DEFAULT_REMOTE_URL, RemoteClient, resolve_remote_url
from .repository import ArtifactKind, Repository, default_repository_path

__all__ = [
    'run_command',
    'create_project',
    'dump_project',
    'load_project',
    'DEFAULT_REMOTE_URL',
    'RemoteClient',
    'resolve_remote_url',
    'ArtifactKind',
    'Repository',
    'default_repository_path',
]
