"""
Domain layer for jabu.

Contains pure value objects with no I/O:
- ArtifactSpec: (author, artifact_id, version) identity of an artifact
- JabuProject: a project's descriptor (header, layout, dependencies)
"""

from .artifact import ArtifactSpec, ArtifactSpecError
from .project import (
    DESCRIPTOR_FILE_NAME,
    ConfigHeader,
    DependenciesConfig,
    FsSchema,
    JabuProject,
    JavaConfig,
    ProjectShapeError,
)

__all__ = [
    'ArtifactSpec',
    'ArtifactSpecError',
    'DESCRIPTOR_FILE_NAME',
    'ConfigHeader',
    'DependenciesConfig',
    'FsSchema',
    'JabuProject',
    'JavaConfig',
    'ProjectShapeError',
]
