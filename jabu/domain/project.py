"""
Project domain objects for jabu.

JabuProject is the in-memory form of a project's descriptor (``jabu.yaml``):
header metadata, java settings, jar manifest, file layout and dependencies.
Reading the file lives in ``jabu.infra.project_loader``; this module only
validates the shape of the already-parsed data.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from .artifact import ArtifactSpec, ArtifactSpecError


DESCRIPTOR_FILE_NAME = "jabu.yaml"


class ProjectShapeError(ValueError):
    """The parsed descriptor doesn't have the expected structure."""


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = data.get(name) or {}
    if not isinstance(value, dict):
        raise ProjectShapeError(f"Section '{name}' must be a mapping")
    return value


@dataclass(frozen=True)
class ConfigHeader:
    """Project metadata: name, author, description and version."""
    project_name: str
    author: str = "anon"
    description: str = "A Java project."
    version: str = "0.0.1"

    @classmethod
    def of_project_name(cls, project_name: str) -> 'ConfigHeader':
        return cls(project_name=project_name)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'project_name': self.project_name,
            'author': self.author,
            'description': self.description,
            'version': self.version,
        }


@dataclass(frozen=True)
class JavaConfig:
    """JDK versions used to compile the project."""
    java_version: int = 17
    source: int = 17
    target: int = 17

    def to_dict(self) -> Dict[str, Any]:
        return {
            'java_version': self.java_version,
            'source': self.source,
            'target': self.target,
        }


@dataclass(frozen=True)
class FsSchema:
    """File layout of a project, relative to the project directory."""
    source: str = "./src/main"
    target: str = "./target"
    lib: str = "./lib"
    resources: str = "./src/resources"
    scripts: str = "./scripts"
    test: str = "./src/test"
    other: Tuple[str, ...] = ()

    @property
    def target_classes(self) -> Path:
        return Path(self.target) / "classes"

    @property
    def target_bin(self) -> Path:
        return Path(self.target) / "bin"

    @property
    def target_docs(self) -> Path:
        return Path(self.target) / "docs"

    @property
    def target_self_contained(self) -> Path:
        return Path(self.target) / "self-contained"

    def directories(self) -> Tuple[str, ...]:
        """All directories a fresh project is created with."""
        return (self.source, self.resources, self.target, self.lib,
                self.scripts, self.test) + tuple(self.other)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'source': self.source,
            'target': self.target,
            'lib': self.lib,
            'resources': self.resources,
            'scripts': self.scripts,
            'test': self.test,
            'other': list(self.other),
        }


@dataclass(frozen=True)
class DependenciesConfig:
    """
    Dependencies of a project.

    ``local`` artifacts are expected as jars inside the ``lib`` directory,
    ``remote`` artifacts are fetched through the repositories.
    """
    local: Tuple[ArtifactSpec, ...] = ()
    remote: Tuple[ArtifactSpec, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.local and not self.remote

    def to_dict(self) -> Dict[str, Any]:
        return {
            'local': [str(spec) for spec in self.local],
            'remote': [str(spec) for spec in self.remote],
        }


@dataclass(frozen=True)
class JabuProject:
    """
    A jabu project as described by its descriptor file.

    Example:
        project = JabuProject.default_of_name("hello")
        project.artifact_spec()   # ArtifactSpec("anon", "hello", "0.0.1")
    """
    header: ConfigHeader
    java_config: JavaConfig = field(default_factory=JavaConfig)
    manifest: Dict[str, str] = field(default_factory=dict)
    fs_schema: FsSchema = field(default_factory=FsSchema)
    dependencies: DependenciesConfig = field(default_factory=DependenciesConfig)

    @classmethod
    def default_of_name(cls, project_name: str) -> 'JabuProject':
        return cls(
            header=ConfigHeader.of_project_name(project_name),
            manifest={"Main-Class": "App"},
        )

    @classmethod
    def from_dict(cls, data: Any) -> 'JabuProject':
        """
        Build a project from parsed descriptor data.

        Raises:
            ProjectShapeError: if sections are missing or malformed
        """
        if not isinstance(data, dict):
            raise ProjectShapeError("The descriptor must be a mapping")

        header = _section(data, 'header')
        if 'project_name' not in header:
            raise ProjectShapeError("Missing 'header.project_name'")

        fs = _section(data, 'fs_schema')
        deps = _section(data, 'dependencies')
        manifest = _section(data, 'manifest')

        try:
            return cls(
                header=ConfigHeader(**{k: str(v) for k, v in header.items()}),
                java_config=JavaConfig(**_section(data, 'java_config')),
                manifest={str(k): str(v) for k, v in manifest.items()},
                fs_schema=FsSchema(**{
                    **fs, 'other': tuple(fs.get('other') or ())
                }),
                dependencies=DependenciesConfig(
                    local=tuple(ArtifactSpec.parse(s) for s in deps.get('local') or ()),
                    remote=tuple(ArtifactSpec.parse(s) for s in deps.get('remote') or ()),
                ),
            )
        except (TypeError, ArtifactSpecError) as e:
            raise ProjectShapeError(str(e)) from e

    def artifact_spec(self) -> ArtifactSpec:
        """The artifact this project publishes."""
        return ArtifactSpec(
            author=self.header.author,
            artifact_id=self.header.project_name,
            version=self.header.version,
        )

    def display_name(self) -> str:
        return str(self.artifact_spec())

    @property
    def main_class(self) -> Optional[str]:
        return self.manifest.get("Main-Class")

    def to_dict(self) -> Dict[str, Any]:
        return {
            'header': self.header.to_dict(),
            'java_config': self.java_config.to_dict(),
            'manifest': dict(self.manifest),
            'fs_schema': self.fs_schema.to_dict(),
            'dependencies': self.dependencies.to_dict(),
        }
