"""
Dependency service for jabu.

Moves artifacts between the remote repository, the local repository and a
project's ``lib`` directory:
- fetch: copy from the local repository, download what's missing
- status: which declared dependencies are present
- publish: upload the project's jar and descriptor
"""

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from ..domain import ArtifactSpec, ArtifactSpecError, JabuProject
from ..infra import RemoteClient, Repository
from ..infra.project_loader import descriptor_path

logger = logging.getLogger(__name__)


@dataclass
class FetchReport:
    """What a fetch did with each remote dependency."""
    copied: List[ArtifactSpec] = field(default_factory=list)
    downloaded: List[ArtifactSpec] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.copied) + len(self.downloaded)

    def to_dict(self) -> Dict[str, List[str]]:
        return {
            'copied': [str(spec) for spec in self.copied],
            'downloaded': [str(spec) for spec in self.downloaded],
        }


def lib_jar_name(spec: ArtifactSpec) -> str:
    """Name of a dependency's jar inside ``lib``: ``author:artifact:version.jar``."""
    return f"{spec}.jar"


class DependencyService:
    """
    Resolves a project's dependencies through the repositories.

    Example:
        service = DependencyService(Repository(), RemoteClient())
        report = service.fetch(project, project_dir)
    """

    def __init__(self, repository: Repository, remote: RemoteClient):
        self.repository = repository
        self.remote = remote

    def fetch(self, project: JabuProject, project_dir: Path) -> FetchReport:
        """
        Put every remote dependency of ``project`` into its ``lib`` directory.

        Artifacts already in the local repository are copied from there.
        The others are downloaded; an artifact is saved into the local
        repository only when both of its halves arrived.

        Raises:
            UnavailableResource: a download failed (later ones aren't tried)
            OSError: a filesystem operation failed
        """
        lib_dir = Path(project_dir) / project.fs_schema.lib
        lib_dir.mkdir(parents=True, exist_ok=True)
        report = FetchReport()

        local = [dep for dep in project.dependencies.remote if self.repository.exists(dep)]
        missing = [dep for dep in project.dependencies.remote if not self.repository.exists(dep)]

        if local:
            logger.info(f"Copying {len(local)} dependencies from the local repository...")
        for dep in local:
            self._copy_to_lib(dep, lib_dir)
            report.copied.append(dep)

        if missing:
            logger.info(f"Fetching {len(missing)} remote dependencies from {self.remote.base_url}...")
        for dep in missing:
            logger.info(f"==> FETCHING artifact {dep}")
            binary, descriptor = self.remote.fetch(dep)
            self.repository.save(dep, binary, descriptor)
            self._copy_to_lib(dep, lib_dir)
            report.downloaded.append(dep)

        return report

    def _copy_to_lib(self, spec: ArtifactSpec, lib_dir: Path) -> None:
        source = self.repository.jar_path(spec)
        target = lib_dir / lib_jar_name(spec)
        logger.debug(f"Copying {source} to {target}")
        shutil.copyfile(source, target)

    def local_status(self, project: JabuProject, project_dir: Path) -> Dict[str, bool]:
        """
        Declared local dependencies and whether their jar is in ``lib``.

        Files in ``lib`` whose stem isn't an artifact spec are ignored.
        """
        lib_dir = Path(project_dir) / project.fs_schema.lib
        present = set()
        if lib_dir.is_dir():
            for entry in lib_dir.iterdir():
                try:
                    present.add(ArtifactSpec.parse(entry.stem))
                except ArtifactSpecError:
                    continue
        return {str(dep): dep in present for dep in project.dependencies.local}

    def remote_status(self, project: JabuProject) -> Dict[str, bool]:
        """Declared remote dependencies and whether they're in the local repository."""
        return {str(dep): self.repository.exists(dep) for dep in project.dependencies.remote}

    def publish(self, project: JabuProject, project_dir: Path, credential: str,
                base_url: Optional[str] = None) -> ArtifactSpec:
        """
        Upload the project's jar and descriptor, then cache them locally.

        Raises:
            OSError: the jar or descriptor can't be read
            UnavailableResource: the upload failed
        """
        spec = project.artifact_spec()
        jar_path = Path(project_dir) / project.fs_schema.target_bin / lib_jar_name(spec)

        logger.info(f"Reading from file '{jar_path}'...")
        binary = jar_path.read_bytes()
        descriptor = descriptor_path(project_dir).read_bytes()

        self.remote.publish(spec, credential, binary, descriptor, base_url=base_url)
        self.repository.save(spec, binary, descriptor)
        return spec
