"""
Local artifact repository for jabu.

Artifacts are stored as two sibling files:

    <base_path>/<author>/<artifact_id>/<version>.jar   binary payload
    <base_path>/<author>/<artifact_id>/<version>.ron   descriptor payload

Writes go to temp files first and are renamed into place binary first,
descriptor last, so a reader never sees a descriptor without its binary.
Saves into one artifact directory are serialized by an advisory lock on
its ``.lock`` file.
"""

import contextlib
import logging
import os
import tempfile
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional, Set, Union

try:
    import fcntl
except ImportError:  # Windows
    fcntl = None

from ..domain import ArtifactSpec
from ..errors import InvalidConfig

logger = logging.getLogger(__name__)

DEFAULT_REPOSITORY_DIRNAME = ".jaburepo"
LOCK_FILENAME = ".lock"


class ArtifactKind(Enum):
    """Which half of an artifact a path refers to."""
    BINARY = "jar"
    DESCRIPTOR = "ron"

    @property
    def extension(self) -> str:
        return self.value


def default_repository_path() -> Path:
    """``~/.jaburepo``."""
    return Path.home() / DEFAULT_REPOSITORY_DIRNAME


def _check_component(value: str, field: str) -> str:
    """
    Reject spec fields that would leave their directory.

    Raises:
        InvalidConfig: for empty values, dot segments or path separators
    """
    separators = {"/", "\\", os.sep} | ({os.altsep} if os.altsep else set())
    if value in ("", ".", "..") or "\0" in value or any(sep in value for sep in separators):
        raise InvalidConfig(f"Artifact {field} '{value}' is not a valid path component")
    return value


class Repository:
    """
    On-disk, file-per-artifact-version store.

    Lookups against an author or artifact that was never saved return
    ``None``; filesystem failures raise ``OSError``.

    Example:
        repo = Repository(Path("~/.jaburepo"))
        spec = ArtifactSpec.parse("me.user:registry:0.0.1")
        repo.save(spec, jar_bytes, descriptor_bytes)
        repo.exists(spec)  # True
    """

    def __init__(self, base_path: Union[str, Path, None] = None):
        if base_path is None:
            base_path = default_repository_path()
        self.base_path = Path(base_path).expanduser()

    def __repr__(self) -> str:
        return f"Repository({str(self.base_path)!r})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Repository) and self.base_path == other.base_path

    def author_dir(self, author: str) -> Path:
        return self.base_path / _check_component(author, "author")

    def artifact_dir(self, author: str, artifact_id: str) -> Path:
        return self.author_dir(author) / _check_component(artifact_id, "id")

    def path_for(self, spec: ArtifactSpec, kind: ArtifactKind) -> Path:
        """
        Path of one half of an artifact.

        Doesn't check that the file exists.

        Raises:
            InvalidConfig: if a field of ``spec`` isn't a plain path component
        """
        version = _check_component(spec.version, "version")
        return self.artifact_dir(spec.author, spec.artifact_id) / f"{version}.{kind.extension}"

    def jar_path(self, spec: ArtifactSpec) -> Path:
        return self.path_for(spec, ArtifactKind.BINARY)

    def descriptor_path(self, spec: ArtifactSpec) -> Path:
        return self.path_for(spec, ArtifactKind.DESCRIPTOR)

    def author_exists(self, author: str) -> bool:
        return self.author_dir(author).is_dir()

    def artifact_exists(self, author: str, artifact_id: str) -> bool:
        """True if any version of the artifact was saved by ``author``."""
        return self.artifact_dir(author, artifact_id).is_dir()

    def exists(self, spec: ArtifactSpec) -> bool:
        """True if both the descriptor and the binary of ``spec`` are present."""
        return self.descriptor_path(spec).is_file() and self.jar_path(spec).is_file()

    def save(self, spec: ArtifactSpec, binary: bytes, descriptor: bytes) -> None:
        """
        Store an artifact.

        Both payloads are written to temp files in the artifact directory,
        then renamed binary first and descriptor last. On failure the temp
        files are removed and the error propagates.

        Raises:
            OSError: on any filesystem failure
            InvalidConfig: if a field of ``spec`` isn't a plain path component
        """
        jar_path = self.jar_path(spec)
        descriptor_path = self.descriptor_path(spec)
        directory = jar_path.parent
        directory.mkdir(parents=True, exist_ok=True)

        with self._artifact_lock(directory):
            temp_paths = []
            try:
                jar_temp = self._write_temp(directory, spec, ArtifactKind.BINARY, binary)
                temp_paths.append(jar_temp)
                descriptor_temp = self._write_temp(directory, spec, ArtifactKind.DESCRIPTOR, descriptor)
                temp_paths.append(descriptor_temp)

                os.replace(jar_temp, jar_path)
                os.replace(descriptor_temp, descriptor_path)
            except Exception:
                for temp_path in temp_paths:
                    with contextlib.suppress(FileNotFoundError):
                        os.unlink(temp_path)
                raise

        logger.debug(f"Saved artifact {spec} into {directory}")

    def _write_temp(self, directory: Path, spec: ArtifactSpec,
                    kind: ArtifactKind, content: bytes) -> str:
        fd, temp_path = tempfile.mkstemp(
            dir=directory,
            prefix=f".{spec.version}.",
            suffix=f".{kind.extension}.tmp",
        )
        try:
            with os.fdopen(fd, 'wb') as f:
                f.write(content)
        except Exception:
            with contextlib.suppress(FileNotFoundError):
                os.unlink(temp_path)
            raise
        return temp_path

    @contextlib.contextmanager
    def _artifact_lock(self, directory: Path) -> Iterator[None]:
        """Advisory lock on one artifact directory (no-op without fcntl)."""
        if fcntl is None:
            yield
            return

        lock_path = directory / LOCK_FILENAME
        with open(lock_path, 'a') as lock_file:
            fcntl.flock(lock_file.fileno(), fcntl.LOCK_EX)
            try:
                yield
            finally:
                fcntl.flock(lock_file.fileno(), fcntl.LOCK_UN)

    def list_versions(self, author: str, artifact_id: str) -> Optional[Set[str]]:
        """
        Versions of an artifact, taken from the descriptor file names.

        Returns:
            None if the artifact directory can't be read (never saved)
        """
        try:
            entries = list(os.scandir(self.artifact_dir(author, artifact_id)))
        except (FileNotFoundError, NotADirectoryError):
            return None

        suffix = f".{ArtifactKind.DESCRIPTOR.extension}"
        return {
            entry.name[:-len(suffix)]
            for entry in entries
            if entry.name.endswith(suffix)
            and not entry.name.startswith(".")
            and entry.is_file()
        }

    def list_author_artifacts(self, author: str) -> Optional[Set[str]]:
        """
        Artifact ids saved by ``author``.

        Returns:
            None if the author directory doesn't exist
        """
        directory = self.author_dir(author)
        if not directory.is_dir():
            return None
        return {entry.name for entry in os.scandir(directory) if entry.is_dir()}
