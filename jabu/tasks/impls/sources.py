"""File lookups shared by the build tasks."""

from pathlib import Path
from typing import List

from ...domain import JabuProject


def java_sources(project: JabuProject, project_dir: Path) -> List[Path]:
    """Every ``.java`` file under the project's source directory, sorted."""
    source_dir = Path(project_dir) / project.fs_schema.source
    if not source_dir.is_dir():
        return []
    return sorted(path for path in source_dir.rglob("*.java") if path.is_file())


def lib_jars(project: JabuProject, project_dir: Path) -> List[Path]:
    """Every jar directly under the project's ``lib`` directory."""
    lib_dir = Path(project_dir) / project.fs_schema.lib
    if not lib_dir.is_dir():
        return []
    return sorted(path for path in lib_dir.glob("*.jar") if path.is_file())


def lib_classpath(project: JabuProject, project_dir: Path) -> List[str]:
    """
    Classpath entry for the jars of the ``lib`` directory.

    Dependency jars are named ``author:artifact:version.jar``, so they are
    passed as the ``lib/*`` wildcard rather than one path each.
    """
    if not lib_jars(project, project_dir):
        return []
    return [str(Path(project_dir) / project.fs_schema.lib / "*")]


def project_jar(project: JabuProject, project_dir: Path) -> Path:
    """The jar the ``jar`` task produces: ``target/bin/<spec>.jar``."""
    return Path(project_dir) / project.fs_schema.target_bin / f"{project.display_name()}.jar"
