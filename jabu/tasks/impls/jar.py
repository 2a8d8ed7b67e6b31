import logging
from pathlib import Path

from ...domain import JabuProject
from ...infra import run_command
from ...tools import JarToolConfig
from ..base import Task
from .sources import project_jar

logger = logging.getLogger(__name__)

MANIFEST_FILE_NAME = "MANIFEST.MF"


def write_manifest(project: JabuProject, project_dir: Path) -> Path:
    """Write ``target/bin/MANIFEST.MF`` as ``key: value`` lines."""
    bin_dir = Path(project_dir) / project.fs_schema.target_bin
    bin_dir.mkdir(parents=True, exist_ok=True)
    manifest_path = bin_dir / MANIFEST_FILE_NAME
    lines = [f"{key}: {value}" for key, value in project.manifest.items()]
    manifest_path.write_text("\n".join(lines) + "\n")
    return manifest_path


class JarTask(Task):
    """Packages ``target/classes`` into ``target/bin/<spec>.jar``."""
    description = "Creates a jar containing the compiled classes of the project."
    required_tools = ("javac", "jar")

    def dependency_specs(self):
        return {"build": []}

    def execute(self, args, parsed_args, project, context):
        manifest_path = write_manifest(project, context.project_dir)

        jar = JarToolConfig.for_classes(
            project_jar(project, context.project_dir),
            context.resolve(project.fs_schema.target_classes),
        )
        jar.manifest_location = manifest_path
        run_command(context.java_home.require("jar"), jar.into_args(),
                    cwd=context.project_dir, name="jar")
