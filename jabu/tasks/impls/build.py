import logging

from ...infra import run_command
from ...tools import JavacConfig
from ..base import Task
from .sources import java_sources, lib_classpath

logger = logging.getLogger(__name__)


class BuildTask(Task):
    """Compiles the project's sources into ``target/classes``."""
    description = "Builds the current project."
    required_tools = ("javac",)

    def execute(self, args, parsed_args, project, context):
        sources = java_sources(project, context.project_dir)
        if not sources:
            logger.warning("No sources to compile.")
            return

        logger.info(f"Sources to compile: {len(sources)}")
        for index, source in enumerate(sources, 1):
            logger.debug(f"{index}: {source}")

        javac = JavacConfig(
            sources=[str(source) for source in sources],
            output_dir=context.resolve(project.fs_schema.target_classes),
            java_config=project.java_config,
            classpath=lib_classpath(project, context.project_dir),
        )
        run_command(context.java_home.require("javac"), javac.into_args(),
                    cwd=context.project_dir, name="javac")
