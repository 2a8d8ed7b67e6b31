import logging

from ...args import InvalidArgError, Options, ParOptionBuilder
from ...errors import InvalidArguments
from ...infra import run_command
from ...tools import JavadocToolConfig, JavaVisibilityLevel
from ..base import Task
from .sources import java_sources, lib_classpath

logger = logging.getLogger(__name__)


class JavadocTask(Task):
    description = "Generates the project's javadoc."
    required_tools = ("javadoc",)

    def options(self):
        return Options([
            ParOptionBuilder()
            .name("visibility")
            .short("v")
            .description("Lowest visibility documented: private, protected or public.")
            .has_arg(True)
            .default_value(JavaVisibilityLevel.PRIVATE.value)
            .build()
        ])

    def execute(self, args, parsed_args, project, context):
        value = parsed_args.get_option_value("visibility")
        try:
            visibility = JavaVisibilityLevel.parse(value)
        except ValueError:
            raise InvalidArguments({
                InvalidArgError.invalid_option_value("visibility", f"Unknown level '{value}'.")
            })

        sources = java_sources(project, context.project_dir)
        if not sources:
            logger.warning("No sources to parse.")
            return

        javadoc = JavadocToolConfig(
            sources=[str(source) for source in sources],
            output_dir=context.resolve(project.fs_schema.target_docs),
            java_config=project.java_config,
            visibility=visibility,
            classpath=lib_classpath(project, context.project_dir),
        )
        run_command(context.java_home.require("javadoc"), javadoc.into_args(),
                    cwd=context.project_dir, name="javadoc")
