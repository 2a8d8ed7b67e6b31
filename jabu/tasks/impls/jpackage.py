from ...args import Options, ParOptionBuilder
from ...errors import Generic
from ...infra import run_command
from ...tools import JPackageToolConfig
from ..base import Task
from .sources import project_jar


class JPackageTask(Task):
    description = "Generates a self-contained application of the project."
    required_tools = ("jpackage",)

    def dependency_specs(self):
        return {"jar": []}

    def options(self):
        return Options([
            ParOptionBuilder()
            .name("output-type")
            .short("t")
            .description("Type of the output application (platform dependant).")
            .has_arg(True)
            .build()
        ])

    def execute(self, args, parsed_args, project, context):
        if not project.main_class:
            raise Generic(
                "Cannot create a self-contained application on a non executable project."
            )

        jpackage = JPackageToolConfig(
            input_jar=project_jar(project, context.project_dir),
            name=project.header.project_name,
            main_class=project.main_class,
            destination=context.resolve(project.fs_schema.target_self_contained),
            output_type=parsed_args.get_option_value("output-type"),
        )
        run_command(context.java_home.require("jpackage"), jpackage.into_args(),
                    cwd=context.project_dir, name="jpackage")
