from ...args import Options, ParOptionBuilder
from ...errors import Generic
from ...infra import run_command
from ...tools import JavaToolConfig
from ..base import Task
from .sources import lib_classpath


class RunTask(Task):
    description = "Runs the current project."
    required_tools = ("java", "javac")

    def dependency_specs(self):
        return {"build": []}

    def options(self):
        return Options([
            ParOptionBuilder()
            .name("main-class")
            .short("c")
            .description("Specify which class to run.")
            .has_arg(True)
            .build()
        ])

    def execute(self, args, parsed_args, project, context):
        main_class = parsed_args.get_option_value("main-class") or project.main_class
        if not main_class:
            raise Generic(
                "The project is either not executable, or doesn't contain a "
                "'Main-Class' key in the manifest of the jabu config."
            )

        classpath = [str(context.resolve(project.fs_schema.target_classes))]
        classpath += lib_classpath(project, context.project_dir)

        java = JavaToolConfig(main_class=main_class, classpath=classpath,
                              arguments=list(parsed_args.arg_list))
        run_command(context.java_home.require("java"), java.into_args(),
                    cwd=context.project_dir, name="java")
