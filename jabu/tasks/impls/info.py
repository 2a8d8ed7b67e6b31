from ...render import render_table
from ..base import Task


class DisplayInfoTask(Task):
    description = "Displays the info of the current project."

    def execute(self, args, parsed_args, project, context):
        header = project.header
        rows = [
            ["Artifact", project.display_name()],
            ["Description", header.description],
            ["Java", f"{project.java_config.java_version} "
                     f"(source {project.java_config.source}, target {project.java_config.target})"],
            ["Main class", project.main_class or "-"],
            ["Local dependencies", len(project.dependencies.local)],
            ["Remote dependencies", len(project.dependencies.remote)],
        ]
        render_table(["Property", "Value"], rows, title=header.project_name)
