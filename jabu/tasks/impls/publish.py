from ...args import Options, ParOptionBuilder
from ...render import console
from ...services.dependency_service import DependencyService
from ..base import Task


class PublishTask(Task):
    """Uploads the project's jar and descriptor to the remote repository."""
    description = "Publishes the project's jar to the remote repository."
    required_tools = ("jar",)

    def dependency_specs(self):
        return {"jar": []}

    def options(self):
        return Options([
            ParOptionBuilder()
            .name("author-key")
            .short("k")
            .description("Credential issued when the author was registered.")
            .has_arg(True)
            .required(True)
            .build()
        ])

    def execute(self, args, parsed_args, project, context):
        service = DependencyService(context.repository, context.remote)
        spec = service.publish(project, context.project_dir,
                               parsed_args.get_option_value("author-key"))
        console.print(f"[green]==> Published {spec} to {context.remote.base_url}[/green]")
