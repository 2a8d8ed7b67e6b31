"""Tasks that run outside of a project."""

import logging

from ... import __version__
from ...args import Options
from ...config import get_config_path, get_default_config, save_config
from ...domain import JabuProject
from ...errors import Generic
from ...infra import create_project
from ...render import console, render_table, render_tool_table
from ..base import TopLevelTask

logger = logging.getLogger(__name__)


class NewProjectTask(TopLevelTask):
    description = "Creates a new project: new <name>."

    def options(self):
        return Options()

    def execute(self, args, parsed_args, project, context):
        if not parsed_args.arg_list:
            raise Generic("Please specify the name of the new project: jabu new <name>")

        name = parsed_args.arg_list[0]
        if context.resolve(name).exists():
            raise Generic(f"A file or directory named '{name}' already exists.")

        project_dir = create_project(context.project_dir, JabuProject.default_of_name(name))
        console.print(f"[green]==> Created project '{name}' at {project_dir}[/green]")


class VersionTask(TopLevelTask):
    description = "Displays the version of jabu."

    def execute(self, args, parsed_args, project, context):
        console.print(f"jabu {__version__}")


class HealthCheckTask(TopLevelTask):
    description = "Checks which JDK tools are available."

    def execute(self, args, parsed_args, project, context):
        render_tool_table(context.java_home.tools(), context.java_home.home)
        if not context.java_home.is_valid:
            console.print("[yellow]==> Some essential tools are missing; "
                          "set JAVA_HOME to a JDK installation.[/yellow]")


class RegisterAuthorTask(TopLevelTask):
    """Registers an author on the remote repository and prints its credential."""
    description = "Registers an author in the remote repository: register <author>."

    def options(self):
        return Options()

    def execute(self, args, parsed_args, project, context):
        if not parsed_args.arg_list:
            raise Generic("Please specify the author name: jabu register <author>")

        author = parsed_args.arg_list[0]
        credential = context.remote.register_author(author)
        console.print(f"[green]==> Registered author '{author}'.[/green]")
        console.print(f"Author key (keep it safe, it is needed to publish): [bold]{credential}[/bold]")


def _flatten(config, prefix=""):
    for key, value in config.items():
        name = f"{prefix}{key}"
        if isinstance(value, dict):
            yield from _flatten(value, prefix=f"{name}.")
        else:
            yield name, value


class ConfigTask(TopLevelTask):
    """``config [show]`` prints the effective settings; ``config init`` writes the defaults."""
    description = "Shows the effective configuration, or writes a default one: config [show|init]."

    def options(self):
        return Options()

    def execute(self, args, parsed_args, project, context):
        action = parsed_args.arg_list[0] if parsed_args.arg_list else "show"
        if action == "show":
            rows = [[key, value] for key, value in _flatten(context.config)]
            render_table(["Key", "Value"], rows, title=str(get_config_path()))
        elif action == "init":
            path = get_config_path()
            if path.exists():
                raise Generic(f"Configuration file already exists: {path}")
            save_config(get_default_config())
            console.print(f"[green]==> Wrote default configuration to {path}[/green]")
        else:
            raise Generic(f"Unknown config action '{action}'; expected 'show' or 'init'.")
