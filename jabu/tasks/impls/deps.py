"""
The ``deps`` task and its subtasks.

``deps`` owns a registry of its own and dispatches its first argument to it
with a nested ``Orchestrator`` that shares the caller's context.
"""

import logging

from ...args import Options, ParOptionBuilder
from ...domain import ArtifactSpec
from ...errors import Generic
from ...render import console, render_dependency_status, render_table, render_task_table
from ...services.dependency_service import DependencyService
from ...services.orchestrator import Orchestrator
from ...services.task_registry import TaskRegistry
from ..base import Task

logger = logging.getLogger(__name__)


class ListDepsTask(Task):
    description = "Lists the dependencies of the project and whether they are present."

    def execute(self, args, parsed_args, project, context):
        service = DependencyService(context.repository, context.remote)
        render_dependency_status("Local dependencies",
                                 service.local_status(project, context.project_dir))
        render_dependency_status("Remote dependencies", service.remote_status(project))


class FetchDepsTask(Task):
    description = "Fetches the remote dependencies into the lib directory."

    def execute(self, args, parsed_args, project, context):
        if not project.dependencies.remote:
            console.print("[yellow]==> No remote dependencies specified in the jabu file.[/yellow]")
            return

        service = DependencyService(context.repository, context.remote)
        report = service.fetch(project, context.project_dir)
        console.print(
            f"[green]==> {report.total} dependencies in place "
            f"({len(report.copied)} from the local repository, "
            f"{len(report.downloaded)} downloaded).[/green]"
        )


class VersionsDepsTask(Task):
    """Lists the versions of an artifact known to the remote repository."""
    description = "Lists the remote versions of an artifact: versions <author> <artifact>."

    def options(self):
        return Options([
            ParOptionBuilder()
            .name("local")
            .description("Also list the versions in the local repository.")
            .build()
        ])

    def execute(self, args, parsed_args, project, context):
        if len(parsed_args.arg_list) < 2:
            raise Generic("Usage: deps versions <author> <artifact>")
        author, artifact_id = parsed_args.arg_list[:2]

        remote_versions = context.remote.list_versions(author, artifact_id)
        if remote_versions is None:
            raise Generic(f"The artifact '{author}:{artifact_id}' doesn't exist in the remote repository.")

        rows = [[ArtifactSpec(author, artifact_id, version), "remote"]
                for version in sorted(remote_versions)]
        if parsed_args.has_option("local"):
            local_versions = context.repository.list_versions(author, artifact_id) or set()
            rows += [[ArtifactSpec(author, artifact_id, version), "local"]
                     for version in sorted(local_versions)]
        render_table(["Artifact", "Repository"], rows, title=f"{author}:{artifact_id}")


def deps_registry() -> TaskRegistry:
    registry = TaskRegistry()
    registry.register("list", ListDepsTask())
    registry.register("fetch", FetchDepsTask())
    registry.register("versions", VersionsDepsTask())
    return registry


class DepsTask(Task):
    """Dispatches ``deps <subtask> [args...]``."""
    description = "Manages the dependencies of the project (list, fetch, versions)."

    def __init__(self, registry: TaskRegistry = None):
        self.registry = registry if registry is not None else deps_registry()

    def execute(self, args, parsed_args, project, context):
        if not args or args[0] in ("help", "--help"):
            render_task_table(self.registry.descriptors(), title="deps")
            return

        orchestrator = Orchestrator(self.registry, project_loader=lambda _: project)
        orchestrator.execute(args[0], args[1:], context.project_dir, context=context)
