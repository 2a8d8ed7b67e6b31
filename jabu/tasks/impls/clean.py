import shutil

from ..base import Task


class CleanTask(Task):
    """Removes and recreates the target directory."""
    description = "Empties the target directory of the project."

    def execute(self, args, parsed_args, project, context):
        target = context.resolve(project.fs_schema.target)
        if target.exists():
            shutil.rmtree(target)
        target.mkdir(parents=True)
