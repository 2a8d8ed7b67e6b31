#!/usr/bin/env python3

import click

from jabu import __version__
from jabu.config import configure_logging, load_config
from jabu.errors import TaskError, render_error
from jabu.exit_codes import INTERRUPTED, exit_with_code, get_exit_code_for_exception
from jabu.render import render_task_table
from jabu.services import Orchestrator
from jabu.tasks import TaskContext
from jabu.tasks.impls import default_registry

LIST_TASKS = ("tasks", "help")


@click.command(context_settings=dict(
    ignore_unknown_options=True,
    allow_interspersed_args=False,
))
@click.argument('task', required=False)
@click.argument('args', nargs=-1, type=click.UNPROCESSED)
@click.option('-d', '--directory', default='.', type=click.Path(file_okay=False),
              help='Project directory (default: current directory)')
@click.option('-v', '--verbose', is_flag=True, help='Log debug output to stderr')
@click.version_option(__version__, prog_name='jabu')
def cli(task, args, directory, verbose):
    """jabu - Build tool for Java projects.

    Runs TASK with ARGS in the project directory. Task options take the
    form --name or --name:value; everything after -- is passed through.
    Run 'jabu tasks' to list the available tasks.
    """
    config = load_config()
    configure_logging(config, verbose)
    registry = default_registry()

    if task is None or task in LIST_TASKS:
        render_task_table(registry.descriptors())
        return

    orchestrator = Orchestrator(
        registry,
        context_factory=lambda project_dir: TaskContext.create(project_dir, config),
    )
    try:
        orchestrator.execute(task, args, directory)
    except KeyboardInterrupt:
        exit_with_code(INTERRUPTED, "Interrupted by user")
    except TaskError as e:
        exit_with_code(get_exit_code_for_exception(e), render_error(e))
    except Exception as e:
        exit_with_code(get_exit_code_for_exception(e), f"Command failed: {e}")


def main():
    cli()

if __name__ == "__main__":
    main()
