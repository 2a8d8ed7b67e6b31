"""
Project descriptor persistence for jabu.

Loads ``jabu.yaml`` from a project directory into a ``JabuProject`` and
creates the skeleton of new projects.
"""

import logging
from pathlib import Path
from typing import Union

import yaml

from ..domain import DESCRIPTOR_FILE_NAME, JabuProject, ProjectShapeError
from ..errors import InvalidConfig, TaskIOError

logger = logging.getLogger(__name__)

SAMPLE_MAIN_CLASS = """\
/*
 * Auto-generated file by Jabu.
 */

public class App {
    public static void main(String[] args) {
        System.out.println("Hello World from Jabu!");
    }
}
"""


def descriptor_path(project_dir: Union[str, Path]) -> Path:
    return Path(project_dir) / DESCRIPTOR_FILE_NAME


def load_project(project_dir: Union[str, Path]) -> JabuProject:
    """
    Read the project descriptor of ``project_dir``.

    Read fresh on every call; nothing is cached.

    Raises:
        TaskIOError: the descriptor can't be read
        InvalidConfig: the descriptor is not valid YAML or has a bad shape
    """
    path = descriptor_path(project_dir)
    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise TaskIOError(e) from e
    except yaml.YAMLError as e:
        raise InvalidConfig(str(e)) from e

    try:
        return JabuProject.from_dict(data)
    except ProjectShapeError as e:
        raise InvalidConfig(f"{path}: {e}") from e


def dump_project(project: JabuProject) -> str:
    return yaml.safe_dump(project.to_dict(), default_flow_style=False, sort_keys=False)


def create_project(base_dir: Union[str, Path], project: JabuProject) -> Path:
    """
    Create a new project directory under ``base_dir``.

    Writes the layout directories, a sample ``App.java`` and the descriptor.

    Returns:
        The project directory

    Raises:
        OSError: on filesystem failure (including an existing directory)
    """
    project_dir = Path(base_dir) / project.header.project_name
    project_dir.mkdir(parents=True)

    for directory in project.fs_schema.directories():
        (project_dir / directory).mkdir(parents=True, exist_ok=True)

    main_class = project_dir / project.fs_schema.source / "App.java"
    main_class.write_text(SAMPLE_MAIN_CLASS)

    descriptor_path(project_dir).write_text(dump_project(project))
    logger.info(f"Created project {project.header.project_name} at {project_dir}")
    return project_dir
