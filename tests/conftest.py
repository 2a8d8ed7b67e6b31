"""
Shared fixtures for the jabu test suite.

Nothing here needs the network or a Java installation: tools are fake
paths and ``run_command`` / HTTP sessions are patched per test.
"""

import logging
from pathlib import Path

import pytest

from jabu.domain import JabuProject
from jabu.infra import RemoteClient, Repository, create_project
from jabu.tasks import TaskContext
from jabu.tools import JavaHome
from jabu.tools.javahome import TOOL_NAMES

REMOTE_URL = "http://repo.test"


@pytest.fixture(autouse=True)
def reset_jabu_logger():
    """Undo the handler ``configure_logging`` installs during CLI tests."""
    yield
    logger = logging.getLogger("jabu")
    logger.handlers[:] = []
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep the user's config, repository and remote URL out of the tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for name in ("JABU_CONFIG", "JABU_REMOTE_REPO", "JAVA_HOME"):
        monkeypatch.delenv(name, raising=False)
    return home


@pytest.fixture
def project():
    return JabuProject.default_of_name("hello")


@pytest.fixture
def project_dir(tmp_path, project):
    """A freshly created project on disk."""
    return create_project(tmp_path / "workspace", project)


@pytest.fixture
def java_home():
    """A JavaHome that claims every tool."""
    return JavaHome(Path("/jdk"), {tool: Path(f"/jdk/bin/{tool}") for tool in TOOL_NAMES})


@pytest.fixture
def repository(tmp_path):
    return Repository(tmp_path / "jaburepo")


@pytest.fixture
def remote():
    return RemoteClient(REMOTE_URL)


@pytest.fixture
def context(project_dir, java_home, repository, remote):
    return TaskContext(
        project_dir=project_dir,
        java_home=java_home,
        repository=repository,
        remote=remote,
        config={},
    )
