"""
Tests for the local artifact repository.
"""

import os
from unittest.mock import patch

import pytest

from jabu.domain import ArtifactSpec
from jabu.errors import InvalidConfig
from jabu.infra import ArtifactKind, Repository, default_repository_path
from jabu.infra.repository import LOCK_FILENAME

SPEC = ArtifactSpec("me.user", "registry", "0.0.1")


class TestPaths:
    """Tests for path layout."""

    def test_layout(self, repository):
        base = repository.base_path
        assert repository.jar_path(SPEC) == base / "me.user/registry/0.0.1.jar"
        assert repository.descriptor_path(SPEC) == base / "me.user/registry/0.0.1.ron"
        assert repository.path_for(SPEC, ArtifactKind.BINARY) == repository.jar_path(SPEC)

    def test_default_path(self, isolated_env):
        assert Repository().base_path == isolated_env / ".jaburepo"
        assert default_repository_path() == isolated_env / ".jaburepo"

    @pytest.mark.parametrize("spec", [
        ArtifactSpec("..", "registry", "0.0.1"),
        ArtifactSpec("me.user", "../..", "0.0.1"),
        ArtifactSpec("me.user", "registry", "../../escape"),
        ArtifactSpec("me/user", "registry", "0.0.1"),
        ArtifactSpec("me.user", "reg\\istry", "0.0.1"),
        ArtifactSpec("", "registry", "0.0.1"),
        ArtifactSpec("me.user", "registry", "."),
    ])
    def test_rejects_unsafe_components(self, repository, spec):
        with pytest.raises(InvalidConfig):
            repository.path_for(spec, ArtifactKind.BINARY)

    def test_listing_rejects_unsafe_components(self, repository):
        with pytest.raises(InvalidConfig):
            repository.list_versions("..", "registry")
        with pytest.raises(InvalidConfig):
            repository.list_author_artifacts("../..")


class TestSaveAndExists:
    """Tests for save() and the existence checks."""

    def test_save_then_exists(self, repository):
        repository.save(SPEC, b"jar-bytes", b"descriptor-bytes")

        assert repository.exists(SPEC)
        assert repository.jar_path(SPEC).read_bytes() == b"jar-bytes"
        assert repository.descriptor_path(SPEC).read_bytes() == b"descriptor-bytes"
        assert repository.author_exists("me.user")
        assert repository.artifact_exists("me.user", "registry")

    def test_save_overwrites(self, repository):
        repository.save(SPEC, b"old", b"old")
        repository.save(SPEC, b"new", b"new")
        assert repository.jar_path(SPEC).read_bytes() == b"new"

    def test_nothing_saved(self, repository):
        assert not repository.exists(SPEC)
        assert not repository.author_exists("me.user")
        assert not repository.artifact_exists("me.user", "registry")

    def test_exists_requires_both_halves(self, repository):
        repository.descriptor_path(SPEC).parent.mkdir(parents=True)
        repository.descriptor_path(SPEC).write_bytes(b"descriptor only")
        assert not repository.exists(SPEC)

        repository.jar_path(SPEC).write_bytes(b"jar")
        assert repository.exists(SPEC)

    def test_failed_rename_leaves_no_files(self, repository):
        with patch("jabu.infra.repository.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(OSError):
                repository.save(SPEC, b"jar", b"descriptor")

        directory = repository.artifact_dir("me.user", "registry")
        leftovers = [name for name in os.listdir(directory) if name != LOCK_FILENAME]
        assert leftovers == []
        assert not repository.exists(SPEC)

    def test_save_outside_base_path_is_refused(self, repository):
        escape = ArtifactSpec("../..", "escape", "1")
        with pytest.raises(InvalidConfig):
            repository.save(escape, b"jar", b"descriptor")

        assert not (repository.base_path.parent.parent / "escape").exists()
        assert not repository.base_path.exists()

    def test_one_lock_file_per_artifact(self, repository):
        for version in ("0.0.1", "0.0.2", "0.0.3"):
            repository.save(ArtifactSpec("me.user", "registry", version), b"", b"")
        repository.save(ArtifactSpec("me.user", "registry", "0.0.1"), b"", b"")

        directory = repository.artifact_dir("me.user", "registry")
        hidden = [name for name in os.listdir(directory) if name.startswith(".")]
        assert hidden in ([], [LOCK_FILENAME])
        assert repository.list_versions("me.user", "registry") == {"0.0.1", "0.0.2", "0.0.3"}

    def test_descriptor_is_renamed_last(self, repository):
        renamed = []
        real_replace = os.replace

        def recording_replace(src, dst):
            renamed.append(os.path.basename(dst))
            real_replace(src, dst)

        with patch("jabu.infra.repository.os.replace", side_effect=recording_replace):
            repository.save(SPEC, b"jar", b"descriptor")

        assert renamed == ["0.0.1.jar", "0.0.1.ron"]


class TestListing:
    """Tests for list_versions() and list_author_artifacts()."""

    def test_list_versions(self, repository):
        repository.save(SPEC, b"", b"")
        repository.save(ArtifactSpec("me.user", "registry", "0.3.4"), b"", b"")
        assert repository.list_versions("me.user", "registry") == {"0.0.1", "0.3.4"}

    def test_list_versions_unknown_artifact(self, repository):
        assert repository.list_versions("nobody", "nothing") is None

    def test_list_author_artifacts(self, repository):
        repository.save(SPEC, b"", b"")
        repository.save(ArtifactSpec("me.user", "other", "1"), b"", b"")
        assert repository.list_author_artifacts("me.user") == {"registry", "other"}
        assert repository.list_author_artifacts("nobody") is None
