"""
Unit tests for jabu.config
"""

import json
import logging

import pytest
import toml
import yaml

from jabu.config import (
    apply_env_overrides,
    configure_logging,
    get_config_path,
    get_default_config,
    get_remote_timeout,
    get_remote_url,
    get_repository_path,
    load_config,
    merge_configs,
    save_config,
)
from jabu.infra import DEFAULT_REMOTE_URL


class TestConfigFiles:
    """Tests for locating, loading and saving the configuration file."""

    def test_default_config_structure(self):
        config = get_default_config()
        assert config['remote']['url'] == DEFAULT_REMOTE_URL
        assert config['remote']['timeout_seconds'] is None
        assert config['repository']['path'].endswith('.jaburepo')
        assert 'level' in config['logging']

    def test_load_without_file(self, isolated_env):
        assert load_config() == get_default_config()
        assert get_config_path() == isolated_env / '.jabu' / 'config.json'

    def test_load_json(self, isolated_env):
        config_dir = isolated_env / '.jabu'
        config_dir.mkdir()
        (config_dir / 'config.json').write_text(json.dumps({'remote': {'url': 'http://json'}}))

        config = load_config()
        assert config['remote']['url'] == 'http://json'
        assert config['remote']['timeout_seconds'] is None

    def test_load_yaml(self, isolated_env):
        config_dir = isolated_env / '.jabu'
        config_dir.mkdir()
        (config_dir / 'config.yaml').write_text(yaml.safe_dump({'repository': {'path': '/repo'}}))
        assert get_repository_path(load_config()).as_posix() == '/repo'

    def test_load_toml(self, isolated_env):
        config_dir = isolated_env / '.jabu'
        config_dir.mkdir()
        (config_dir / 'config.toml').write_text(toml.dumps({'remote': {'timeout_seconds': 12}}))
        assert get_remote_timeout(load_config()) == 12

    def test_jabu_config_env(self, monkeypatch, tmp_path):
        path = tmp_path / 'custom.yml'
        path.write_text("remote:\n  url: http://custom\n")
        monkeypatch.setenv('JABU_CONFIG', str(path))

        assert get_config_path() == path
        assert load_config()['remote']['url'] == 'http://custom'

    def test_malformed_file_falls_back_to_defaults(self, isolated_env):
        config_dir = isolated_env / '.jabu'
        config_dir.mkdir()
        (config_dir / 'config.json').write_text('{not json')
        assert load_config() == get_default_config()

    def test_save_toml(self, monkeypatch, tmp_path):
        path = tmp_path / 'config.toml'
        path.write_text('')
        monkeypatch.setenv('JABU_CONFIG', str(path))

        save_config(get_default_config())
        assert toml.load(path)['remote']['url'] == DEFAULT_REMOTE_URL

    def test_save_default_location(self, isolated_env):
        save_config({'remote': {'url': 'http://saved'}})
        saved = json.loads((isolated_env / '.jabu' / 'config.json').read_text())
        assert saved == {'remote': {'url': 'http://saved'}}


class TestMergeAndOverrides:
    """Tests for merging and environment overrides."""

    def test_merge_is_recursive(self):
        merged = merge_configs({'a': {'b': 1, 'c': 2}}, {'a': {'c': 3}, 'd': 4})
        assert merged == {'a': {'b': 1, 'c': 3}, 'd': 4}

    def test_env_override_with_underscored_key(self, monkeypatch):
        monkeypatch.setenv('JABU_REMOTE_TIMEOUT_SECONDS', '30')
        config = apply_env_overrides(get_default_config())
        assert config['remote']['timeout_seconds'] == 30

    def test_env_override_string(self, monkeypatch):
        monkeypatch.setenv('JABU_LOGGING_LEVEL', 'DEBUG')
        assert apply_env_overrides(get_default_config())['logging']['level'] == 'DEBUG'

    def test_unknown_env_keys_ignored(self, monkeypatch):
        monkeypatch.setenv('JABU_NOT_A_SECTION', '1')
        assert apply_env_overrides(get_default_config()) == get_default_config()


class TestAccessors:
    """Tests for the typed accessors."""

    def test_remote_url_env_wins(self, monkeypatch):
        config = {'remote': {'url': 'http://configured'}}
        assert get_remote_url(config) == 'http://configured'

        monkeypatch.setenv('JABU_REMOTE_REPO', 'http://env')
        assert get_remote_url(config) == 'http://env'

    def test_remote_url_default(self):
        assert get_remote_url({}) == DEFAULT_REMOTE_URL

    def test_repository_path_expands_user(self, isolated_env):
        config = {'repository': {'path': '~/artifacts'}}
        assert get_repository_path(config) == isolated_env / 'artifacts'

    def test_remote_timeout_unset(self):
        assert get_remote_timeout({}) is None
        assert get_remote_timeout(get_default_config()) is None

    def test_remote_timeout_fractional_env_value(self, monkeypatch):
        monkeypatch.setenv('JABU_REMOTE_TIMEOUT_SECONDS', '2.5')
        assert get_remote_timeout(load_config()) == 2.5

    @pytest.mark.parametrize('value', [0, -3, '0', 'abc', True, [5]])
    def test_remote_timeout_invalid_values_ignored(self, value):
        assert get_remote_timeout({'remote': {'timeout_seconds': value}}) is None

    def test_remote_timeout_zero_from_env_ignored(self, monkeypatch):
        monkeypatch.setenv('JABU_REMOTE_TIMEOUT_SECONDS', '0')
        assert get_remote_timeout(load_config()) is None


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_level_from_config(self):
        configure_logging({'logging': {'level': 'warning'}})
        logger = logging.getLogger('jabu')
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
        assert not logger.propagate

    def test_verbose_forces_debug(self):
        configure_logging(get_default_config(), verbose=True)
        assert logging.getLogger('jabu').level == logging.DEBUG
