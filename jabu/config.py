#!/usr/bin/env python3

import os
import json
import tomllib
from pathlib import Path

import logging
import sys

import yaml

from .infra.remote_client import DEFAULT_REMOTE_URL, REMOTE_URL_ENV
from .infra.repository import default_repository_path

logger = logging.getLogger("jabu")

CONFIG_ENV = "JABU_CONFIG"
ENV_PREFIX = "JABU_"
CONFIG_FILENAMES = ['config.json', 'config.toml', 'config.yaml', 'config.yml']


def configure_logging(config=None, verbose=False):
    """Install the stderr handler used by every jabu logger."""
    settings = (config or get_default_config()).get("logging", {})
    level = "DEBUG" if verbose else str(settings.get("level", "INFO")).upper()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(settings.get("format", "%(levelname)s: %(message)s")))

    logger.handlers[:] = [handler]
    logger.setLevel(getattr(logging, level, logging.INFO))
    logger.propagate = False


def get_config_dir():
    return Path.home() / '.jabu'


def get_config_path():
    """Get the path to the configuration file.

    Checks in order:
    1. JABU_CONFIG environment variable
    2. ~/.jabu/config.{json,toml,yaml,yml}
    """
    if CONFIG_ENV in os.environ:
        path = Path(os.environ[CONFIG_ENV])
        if path.exists():
            return path

    config_dir = get_config_dir()
    for filename in CONFIG_FILENAMES:
        path = config_dir / filename
        if path.exists():
            return path

    # If no file exists, return default path for saving
    return config_dir / 'config.json'


def load_config():
    """Load configuration from file."""
    config_path = get_config_path()

    config = get_default_config()

    if config_path.exists():
        try:
            if config_path.suffix.lower() == '.toml':
                with open(config_path, 'rb') as f:
                    file_config = tomllib.load(f)
            elif config_path.suffix.lower() in ['.yaml', '.yml']:
                with open(config_path, 'r') as f:
                    file_config = yaml.safe_load(f) or {}
            else:
                with open(config_path, 'r') as f:
                    file_config = json.load(f)

            config = merge_configs(config, file_config)
        except Exception as e:
            logger.error(f"Error loading config from {config_path}: {e}")

    return apply_env_overrides(config)


def save_config(config):
    """Save configuration to file."""
    config_path = get_config_path()

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)

        if config_path.suffix.lower() == '.toml':
            import toml
            with open(config_path, 'w') as f:
                toml.dump(config, f)
        elif config_path.suffix.lower() in ['.yaml', '.yml']:
            with open(config_path, 'w') as f:
                yaml.safe_dump(config, f, default_flow_style=False)
        else:
            with open(config_path, 'w') as f:
                json.dump(config, f, indent=2)

        logger.info(f"Configuration saved to {config_path}")
    except Exception as e:
        logger.error(f"Error saving config to {config_path}: {e}")


def get_default_config():
    """Get default configuration."""
    return {
        "repository": {
            "path": str(default_repository_path()),
        },
        "remote": {
            "url": DEFAULT_REMOTE_URL,
            "timeout_seconds": None,
        },
        "logging": {
            "level": "INFO",
            "format": "%(levelname)s: %(message)s"
        },
    }


def get_repository_path(config):
    return Path(config.get("repository", {}).get("path") or default_repository_path()).expanduser()


def get_remote_url(config):
    """JABU_REMOTE_REPO, then remote.url, then the placeholder URL."""
    return (os.environ.get(REMOTE_URL_ENV)
            or config.get("remote", {}).get("url")
            or DEFAULT_REMOTE_URL)


def get_remote_timeout(config):
    """
    HTTP timeout for the remote client, in seconds.

    Values that aren't a positive number are logged and treated as no timeout.
    """
    value = config.get("remote", {}).get("timeout_seconds")
    if value is None:
        return None
    if isinstance(value, bool):
        logger.warning(f"Ignoring remote.timeout_seconds: expected a number, got {value!r}")
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring remote.timeout_seconds: expected a number, got {value!r}")
        return None
    if not timeout > 0:
        logger.warning(f"Ignoring remote.timeout_seconds: must be greater than 0, got {value!r}")
        return None
    return timeout


def merge_configs(base_config, override_config):
    """
    Recursively merge two configuration dictionaries.

    Args:
        base_config (dict): Base configuration
        override_config (dict): Configuration to merge/override with

    Returns:
        dict: Merged configuration
    """
    merged = base_config.copy()

    for key, value in override_config.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = value

    return merged


def apply_env_overrides(config):
    """
    Apply environment variable overrides to configuration.
    Environment variables follow the pattern: JABU_SECTION_SUBSECTION_KEY
    For example: JABU_LOGGING_LEVEL=DEBUG
    """
    for env_key, value in os.environ.items():
        if not env_key.startswith(ENV_PREFIX) or env_key == CONFIG_ENV:
            continue

        key_parts = env_key[len(ENV_PREFIX):].lower().split('_')

        if value.lower() in ('true', 'yes', 'on'):
            typed_value = True
        elif value.lower() in ('false', 'no', 'off'):
            typed_value = False
        elif value.isdigit():
            typed_value = int(value)
        else:
            typed_value = value

        current_level = config
        i = 0
        while i < len(key_parts):
            # Find the longest key in current_level that is a prefix of the remaining key_parts
            best_match_len = 0
            matched_key = None

            for config_key in current_level.keys():
                config_key_parts = config_key.split('_')
                if key_parts[i : i + len(config_key_parts)] == config_key_parts:
                    if len(config_key_parts) > best_match_len:
                        best_match_len = len(config_key_parts)
                        matched_key = config_key

            if matched_key:
                if i + best_match_len == len(key_parts):
                    current_level[matched_key] = typed_value
                    break

                if isinstance(current_level[matched_key], dict):
                    current_level = current_level[matched_key]
                    i += best_match_len
                else:
                    break
            else:
                break

    return config
