"""Target path resolution.

Resolves the documentation file to update. First match wins:

    --target PATH            command line
    PERMSTABLE_TARGET        environment variable
    target: <path>           YAML config file (--config PATH, PERMSTABLE_CONFIG,
                             or ./permstable.yaml when present); relative
                             paths resolve against the config file directory
    built-in default         the resource-table page of the docs site
"""

from __future__ import annotations

import os
import warnings
from dataclasses import dataclass
from pathlib import Path

import yaml

from permstable import DEFAULT_TARGET
from permstable.errors import ConfigError

TARGET_ENV = "PERMSTABLE_TARGET"
CONFIG_ENV = "PERMSTABLE_CONFIG"
DEFAULT_CONFIG_NAME = "permstable.yaml"

_KNOWN_KEYS = {"target"}


@dataclass(frozen=True)
class Settings:
    """Resolved settings for a run."""

    target: Path
    source: str


def default_config_path() -> Path | None:
    """Return the config file to read, or None when there is none."""
    env = os.environ.get(CONFIG_ENV)
    if env:
        return Path(env).expanduser()
    local = Path.cwd() / DEFAULT_CONFIG_NAME
    return local if local.is_file() else None


def load_config(path: Path | str) -> dict:
    """Read and parse a permstable YAML config file.

    Args:
        path: Path to the config file.

    Returns:
        Parsed config dict. An empty file yields an empty dict.

    Raises:
        ConfigError: If the file is unreadable, not YAML, or not a mapping.
    """
    config_path = Path(path)
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"cannot read config {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"config {config_path} is not valid YAML: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"config {config_path} is not a YAML mapping")

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        warnings.warn(f"ignoring unknown config keys in {config_path}: {', '.join(unknown)}")

    target = data.get("target")
    if target is not None and not isinstance(target, str):
        raise ConfigError(f"config {config_path}: 'target' must be a string")

    return data


def resolve_settings(
    target: str | None = None,
    config_path: str | None = None,
) -> Settings:
    """Resolve the target path from CLI values, environment and config."""
    if target:
        return Settings(target=Path(target).expanduser(), source="cli")

    env = os.environ.get(TARGET_ENV)
    if env:
        return Settings(target=Path(env).expanduser(), source="env")

    path = Path(config_path).expanduser() if config_path else default_config_path()
    if path is not None:
        configured = load_config(path).get("target")
        if configured:
            resolved = Path(configured).expanduser()
            if not resolved.is_absolute():
                resolved = path.parent / resolved
            return Settings(target=resolved, source="config")

    return Settings(target=Path(DEFAULT_TARGET), source="default")
