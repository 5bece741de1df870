"""Gateway: TOML configuration loader — implements ConfigLoader port."""

from __future__ import annotations

import errno
import logging
import tomllib
from pathlib import Path

from pydantic import ValidationError

from waylock_config.l1_entities.config import Config
from waylock_config.l1_entities.errors import (
    ConfigIoError,
    ConfigNotFoundError,
    ConfigTomlError,
)
from waylock_config.l3_interface_adapters.gateways.paths import find_config_file

log = logging.getLogger('waylock.config')


class TomlConfigLoader:
    """Loads Config from an explicit path or the conventional waylock.toml."""

    def load(self, path_override: str | None = None) -> Config:
        path = resolve_config_path(path_override)
        text = _read_text(path)
        config = parse_config(text, path)
        log.debug('Loaded config from %s', path)
        return config


def resolve_config_path(path_override: str | None = None) -> str | Path:
    """Pick the file to read. The override is authoritative; no fallback is tried.

    The override is returned as given so it reaches the OS unnormalized.
    """
    if path_override is not None:
        log.debug('Using config override %r', path_override)
        return path_override
    found = find_config_file()
    if found is None:
        log.debug('No config file found in the config search path')
        raise ConfigNotFoundError()
    log.debug('Found config file %s', found)
    return found


def parse_config(text: str, path: str | Path | None = None) -> Config:
    """Parse TOML text into a Config, all-or-nothing."""
    try:
        data = tomllib.loads(text)
        return Config.model_validate(data)
    except (tomllib.TOMLDecodeError, ValidationError) as e:
        raise ConfigTomlError(e, path) from e


def _read_text(path: str | Path) -> str:
    try:
        with open(path, encoding='utf-8') as f:
            return f.read()
    except OSError as e:
        if e.errno == errno.ENOENT:
            raise ConfigNotFoundError(path) from e
        raise ConfigIoError(e, path) from e
    except UnicodeDecodeError as e:
        raise ConfigIoError(e, path) from e
