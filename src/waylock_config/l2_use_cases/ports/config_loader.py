"""Port: configuration loader."""

from __future__ import annotations

from typing import Protocol

from waylock_config.l1_entities.config import Config


class ConfigLoader(Protocol):
    """Abstract configuration loader."""

    def load(self, path_override: str | None = None) -> Config:
        """Resolve, read, and validate the config file.

        Raises a ConfigError subclass on failure.
        """
        ...
