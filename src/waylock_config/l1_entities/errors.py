"""Domain error types."""

from __future__ import annotations

from pathlib import Path


class ConfigError(Exception):
    """Base for every failure raised while resolving or parsing the config file."""

    def __init__(self, message: str, path: str | Path | None = None, cause: Exception | None = None):
        super().__init__(message)
        self.path = path
        self.cause = cause

    def __repr__(self) -> str:
        return f'{type(self).__name__}({str(self)!r}, path={self.path!r}, cause={self.cause!r})'


class ConfigNotFoundError(ConfigError):
    """Raised when no config file exists at the resolved location.

    Not fatal: callers treat it as "use the built-in defaults".
    """

    def __init__(self, path: str | Path | None = None):
        super().__init__("Couldn't find the config file", path)


class ConfigIoError(ConfigError):
    """Raised when the config file exists but cannot be read."""

    def __init__(self, cause: OSError | UnicodeDecodeError, path: str | Path | None = None):
        super().__init__(f'I/O error reading the config file: {cause}', path, cause)


class ConfigTomlError(ConfigError):
    """Raised when the file is not valid TOML or does not match the Config shape."""

    def __init__(self, cause: Exception, path: str | Path | None = None):
        super().__init__(f'TOML error reading the config file: {cause}', path, cause)
