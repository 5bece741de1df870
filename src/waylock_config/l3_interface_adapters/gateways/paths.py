"""Config directory conventions and file lookup."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import PlatformDirs

APP_NAME = 'waylock'
CONFIG_FILENAME = 'waylock.toml'


def config_search_dirs() -> list[Path]:
    """Return the per-user config dir followed by the site config dirs, in lookup order.

    On Linux this is $XDG_CONFIG_HOME (or ~/.config) then each entry of
    $XDG_CONFIG_DIRS (or /etc/xdg). Environment is read on every call.
    """
    dirs = PlatformDirs(APP_NAME, appauthor=False, multipath=True)
    search = [dirs.user_config_path]
    for entry in dirs.site_config_dir.split(os.pathsep):
        if entry:
            search.append(Path(entry))
    return search


def find_config_file(filename: str = CONFIG_FILENAME) -> Path | None:
    """First existing path named *filename* in the search dirs, or None.

    Any existing entry counts, so a directory in the way surfaces as a read error.
    """
    for directory in config_search_dirs():
        candidate = directory / filename
        if candidate.exists():
            return candidate
    return None
