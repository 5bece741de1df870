"""File-based debug logging setup."""

from __future__ import annotations

import logging
from pathlib import Path


def setup_file_logging(log_path: Path) -> None:
    """Configure file-based debug logging for the waylock logger tree."""
    handler = logging.FileHandler(log_path, encoding='utf-8')
    handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(message)s'))
    root = logging.getLogger('waylock')
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)
    root.info('Debug logging started → %s', log_path)
