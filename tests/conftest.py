"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

from pathlib import Path

import pytest

from waylock_config.l1_entities.config import Colors, Config

# --- Protocol-conforming Fakes ---


class FakeConfigLoader:
    """Fake config loader for L4 tests — implements ConfigLoader protocol."""

    def __init__(self, config: Config | None = None, error: Exception | None = None):
        self._config = config
        self._error = error
        self.load_calls: list[str | None] = []

    def load(self, path_override: str | None = None) -> Config:
        self.load_calls.append(path_override)
        if self._error is not None:
            raise self._error
        assert self._config is not None
        return self._config


# --- Standard Fixtures ---


@pytest.fixture
def xdg_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG config lookup at empty temp dirs so the real user config is never read."""
    home = tmp_path / 'config_home'
    site = tmp_path / 'config_site'
    home.mkdir()
    site.mkdir()
    monkeypatch.setenv('XDG_CONFIG_HOME', str(home))
    monkeypatch.setenv('XDG_CONFIG_DIRS', str(site))
    return home


@pytest.fixture
def sample_config_toml(tmp_path: Path) -> Path:
    content = """\
[colors]
init_color = 16711680
input_color = 0x00ff00
fail_color = 255
"""
    p = tmp_path / 'waylock.toml'
    p.write_text(content, encoding='utf-8')
    return p


@pytest.fixture
def sample_config() -> Config:
    return Config(colors=Colors(init_color=0x111111, input_color=None, fail_color=0x333333))
