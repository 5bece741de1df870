"""Built-in color fallbacks — lives in L4, not domain."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from waylock_config.l1_entities.config import ColorValue, Colors
from waylock_config.l1_entities.errors import ConfigNotFoundError
from waylock_config.l2_use_cases.ports.config_loader import ConfigLoader

log = logging.getLogger('waylock.colors')

COLOR_DEFAULTS: dict[str, int] = {
    'init_color': 0x002B36,
    'input_color': 0x657B83,
    'fail_color': 0xDC322F,
}


class ColorScheme(BaseModel):
    """Fully resolved colors handed to the renderer."""

    model_config = ConfigDict(frozen=True)

    init_color: ColorValue
    input_color: ColorValue
    fail_color: ColorValue


def resolve_colors(colors: Colors | None, overrides: dict | None = None) -> ColorScheme:
    """Layer *overrides* over file *colors* over COLOR_DEFAULTS. None values are skipped."""
    merged = dict(COLOR_DEFAULTS)
    if colors is not None:
        merged.update(colors.model_dump(exclude_none=True))
    if overrides:
        merged.update({k: v for k, v in overrides.items() if v is not None})
    return ColorScheme.model_validate(merged)


def load_color_scheme(
    loader: ConfigLoader,
    path_override: str | None = None,
    overrides: dict | None = None,
) -> ColorScheme:
    """Load the config file and resolve colors; a missing file means defaults."""
    try:
        colors: Colors | None = loader.load(path_override).colors
    except ConfigNotFoundError as e:
        log.info('%s, using default colors', e)
        colors = None
    return resolve_colors(colors, overrides)
