"""Tests for configuration Pydantic models — schema validation only."""

import pytest
from pydantic import ValidationError

from waylock_config.l1_entities.config import U32_MAX, Colors, Config


class TestColors:
    def test_all_fields_optional(self):
        colors = Colors()
        assert colors.init_color is None
        assert colors.input_color is None
        assert colors.fail_color is None

    def test_accepts_u32_bounds(self):
        colors = Colors(init_color=0, fail_color=U32_MAX)
        assert colors.init_color == 0
        assert colors.fail_color == U32_MAX

    def test_negative_raises(self):
        with pytest.raises(ValidationError):
            Colors(init_color=-1)

    def test_above_u32_raises(self):
        with pytest.raises(ValidationError):
            Colors(input_color=U32_MAX + 1)

    def test_string_raises(self):
        with pytest.raises(ValidationError):
            Colors.model_validate({'init_color': '0xff0000'})

    def test_bool_raises(self):
        with pytest.raises(ValidationError):
            Colors.model_validate({'init_color': True})

    def test_float_raises(self):
        with pytest.raises(ValidationError):
            Colors.model_validate({'init_color': 1.0})

    def test_frozen(self):
        colors = Colors(init_color=1)
        with pytest.raises(ValidationError):
            colors.init_color = 2  # type: ignore[misc]


class TestConfig:
    def test_colors_required(self):
        with pytest.raises(ValidationError):
            Config.model_validate({})

    def test_unknown_keys_ignored(self):
        cfg = Config.model_validate({'colors': {'init_color': 5, 'extra': 1}, 'other': {}})
        assert cfg.colors == Colors(init_color=5)

    def test_structural_equality(self):
        a = Config(colors=Colors(init_color=1))
        b = Config(colors=Colors(init_color=1))
        assert a == b
