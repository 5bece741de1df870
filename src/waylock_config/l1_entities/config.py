"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictInt

U32_MAX = 0xFFFF_FFFF

ColorValue = Annotated[StrictInt, Field(ge=0, le=U32_MAX)]


class Colors(BaseModel):
    model_config = ConfigDict(frozen=True)

    init_color: ColorValue | None = None  # None = fall back to built-in default
    input_color: ColorValue | None = None
    fail_color: ColorValue | None = None


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    colors: Colors
