"""Converter settings, read from ``JSON2MSGPACK_*`` environment variables."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class ConverterConfig(BaseSettings):
    model_config = {"env_prefix": "JSON2MSGPACK_", "validate_assignment": True}

    max_depth: int = Field(
        default=256,
        ge=1,
        description="Maximum nesting depth of objects and arrays",
    )
    negative_fixint: bool = Field(
        default=False,
        description="Encode -32..-1 as a single negative fixint byte instead of int 8",
    )
    compact_floats: bool = Field(
        default=False,
        description="Encode floats that survive float32 rounding as float 32",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="WARNING")


__all__: tuple[str, ...] = ("ConverterConfig",)
