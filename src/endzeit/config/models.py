"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, endzeit.toml only contains
overrides. An empty (or missing) file reproduces the stock behaviour.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class CountdownConfig(BaseModel):
    """[countdown] section."""

    model_config = {"frozen": True}

    tick_interval_ms: int = Field(default=1000, gt=0)


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    label: str = "Endzeit"
    bar_width: int = Field(default=50, gt=0)
    fill_char: str = Field(default="=", min_length=1, max_length=1)
    empty_char: str = Field(default=" ", min_length=1, max_length=1)
    timestamp_format: str = "%Y-%m-%d %H:%M:%S"


class CommandConfig(BaseModel):
    """[command] section."""

    model_config = {"frozen": True}

    shell: str | None = None
    timeout_seconds: float | None = Field(default=None, gt=0)
