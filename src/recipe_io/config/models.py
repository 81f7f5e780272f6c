"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, recipe-io.toml only contains
overrides. An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class IOConfig(BaseModel):
    """[io] section."""

    model_config = {"frozen": True}

    prompt_suffix: str = ": "
    show_default: bool = True


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    disabled: list[str] = Field(default_factory=list)
