"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``RECIPE_IO_*`` prefix
  3. TOML file    — ``recipe-io.toml`` from ``--config``, ``RECIPE_IO_CONFIG``,
                    or walk-up discovery (like git finding ``.git/``)
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import os
import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from recipe_io.config.models import IOConfig, PluginsConfig

CONFIG_FILENAME = "recipe-io.toml"
CONFIG_ENV_VAR = "RECIPE_IO_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for recipe-io.toml.

    ``RECIPE_IO_CONFIG`` wins over the walk-up; when it names a missing
    file no config is used.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``recipe-io.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class RecipeIOSettings(BaseSettings):
    """Unified settings for the recipe-io CLI.

    Stored on the :class:`AppContext` at the CLI root level.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "RECIPE_IO_",
        "env_nested_delimiter": "__",
    }

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    no_interact: bool = False

    # --- TOML sections ---
    io: IOConfig = Field(default_factory=IOConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> RecipeIOSettings:
        """Construct settings from CLI invocation.

        An explicit *config_path* must exist; otherwise ``recipe-io.toml`` is
        discovered by walking up from *start*. CLI flags are merged as
        highest-priority overrides.
        """
        if config_path:
            toml_path: Path | None = Path(config_path)
            if not toml_path.is_file():
                import click

                raise click.ClickException(f"Config file not found: {config_path}")
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(**cli_flags)
        finally:
            _tls.toml_path = None
