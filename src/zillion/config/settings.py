"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``ZILLION_*`` prefix (``ZILLION_NAMING__SCALE=short``)
  3. TOML file    — ``zillion.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

``--scheme`` and ``--scale`` are stored as top-level overrides rather
than inside ``[naming]`` so that setting one flag never discards the
other field from the TOML section.
"""

from __future__ import annotations

import os
import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from zillion.config.models import InputConfig, NamingConfig
from zillion.domain.types import Scale, Scheme

CONFIG_FILENAME = "zillion.toml"
CONFIG_ENV_VAR = "ZILLION_CONFIG"


def locate_config(config_path: str | None = None, start: Path | None = None) -> Path | None:
    """Pick the TOML file for this run.

    An explicit *config_path* wins, then ``ZILLION_CONFIG``, then the
    nearest ``zillion.toml`` in *start* (default: cwd) or its parents.
    A named file that does not exist means "no file", never a fallback
    to discovery.
    """
    named = config_path or os.environ.get(CONFIG_ENV_VAR)
    if named:
        path = Path(named)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``zillion.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# TOML path handed to settings_customise_sources during construction.
_tls = threading.local()


class ZillionSettings(BaseSettings):
    """Settings for the zillion CLI, frozen after construction.

    Attributes:
        config_path: The TOML file in effect, or None.
        scheme: ``--scheme`` override; falls back to ``naming.scheme``.
        scale: ``--scale`` override; falls back to ``naming.scale``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ZILLION_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    scheme: Scheme | None = None
    scale: Scale | None = None

    # --- TOML sections ---
    naming: NamingConfig = Field(default_factory=NamingConfig)
    input: InputConfig = Field(default_factory=InputConfig)

    @property
    def effective_scheme(self) -> Scheme:
        return self.scheme or self.naming.scheme

    @property
    def effective_scale(self) -> Scale:
        return self.scale or self.naming.scale

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
    ) -> ZillionSettings:
        """Construct settings from a CLI invocation.

        The TOML file comes from :func:`locate_config`. Flags whose value
        is None are dropped so they do not mask lower-priority sources.
        """
        toml_path = locate_config(config_path, start)

        flags = {k: v for k, v in cli_flags.items() if v is not None}
        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **flags)
        finally:
            _tls.toml_path = None
