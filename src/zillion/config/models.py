"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, zillion.toml only holds overrides::

    [naming]
    scheme = "conway"
    scale = "short"

    [input]
    strip_separators = true
"""

from __future__ import annotations

from pydantic import BaseModel

from zillion.domain.types import Scale, Scheme


class NamingConfig(BaseModel):
    """[naming] section."""

    model_config = {"frozen": True}

    scheme: Scheme = Scheme.CONWAY
    scale: Scale = Scale.SHORT


class InputConfig(BaseModel):
    """[input] section."""

    model_config = {"frozen": True}

    strip_separators: bool = False

