"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, orderflow.toml only contains
overrides. Settings affect presentation and plugin loading only; order
validation rules are fixed in code.
"""

from __future__ import annotations

from pydantic import BaseModel


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    currency: str = "UAH"
    separator: str = "\n---\n"


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
