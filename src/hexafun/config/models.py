"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``hexafun.toml`` only holds
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    entry_point_group: str = "hexafun.plugins"
    disabled: list[str] = Field(default_factory=list)
