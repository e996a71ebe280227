"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, hairstylex.toml only contains
overrides. A fresh project needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- hairstylex.toml sections ---


class DataConfig(BaseModel):
    """[data] section."""

    model_config = {"frozen": True}

    file: str = "data/hairstylex.json"
    autosave: bool = True


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    max_rows: int = Field(default=0, ge=0)  # 0 = unlimited
    show_tags: bool = True


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    audit: bool = True

