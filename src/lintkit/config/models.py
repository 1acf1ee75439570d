"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, lintkit.toml only contains overrides.
An empty or absent lintkit.toml is a valid configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

OutputFormat = Literal["sarif", "text"]


class WikifmtConfig(BaseModel):
    """[wikifmt] section."""

    model_config = {"frozen": True}

    driver_name: str = "lintkit-wikifmt"
    skip_dirs: list[str] = Field(default_factory=list)


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    format: OutputFormat = "sarif"


class LintkitConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    wikifmt: WikifmtConfig = Field(default_factory=WikifmtConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
