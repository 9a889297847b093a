"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, graphpoet.toml only contains
overrides. An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class GraphConfig(BaseModel):
    """[graph] section."""

    model_config = {"frozen": True}

    backend: Literal["adjacency", "edge-list"] = "adjacency"


class CorpusConfig(BaseModel):
    """[corpus] section."""

    model_config = {"frozen": True}

    encoding: str = "utf-8"


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    max_affinities: int = Field(default=20, ge=1)

