# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Serialized form of a finished analysis run, as read by the CLI."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from bugsarif.models.bug import BugInstance, BugPattern
from bugsarif.plugins.base import PluginMetadata


class RecordedError(BaseModel):
    """An error the analysis recorded; causes are not serializable."""

    message: str


class AnalysisRun(BaseModel):
    """Everything a run produced: patterns, bugs, and what went wrong."""

    patterns: list[BugPattern] = Field(default_factory=list)
    bugs: list[BugInstance] = Field(default_factory=list)
    missing_classes: list[str] = Field(default_factory=list)
    errors: list[RecordedError] = Field(default_factory=list)
    plugins: list[PluginMetadata] = Field(default_factory=list)

    @classmethod
    def from_file(cls, path: str | Path) -> AnalysisRun:
        return cls.model_validate_json(Path(path).read_text(encoding="utf-8"))
