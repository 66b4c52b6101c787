# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Metadata describing analysis plugins (SARIF tool extensions)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PluginMetadata:
    """Immutable metadata describing an analysis plugin."""

    plugin_id: str
    version: str
    short_description: str = ""
    website: str | None = None
    provider: str | None = None
