# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Analysis plugin descriptors reported as SARIF tool extensions."""

from bugsarif.plugins.base import PluginMetadata

__all__ = ["PluginMetadata"]
