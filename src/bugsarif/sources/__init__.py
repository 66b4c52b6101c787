# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Source root resolution."""

from bugsarif.sources.finder import SourceFile, SourceFinder, base_uri

__all__ = [
    "SourceFile",
    "SourceFinder",
    "base_uri",
]
