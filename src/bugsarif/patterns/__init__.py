# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Bug pattern catalogs."""

from bugsarif.patterns.yaml_loader import load_patterns_from_directory, load_patterns_from_file

__all__ = [
    "load_patterns_from_directory",
    "load_patterns_from_file",
]
