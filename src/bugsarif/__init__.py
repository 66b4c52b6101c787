# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""bugsarif - SARIF 2.1.0 reports for static bug-finding runs."""

__version__ = "0.1.0"

from bugsarif.models.bug import BugCollection, BugInstance, BugPattern
from bugsarif.plugins.base import PluginMetadata
from bugsarif.sarif.reporter import SarifBugReporter
from bugsarif.sources.finder import SourceFinder

__all__ = [
    "BugCollection",
    "BugInstance",
    "BugPattern",
    "PluginMetadata",
    "SarifBugReporter",
    "SourceFinder",
    "__version__",
]
