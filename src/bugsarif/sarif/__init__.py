# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Translation of finished analysis runs into SARIF 2.1.0."""

from bugsarif.sarif.analyser import BugCollectionAnalyser, to_level
from bugsarif.sarif.locations import LocationHandler, StackFrameInfo, UriBaseRegistry
from bugsarif.sarif.placeholders import Placeholder, parse_message_template
from bugsarif.sarif.reporter import SarifBugReporter

__all__ = [
    "BugCollectionAnalyser",
    "LocationHandler",
    "Placeholder",
    "SarifBugReporter",
    "StackFrameInfo",
    "UriBaseRegistry",
    "parse_message_template",
    "to_level",
]
