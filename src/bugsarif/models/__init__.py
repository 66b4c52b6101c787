# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Domain models for bugsarif."""

from bugsarif.models.annotations import (
    BugAnnotation,
    ClassAnnotation,
    FieldAnnotation,
    IntAnnotation,
    LocalVariableAnnotation,
    MethodAnnotation,
    SourceLineAnnotation,
    StringAnnotation,
)
from bugsarif.models.bug import BugCollection, BugInstance, BugPattern
from bugsarif.models.run import AnalysisRun, RecordedError

__all__ = [
    "AnalysisRun",
    "BugAnnotation",
    "BugCollection",
    "BugInstance",
    "BugPattern",
    "ClassAnnotation",
    "FieldAnnotation",
    "IntAnnotation",
    "LocalVariableAnnotation",
    "MethodAnnotation",
    "RecordedError",
    "SourceLineAnnotation",
    "StringAnnotation",
]
