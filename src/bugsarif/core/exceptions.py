# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for bugsarif."""


class BugSarifError(Exception):
    """Base exception for all bugsarif errors."""


class ConfigurationError(BugSarifError):
    """Invalid or missing configuration."""


class UnknownRankError(ConfigurationError):
    """A bug rank does not map onto the rank table."""


class UnknownPatternError(ConfigurationError):
    """A bug references a pattern type that was never registered."""


class PatternCatalogError(BugSarifError):
    """Failed to read or validate a bug pattern catalog."""


class AnnotationFormatError(BugSarifError, ValueError):
    """An annotation was asked for a format key it does not support."""


class SourceNotFoundError(BugSarifError, FileNotFoundError):
    """A source file could not be located under any source root."""


class ReportWriteError(BugSarifError):
    """Writing the SARIF report to its output sink failed."""
