# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures and configuration."""

from __future__ import annotations

import io
import logging
import os

import pytest

from bugsarif.core.config import Settings
from bugsarif.sarif.reporter import SarifBugReporter
from bugsarif.sources.finder import SourceFinder


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    """Keep BUGSARIF_* variables from the developer's shell out of the tests."""
    for name in list(os.environ):
        if name.startswith("BUGSARIF_"):
            monkeypatch.delenv(name)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def source_finder() -> SourceFinder:
    return SourceFinder()


@pytest.fixture
def reporter(settings: Settings, output: io.StringIO, source_finder: SourceFinder) -> SarifBugReporter:
    return SarifBugReporter(source_finder=source_finder, output=output, settings=settings)


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers installed by setup_logging during a test."""
    yield
    logger = logging.getLogger("bugsarif")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
