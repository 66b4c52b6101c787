# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""SARIF 2.1.0 bug reporter.

Collects bugs, errors, and missing classes while an analysis runs and writes
one SARIF document when :meth:`SarifBugReporter.finish` is called.
"""

from __future__ import annotations

import json
import locale
import logging
import os
import sys
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from bugsarif import __version__
from bugsarif.ci.exit_codes import exit_code_from, signal_name
from bugsarif.core.config import Settings, get_settings
from bugsarif.core.constants import TOOL_NAME
from bugsarif.core.exceptions import ReportWriteError
from bugsarif.models.bug import BugCollection, BugInstance, BugPattern
from bugsarif.models.sarif import (
    SarifInvocation,
    SarifMultiformatMessage,
    SarifReport,
    SarifRun,
    SarifTool,
    SarifToolComponent,
)
from bugsarif.plugins.base import PluginMetadata
from bugsarif.sarif.analyser import BugCollectionAnalyser
from bugsarif.sarif.locations import LocationHandler
from bugsarif.sarif.notifications import QueuedError, config_notifications, execution_notifications
from bugsarif.sources.finder import SourceFinder

logger = logging.getLogger("bugsarif.sarif.reporter")

Output = TextIO | str | Path


def output_language(configured: str = "") -> str:
    """Return the ISO 639 language code reports are written in.

    *configured* wins; otherwise the process locale decides (``ja_JP`` ->
    ``ja``), falling back to ``en``.
    """
    tag = configured or _locale_tag()
    language = tag.replace("-", "_").split("_")[0].split(".")[0].split("@")[0].lower()
    if language in ("", "c", "posix"):
        return "en"
    return language


# Message locale variables in POSIX precedence order
_LOCALE_ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG")


def _locale_tag() -> str:
    for name in _LOCALE_ENV_VARS:
        value = os.environ.get(name)
        if value:
            return value
    return locale.getlocale(locale.LC_CTYPE)[0] or ""


@contextmanager
def open_sink(output: Output | None) -> Iterator[TextIO]:
    """Yield a writable text stream for *output*.

    Paths are opened and closed here; streams are flushed and left open.
    ``None`` means standard output.
    """
    if isinstance(output, (str, Path)):
        with open(output, "w", encoding="utf-8") as fh:
            yield fh
        return

    stream = output if output is not None else sys.stdout
    try:
        yield stream
    finally:
        stream.flush()


class SarifBugReporter:
    """Bug reporter producing a single-run SARIF log."""

    def __init__(
        self,
        *,
        source_finder: SourceFinder | None = None,
        plugins: Iterable[PluginMetadata] = (),
        output: Output | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.source_finder = source_finder or SourceFinder(self.settings.source_roots)
        self.plugins = list(plugins)
        self.bug_collection = BugCollection()
        self._output = output
        self._queued_errors: list[QueuedError] = []
        self._missing_classes: dict[str, None] = {}

    # -- recording ---------------------------------------------------------

    def set_output(self, output: Output | None) -> None:
        self._output = output

    def register_pattern(self, pattern: BugPattern) -> None:
        self.bug_collection.add_pattern(pattern)

    def register_patterns(self, patterns: Iterable[BugPattern]) -> None:
        self.bug_collection.add_patterns(patterns)

    def report_bug(self, bug: BugInstance) -> None:
        self.bug_collection.add(bug)

    def log_error(self, message: str, cause: BaseException | None = None) -> None:
        sequence = len(self._queued_errors)
        self._queued_errors.append(QueuedError(sequence=sequence, message=message, cause=cause))
        logger.debug("Queued analysis error %d: %s", sequence, message)

    def report_missing_class(self, class_name: str) -> None:
        self._missing_classes.setdefault(class_name, None)

    @property
    def queued_errors(self) -> list[QueuedError]:
        return list(self._queued_errors)

    @property
    def missing_classes(self) -> list[str]:
        return list(self._missing_classes)

    # -- report ------------------------------------------------------------

    def build_report(self) -> SarifReport:
        analyser = BugCollectionAnalyser(self.bug_collection, self.source_finder)
        tool = SarifTool(
            driver=SarifToolComponent(
                name=TOOL_NAME,
                version=__version__,
                language=output_language(self.settings.language),
                rules=analyser.rules,
            ),
            extensions=[_to_tool_component(plugin) for plugin in self.plugins],
        )
        invocation = self._invocation(analyser.location_handler)
        run = SarifRun(
            tool=tool,
            invocations=[invocation],
            results=analyser.results,
            originalUriBaseIds=analyser.original_uri_base_ids,
        )
        return SarifReport(runs=[run])

    def finish(self) -> SarifReport:
        """Build the report and write it to the output sink.

        Raises:
            ReportWriteError: If the sink cannot be written.
        """
        report = self.build_report()
        indent = self.settings.json_indent or None
        try:
            with open_sink(self._output) as sink:
                json.dump(report.to_dict(), sink, indent=indent, ensure_ascii=False)
        except OSError as exc:
            logger.exception("Failed to generate the SARIF report")
            raise ReportWriteError(f"Failed to write SARIF report: {exc}") from exc

        run = report.runs[0]
        logger.info(
            "Wrote SARIF report: %d rules, %d results, %d notifications",
            len(run.tool.driver.rules or []),
            len(run.results),
            len(run.invocations[0].toolExecutionNotifications)
            + len(run.invocations[0].toolConfigurationNotifications),
        )
        return report

    def _invocation(self, location_handler: LocationHandler) -> SarifInvocation:
        missing_classes = self.missing_classes
        exit_code = exit_code_from(len(self._queued_errors), len(missing_classes), len(self.bug_collection))
        return SarifInvocation(
            exitCode=exit_code,
            exitSignalName=signal_name(exit_code),
            executionSuccessful=exit_code == 0,
            toolExecutionNotifications=execution_notifications(self._queued_errors, location_handler),
            toolConfigurationNotifications=config_notifications(missing_classes),
        )


def _to_tool_component(plugin: PluginMetadata) -> SarifToolComponent:
    return SarifToolComponent(
        name=plugin.plugin_id,
        version=plugin.version,
        shortDescription=SarifMultiformatMessage(text=plugin.short_description),
        informationUri=plugin.website,
        organization=plugin.provider,
    )
