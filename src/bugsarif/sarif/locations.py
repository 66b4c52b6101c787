# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Resolve bug annotations and stack frames to SARIF locations.

Every stage (annotation -> source root -> source file -> relative URI) may
come up empty.  A missing stage drops that part of the location; it never
fails the report.
"""

from __future__ import annotations

import logging
import traceback
from dataclasses import dataclass
from pathlib import PurePath
from types import TracebackType

from bugsarif.core.constants import LOGICAL_LOCATION_KINDS
from bugsarif.core.exceptions import SourceNotFoundError
from bugsarif.models.annotations import BugAnnotation, ClassAnnotation, SourceLineAnnotation
from bugsarif.models.bug import BugInstance
from bugsarif.models.sarif import (
    SarifArtifactLocation,
    SarifLocation,
    SarifLogicalLocation,
    SarifPhysicalLocation,
    SarifRegion,
)
from bugsarif.sources.finder import SourceFinder

logger = logging.getLogger("bugsarif.sarif.locations")

URI_BASE_ID_PREFIX = "SRCROOT"


class UriBaseRegistry:
    """Map source root URIs to ``uriBaseId`` values for one report.

    Ids are handed out on first use and stay fixed for the rest of the
    report.
    """

    def __init__(self) -> None:
        self._ids: dict[str, str] = {}

    def id_for(self, uri: str) -> str:
        uri_base_id = self._ids.get(uri)
        if uri_base_id is None:
            uri_base_id = f"{URI_BASE_ID_PREFIX}{len(self._ids)}"
            self._ids[uri] = uri_base_id
            logger.debug("Assigned uriBaseId %s to %s", uri_base_id, uri)
        return uri_base_id

    def to_original_uri_base_ids(self) -> dict[str, SarifArtifactLocation]:
        return {uri_base_id: SarifArtifactLocation(uri=uri) for uri, uri_base_id in self._ids.items()}

    def __len__(self) -> int:
        return len(self._ids)


@dataclass(frozen=True)
class StackFrameInfo:
    """One frame of a Python traceback."""

    module: str
    filename: str
    function: str
    qualname: str
    lineno: int

    @property
    def source_path(self) -> str:
        """Source path relative to a source root, derived from the module name."""
        file_name = PurePath(self.filename).name
        parts = self.module.split(".") if self.module else []
        if file_name != "__init__.py":
            parts = parts[:-1]
        return "/".join([*parts, file_name])

    @property
    def fully_qualified_name(self) -> str:
        return f"{self.module}.{self.qualname}" if self.module else self.qualname

    @classmethod
    def from_traceback(cls, tb: TracebackType | None) -> list[StackFrameInfo]:
        """Return the frames of *tb*, innermost (raising) frame first."""
        frames = [
            cls(
                module=frame.f_globals.get("__name__", ""),
                filename=frame.f_code.co_filename,
                function=frame.f_code.co_name,
                qualname=frame.f_code.co_qualname,
                lineno=lineno or 0,
            )
            for frame, lineno in traceback.walk_tb(tb)
        ]
        frames.reverse()
        return frames


class LocationHandler:
    """Build SARIF locations, registering source roots in a shared registry."""

    def __init__(self, source_finder: SourceFinder, registry: UriBaseRegistry) -> None:
        self.source_finder = source_finder
        self.registry = registry

    # -- bugs --------------------------------------------------------------

    def to_location(self, bug: BugInstance) -> SarifLocation | None:
        """Return the location of *bug*, or ``None``.

        A location is only produced when one of the bug's annotations maps to
        a logical location; a physical location alone is dropped.
        """
        source_line = bug.primary_source_line
        if source_line is None:
            return None

        physical_location = self._physical_location(source_line)
        logical_location = self._logical_location(bug.annotations, bug.primary_class, source_line)
        if logical_location is None:
            return None
        return SarifLocation(physicalLocation=physical_location, logicalLocations=[logical_location])

    def _physical_location(self, source_line: SourceLineAnnotation) -> SarifPhysicalLocation | None:
        artifact_location = self._artifact_location(source_line.source_path)
        if artifact_location is None:
            return None
        region = None
        if source_line.has_lines:
            region = SarifRegion(startLine=source_line.start_line, endLine=source_line.end_line)
        return SarifPhysicalLocation(artifactLocation=artifact_location, region=region)

    @staticmethod
    def _logical_location(
        annotations: list[BugAnnotation],
        primary_class: ClassAnnotation | None,
        source_line: SourceLineAnnotation,
    ) -> SarifLogicalLocation | None:
        for annotation in annotations:
            kind = LOGICAL_LOCATION_KINDS.get(annotation.kind)
            if kind is None:
                continue
            return SarifLogicalLocation(
                name=annotation.format("givenClass", primary_class),
                fullyQualifiedName=source_line.format("full", primary_class),
                kind=kind,
            )
        return None

    # -- stack frames ------------------------------------------------------

    def stack_location(self, frame: StackFrameInfo) -> SarifLocation:
        physical_location = None
        artifact_location = self._artifact_location(frame.source_path)
        if artifact_location is not None:
            region = SarifRegion(startLine=frame.lineno) if frame.lineno > 0 else None
            physical_location = SarifPhysicalLocation(artifactLocation=artifact_location, region=region)

        logical_location = SarifLogicalLocation(
            name=frame.function,
            fullyQualifiedName=frame.fully_qualified_name,
            kind="function",
            properties={"line-number": frame.lineno},
        )
        return SarifLocation(physicalLocation=physical_location, logicalLocations=[logical_location])

    # -- shared ------------------------------------------------------------

    def _artifact_location(self, source_path: str) -> SarifArtifactLocation | None:
        try:
            source_file = self.source_finder.find_source_file(source_path)
            relative_uri = source_file.relative_uri
        except (SourceNotFoundError, ValueError) as exc:
            logger.debug("Source file lookup failed for %s: %s", source_path, exc)
            return None
        uri_base_id = self.registry.id_for(source_file.base_uri)
        return SarifArtifactLocation(uri=relative_uri, uriBaseId=uri_base_id)
