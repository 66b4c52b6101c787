# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Enumerations, SARIF constants, and rank thresholds."""

from __future__ import annotations

from enum import IntEnum, StrEnum

from bugsarif.core.exceptions import UnknownRankError

SARIF_VERSION = "2.1.0"
SARIF_SCHEMA_URL = (
    "https://raw.githubusercontent.com/oasis-tcs/sarif-spec/master/Schemata/sarif-schema-2.1.0.json"
)

TOOL_NAME = "bugsarif"

MISSING_CLASSES_DESCRIPTOR_ID = f"{TOOL_NAME}-missing-classes"
ERROR_DESCRIPTOR_ID_FORMAT = f"{TOOL_NAME}-error-{{sequence}}"

DEFAULT_MESSAGE_ID = "default"
NO_MESSAGE_GIVEN = "no message given"

MIN_RANK = 1


class Level(StrEnum):
    """SARIF ``result.level`` / ``notification.level`` values."""

    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"


class RankCategory(IntEnum):
    """Bug rank bands; the value is the highest rank inside the band."""

    SCARIEST = 4
    SCARY = 9
    TROUBLING = 14
    OF_CONCERN = 20

    @classmethod
    def from_rank(cls, rank: int) -> RankCategory:
        """Classify *rank* (1 = scariest, 20 = least scary).

        Raises:
            UnknownRankError: If *rank* is outside 1..20.
        """
        if rank >= MIN_RANK:
            for category in cls:
                if rank <= category.value:
                    return category
        msg = f"Illegal bug rank given: {rank}"
        raise UnknownRankError(msg)


MAX_RANK = RankCategory.OF_CONCERN.value


class AnnotationKind(StrEnum):
    CLASS = "class"
    METHOD = "method"
    FIELD = "field"
    LOCAL_VARIABLE = "local-variable"
    INT = "int"
    STRING = "string"
    SOURCE_LINE = "source-line"


# Annotation kinds that can become a SARIF logical location.
LOGICAL_LOCATION_KINDS: dict[AnnotationKind, str] = {
    AnnotationKind.CLASS: "type",
    AnnotationKind.METHOD: "function",
    AnnotationKind.FIELD: "member",
    AnnotationKind.LOCAL_VARIABLE: "variable",
}
