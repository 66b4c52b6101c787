# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Message template placeholders.

A bug pattern's long description references the bug's annotations with
``{N}`` or ``{N.key}``: ``N`` is the annotation position and ``key`` the
format style passed to the annotation.  For SARIF the template is rewritten
so every reference becomes a sequential ``{slot}`` and the matching argument
is computed per result.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass

from bugsarif.core.exceptions import AnnotationFormatError
from bugsarif.models.annotations import BugAnnotation, ClassAnnotation

logger = logging.getLogger("bugsarif.sarif.placeholders")

PLACEHOLDER_RE = re.compile(r"\{(\d+)(?:\.([A-Za-z]+))?\}")


@dataclass(frozen=True)
class Placeholder:
    """One annotation reference found in a message template."""

    index: int
    key: str = ""

    def to_argument(self, annotations: Sequence[BugAnnotation], primary_class: ClassAnnotation | None) -> str:
        """Render this placeholder for one bug.

        A reference the bug cannot satisfy renders as a format-error marker
        (``?<?N/M???`` for a missing annotation, ``?<?N.key???`` for an
        unsupported key) instead of failing the whole report.
        """
        if self.index >= len(annotations):
            logger.debug("Placeholder {%d} out of range for %d annotations", self.index, len(annotations))
            return f"?<?{self.index}/{len(annotations)}???"
        try:
            return annotations[self.index].format(self.key, primary_class)
        except AnnotationFormatError as exc:
            logger.debug("Placeholder {%d.%s} not formattable: %s", self.index, self.key, exc)
            return f"?<?{self.index}.{self.key}???"


def parse_message_template(template: str) -> tuple[str, list[Placeholder]]:
    """Split *template* into a rewritten template and its placeholders.

    Placeholders are listed in order of appearance; repeated references get
    their own slot.

    >>> parse_message_template("{1.name} calls {0} then {1.name}")
    ('{0} calls {1} then {2}', [Placeholder(index=1, key='name'), Placeholder(index=0, key=''), Placeholder(index=1, key='name')])
    """
    placeholders: list[Placeholder] = []

    def _rewrite(match: re.Match[str]) -> str:
        slot = len(placeholders)
        placeholders.append(Placeholder(int(match.group(1)), match.group(2) or ""))
        return f"{{{slot}}}"

    formatted = PLACEHOLDER_RE.sub(_rewrite, template)
    return formatted, placeholders
