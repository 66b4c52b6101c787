# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Bug patterns, bug instances, and the collection a run produces."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from pydantic import BaseModel, Field

from bugsarif.core.exceptions import UnknownPatternError
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


class BugPattern(BaseModel):
    """Template describing one kind of reportable bug."""

    type: str = Field(description="Unique pattern type, e.g. NP_NULL_ON_SOME_PATH")
    abbrev: str = ""
    category: str = ""
    short_description: str = ""
    long_description: str = Field(
        default="",
        description="Message template with {N} / {N.key} annotation placeholders",
    )
    detail_text: str = ""
    url: str | None = Field(default=None, description="Help page; the pattern type is appended as fragment")

    @property
    def help_uri(self) -> str | None:
        if not self.url:
            return None
        return f"{self.url}#{self.type}"


class BugInstance(BaseModel):
    """A single reported occurrence of a bug pattern."""

    type: str
    rank: int = Field(description="1 (scariest) to 20 (of concern)")
    annotations: list[BugAnnotation] = Field(default_factory=list)

    # -- builders ----------------------------------------------------------

    def add_class(self, class_name: str, source_lines: SourceLineAnnotation | None = None) -> BugInstance:
        self.annotations.append(ClassAnnotation(class_name=class_name, source_lines=source_lines))
        return self

    def add_method(
        self,
        class_name: str,
        method_name: str,
        parameters: list[str] | None = None,
        source_lines: SourceLineAnnotation | None = None,
    ) -> BugInstance:
        self.annotations.append(
            MethodAnnotation(
                class_name=class_name,
                method_name=method_name,
                parameters=parameters or [],
                source_lines=source_lines,
            )
        )
        return self

    def add_field(self, class_name: str, field_name: str, field_type: str = "") -> BugInstance:
        self.annotations.append(
            FieldAnnotation(class_name=class_name, field_name=field_name, field_type=field_type)
        )
        return self

    def add_local_variable(self, name: str, register_number: int = -1) -> BugInstance:
        self.annotations.append(LocalVariableAnnotation(name=name, register_number=register_number))
        return self

    def add_int(self, value: int) -> BugInstance:
        self.annotations.append(IntAnnotation(value=value))
        return self

    def add_string(self, value: str) -> BugInstance:
        self.annotations.append(StringAnnotation(value=value))
        return self

    def add_source_line(
        self, class_name: str, source_path: str, start_line: int = -1, end_line: int = -1
    ) -> BugInstance:
        self.annotations.append(
            SourceLineAnnotation(
                class_name=class_name,
                source_path=source_path,
                start_line=start_line,
                end_line=end_line,
            )
        )
        return self

    # -- primary annotations ----------------------------------------------

    @property
    def primary_class(self) -> ClassAnnotation | None:
        return next((a for a in self.annotations if isinstance(a, ClassAnnotation)), None)

    @property
    def primary_method(self) -> MethodAnnotation | None:
        return next((a for a in self.annotations if isinstance(a, MethodAnnotation)), None)

    @property
    def primary_field(self) -> FieldAnnotation | None:
        return next((a for a in self.annotations if isinstance(a, FieldAnnotation)), None)

    @property
    def primary_source_line(self) -> SourceLineAnnotation | None:
        """Best source line for the bug, or ``None`` when none is known.

        An explicit source-line annotation wins; otherwise the lines carried
        by the primary method, field, or class are used, in that order.
        """
        for annotation in self.annotations:
            if isinstance(annotation, SourceLineAnnotation):
                return annotation
        for owner in (self.primary_method, self.primary_field, self.primary_class):
            if owner is not None and owner.source_lines is not None:
                return owner.source_lines
        return None


@dataclass
class BugCollection:
    """Patterns plus the bugs reported against them, in report order."""

    patterns: dict[str, BugPattern] = field(default_factory=dict)
    bugs: list[BugInstance] = field(default_factory=list)

    def add_pattern(self, pattern: BugPattern) -> None:
        self.patterns[pattern.type] = pattern

    def add_patterns(self, patterns: Iterable[BugPattern]) -> None:
        for pattern in patterns:
            self.add_pattern(pattern)

    def add(self, bug: BugInstance) -> None:
        self.bugs.append(bug)

    def pattern_for(self, bug: BugInstance) -> BugPattern:
        """Return the pattern *bug* was reported against.

        Raises:
            UnknownPatternError: If the bug type has no registered pattern.
        """
        pattern = self.patterns.get(bug.type)
        if pattern is None:
            msg = f"No bug pattern registered for type {bug.type!r}"
            raise UnknownPatternError(msg)
        return pattern

    def __iter__(self) -> Iterator[BugInstance]:
        return iter(self.bugs)

    def __len__(self) -> int:
        return len(self.bugs)
