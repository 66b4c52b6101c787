# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Bug annotations: the program elements a bug instance points at.

Every annotation can render itself for a message placeholder through
``format(key, primary_class)``.  The key selects a rendering style, e.g.
``"givenClass"`` shortens member names declared in the bug's primary class
and ``"full"`` always renders the fully qualified form.
"""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Annotated, Literal

from pydantic import BaseModel, Field

from bugsarif.core.exceptions import AnnotationFormatError


def _unsupported(kind: str, key: str) -> AnnotationFormatError:
    return AnnotationFormatError(f"{kind} annotation does not support format key {key!r}")


class SourceLineAnnotation(BaseModel):
    """A range of lines in a source file, relative to a source root."""

    kind: Literal["source-line"] = "source-line"
    class_name: str
    source_path: str = Field(description="POSIX path relative to a source root, e.g. com/acme/Foo.java")
    start_line: int = -1
    end_line: int = -1

    @property
    def source_file(self) -> str:
        return PurePosixPath(self.source_path).name

    @property
    def has_lines(self) -> bool:
        return self.start_line > 0 and self.end_line > 0

    def _describe_lines(self) -> str:
        if not self.has_lines:
            return "unknown line"
        if self.start_line == self.end_line:
            return f"line {self.start_line}"
        return f"lines {self.start_line}-{self.end_line}"

    def format(self, key: str, primary_class: ClassAnnotation | None) -> str:
        if key == "":
            return f"At {self.source_file}:[{self._describe_lines()}]"
        if key == "full":
            if not self.has_lines:
                return self.class_name
            return f"{self.class_name}:[{self._describe_lines()}]"
        if key == "lineNumber":
            if self.start_line == self.end_line:
                return str(self.start_line)
            return f"{self.start_line}-{self.end_line}"
        if key == "hash":
            return self.class_name
        raise _unsupported(self.kind, key)


class ClassAnnotation(BaseModel):
    kind: Literal["class"] = "class"
    class_name: str
    source_lines: SourceLineAnnotation | None = None

    @property
    def package_name(self) -> str:
        package, _, _ = self.class_name.rpartition(".")
        return package

    @property
    def simple_name(self) -> str:
        return self.class_name.rpartition(".")[2]

    def format(self, key: str, primary_class: ClassAnnotation | None) -> str:
        if key in ("", "full", "givenClass", "name"):
            return self.class_name
        if key == "simpleClass":
            return self.simple_name
        if key == "package":
            return self.package_name
        raise _unsupported(self.kind, key)


def _in_primary_class(class_name: str, primary_class: ClassAnnotation | None) -> bool:
    return primary_class is not None and primary_class.class_name == class_name


class MethodAnnotation(BaseModel):
    kind: Literal["method"] = "method"
    class_name: str
    method_name: str
    parameters: list[str] = Field(default_factory=list)
    source_lines: SourceLineAnnotation | None = None

    @property
    def signature(self) -> str:
        return f"{self.method_name}({', '.join(self.parameters)})"

    def format(self, key: str, primary_class: ClassAnnotation | None) -> str:
        if key in ("", "full"):
            return f"{self.class_name}.{self.signature}"
        if key == "givenClass":
            if _in_primary_class(self.class_name, primary_class):
                return self.signature
            return f"{self.class_name}.{self.signature}"
        if key == "name":
            return self.method_name
        if key == "class":
            return self.class_name
        raise _unsupported(self.kind, key)


class FieldAnnotation(BaseModel):
    kind: Literal["field"] = "field"
    class_name: str
    field_name: str
    field_type: str = ""
    source_lines: SourceLineAnnotation | None = None

    def format(self, key: str, primary_class: ClassAnnotation | None) -> str:
        if key in ("", "full"):
            return f"{self.class_name}.{self.field_name}"
        if key == "givenClass":
            if _in_primary_class(self.class_name, primary_class):
                return self.field_name
            return f"{self.class_name}.{self.field_name}"
        if key == "name":
            return self.field_name
        if key == "type":
            return self.field_type
        raise _unsupported(self.kind, key)


class LocalVariableAnnotation(BaseModel):
    kind: Literal["local-variable"] = "local-variable"
    name: str
    register_number: int = -1

    def format(self, key: str, primary_class: ClassAnnotation | None) -> str:
        if key in ("", "full", "givenClass", "name"):
            return self.name
        if key == "register":
            return str(self.register_number)
        raise _unsupported(self.kind, key)


class IntAnnotation(BaseModel):
    kind: Literal["int"] = "int"
    value: int

    def format(self, key: str, primary_class: ClassAnnotation | None) -> str:
        if key == "":
            return str(self.value)
        if key == "hash":
            return hex(self.value)
        raise _unsupported(self.kind, key)


class StringAnnotation(BaseModel):
    kind: Literal["string"] = "string"
    value: str

    def format(self, key: str, primary_class: ClassAnnotation | None) -> str:
        if key == "":
            return self.value
        raise _unsupported(self.kind, key)


BugAnnotation = Annotated[
    ClassAnnotation
    | MethodAnnotation
    | FieldAnnotation
    | LocalVariableAnnotation
    | IntAnnotation
    | StringAnnotation
    | SourceLineAnnotation,
    Field(discriminator="kind"),
]
