# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for bug annotations, bug instances, and bug collections."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from bugsarif.core.exceptions import AnnotationFormatError, UnknownPatternError
from bugsarif.models.annotations import (
    ClassAnnotation,
    FieldAnnotation,
    IntAnnotation,
    LocalVariableAnnotation,
    MethodAnnotation,
    SourceLineAnnotation,
    StringAnnotation,
)
from bugsarif.models.bug import BugCollection, BugInstance, BugPattern

# ---------------------------------------------------------------------------
# Annotation formatting
# ---------------------------------------------------------------------------


class TestClassAnnotation:
    def test_names(self):
        ann = ClassAnnotation(class_name="com.acme.Foo")
        assert ann.format("", None) == "com.acme.Foo"
        assert ann.format("simpleClass", None) == "Foo"
        assert ann.format("package", None) == "com.acme"

    def test_default_package(self):
        ann = ClassAnnotation(class_name="Foo")
        assert ann.package_name == ""
        assert ann.simple_name == "Foo"

    def test_unsupported_key(self):
        with pytest.raises(AnnotationFormatError):
            ClassAnnotation(class_name="Foo").format("register", None)


class TestMemberAnnotations:
    def test_method_given_class_shortens_primary_members(self):
        primary = ClassAnnotation(class_name="com.acme.Foo")
        ann = MethodAnnotation(class_name="com.acme.Foo", method_name="run", parameters=["int", "String"])
        assert ann.format("givenClass", primary) == "run(int, String)"
        assert ann.format("full", primary) == "com.acme.Foo.run(int, String)"
        assert ann.format("name", primary) == "run"

    def test_method_in_other_class_keeps_class(self):
        primary = ClassAnnotation(class_name="com.acme.Foo")
        ann = MethodAnnotation(class_name="com.acme.Bar", method_name="stop")
        assert ann.format("givenClass", primary) == "com.acme.Bar.stop()"

    def test_field(self):
        primary = ClassAnnotation(class_name="com.acme.Foo")
        ann = FieldAnnotation(class_name="com.acme.Foo", field_name="count", field_type="int")
        assert ann.format("givenClass", primary) == "count"
        assert ann.format("", primary) == "com.acme.Foo.count"
        assert ann.format("type", primary) == "int"

    def test_local_variable(self):
        ann = LocalVariableAnnotation(name="buffer", register_number=3)
        assert ann.format("", None) == "buffer"
        assert ann.format("register", None) == "3"

    def test_local_variable_register_number_field(self):
        bug = BugInstance(type="T", rank=3).add_local_variable("tmp", register_number=5)
        ann = bug.annotations[0]
        assert ann.register_number == 5
        assert ann.format("register", None) == "5"
        assert "register" not in LocalVariableAnnotation.model_fields


class TestValueAnnotations:
    def test_int(self):
        assert IntAnnotation(value=255).format("", None) == "255"
        assert IntAnnotation(value=255).format("hash", None) == "0xff"

    def test_string(self):
        assert StringAnnotation(value="hello").format("", None) == "hello"
        with pytest.raises(AnnotationFormatError):
            StringAnnotation(value="hello").format("name", None)


class TestSourceLineAnnotation:
    def test_line_range(self):
        ann = SourceLineAnnotation(class_name="com.acme.Foo", source_path="com/acme/Foo.java", start_line=3, end_line=7)
        assert ann.source_file == "Foo.java"
        assert ann.has_lines
        assert ann.format("", None) == "At Foo.java:[lines 3-7]"
        assert ann.format("full", None) == "com.acme.Foo:[lines 3-7]"
        assert ann.format("lineNumber", None) == "3-7"

    def test_single_line(self):
        ann = SourceLineAnnotation(class_name="Foo", source_path="Foo.java", start_line=5, end_line=5)
        assert ann.format("", None) == "At Foo.java:[line 5]"
        assert ann.format("lineNumber", None) == "5"

    def test_unknown_lines(self):
        ann = SourceLineAnnotation(class_name="Foo", source_path="Foo.java")
        assert not ann.has_lines
        assert ann.format("", None) == "At Foo.java:[unknown line]"
        assert ann.format("full", None) == "Foo"


# ---------------------------------------------------------------------------
# Bug instances
# ---------------------------------------------------------------------------


class TestBugInstance:
    def test_builders_chain_in_order(self):
        bug = (
            BugInstance(type="T", rank=3)
            .add_class("com.acme.Foo")
            .add_method("com.acme.Foo", "run")
            .add_field("com.acme.Foo", "count")
            .add_local_variable("tmp")
            .add_int(1)
            .add_string("s")
        )
        assert [a.kind for a in bug.annotations] == [
            "class",
            "method",
            "field",
            "local-variable",
            "int",
            "string",
        ]

    def test_primary_annotations(self):
        bug = BugInstance(type="T", rank=3).add_int(1).add_class("A").add_class("B").add_method("A", "m")
        assert bug.primary_class.class_name == "A"
        assert bug.primary_method.method_name == "m"
        assert bug.primary_field is None

    def test_primary_source_line_explicit_wins(self):
        lines = SourceLineAnnotation(class_name="A", source_path="A.java", start_line=1, end_line=2)
        bug = BugInstance(type="T", rank=3).add_class("A", lines).add_source_line("A", "A.java", 9, 9)
        assert bug.primary_source_line.start_line == 9

    def test_primary_source_line_prefers_method_over_class(self):
        class_lines = SourceLineAnnotation(class_name="A", source_path="A.java", start_line=1, end_line=50)
        method_lines = SourceLineAnnotation(class_name="A", source_path="A.java", start_line=10, end_line=12)
        bug = BugInstance(type="T", rank=3).add_class("A", class_lines).add_method("A", "m", source_lines=method_lines)
        assert bug.primary_source_line is method_lines

    def test_no_source_line(self):
        assert BugInstance(type="T", rank=3).add_class("A").primary_source_line is None

    def test_annotations_validate_from_json(self):
        bug = BugInstance.model_validate(
            {
                "type": "T",
                "rank": 4,
                "annotations": [
                    {"kind": "class", "class_name": "A"},
                    {"kind": "int", "value": 7},
                ],
            }
        )
        assert isinstance(bug.annotations[0], ClassAnnotation)
        assert isinstance(bug.annotations[1], IntAnnotation)

    def test_unknown_annotation_kind_rejected(self):
        with pytest.raises(ValidationError):
            BugInstance.model_validate({"type": "T", "rank": 4, "annotations": [{"kind": "bogus"}]})


# ---------------------------------------------------------------------------
# Patterns and collections
# ---------------------------------------------------------------------------


class TestBugPattern:
    def test_help_uri_appends_type(self):
        pattern = BugPattern(type="NP_NULL", url="https://example.com/bugs.html")
        assert pattern.help_uri == "https://example.com/bugs.html#NP_NULL"

    def test_no_url(self):
        assert BugPattern(type="NP_NULL").help_uri is None


class TestBugCollection:
    def test_pattern_lookup(self):
        collection = BugCollection()
        collection.add_patterns([BugPattern(type="A"), BugPattern(type="B")])
        bug = BugInstance(type="B", rank=1)
        collection.add(bug)

        assert collection.pattern_for(bug).type == "B"
        assert len(collection) == 1
        assert list(collection) == [bug]

    def test_later_pattern_replaces_earlier(self):
        collection = BugCollection()
        collection.add_pattern(BugPattern(type="A", category="OLD"))
        collection.add_pattern(BugPattern(type="A", category="NEW"))
        assert collection.patterns["A"].category == "NEW"

    def test_unknown_pattern(self):
        with pytest.raises(UnknownPatternError, match="'MISSING'"):
            BugCollection().pattern_for(BugInstance(type="MISSING", rank=1))
