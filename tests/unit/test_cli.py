# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Unit tests for the CLI: convert, patterns, version."""

from __future__ import annotations

import json
import textwrap
from pathlib import Path

import pytest
from typer.testing import CliRunner

from bugsarif.cli.app import app

runner = CliRunner()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_run(**overrides) -> dict:
    run = {
        "patterns": [
            {
                "type": "NP_NULL",
                "category": "CORRECTNESS",
                "short_description": "Null dereference",
                "long_description": "Null dereference in {0.givenClass}",
                "url": "https://example.com/bugs.html",
            }
        ],
        "bugs": [
            {
                "type": "NP_NULL",
                "rank": 3,
                "annotations": [
                    {"kind": "class", "class_name": "com.acme.Foo"},
                    {"kind": "source-line", "class_name": "com.acme.Foo", "source_path": "com/acme/Foo.java",
                     "start_line": 5, "end_line": 5},
                ],
            }
        ],
        "missing_classes": [],
        "errors": [],
        "plugins": [{"plugin_id": "core", "version": "1.0"}],
    }
    run.update(overrides)
    return run


def _write_run(tmp_path: Path, **overrides) -> Path:
    path = tmp_path / "run.json"
    path.write_text(json.dumps(_make_run(**overrides)), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch):
    monkeypatch.setenv("BUGSARIF_LOG_LEVEL", "ERROR")


# ---------------------------------------------------------------------------
# convert
# ---------------------------------------------------------------------------


class TestConvert:
    def test_writes_report_to_stdout(self, tmp_path):
        result = runner.invoke(app, ["convert", str(_write_run(tmp_path)), "--language", "en"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        run = data["runs"][0]
        assert run["tool"]["driver"]["language"] == "en"
        assert run["tool"]["driver"]["rules"][0]["messageStrings"]["default"]["text"] == "Null dereference in {0}"
        assert run["tool"]["extensions"][0]["name"] == "core"
        assert run["results"][0]["message"]["arguments"] == ["com.acme.Foo"]
        assert run["results"][0]["level"] == "error"

    def test_source_root_option(self, tmp_path):
        source_root = tmp_path / "src"
        (source_root / "com/acme").mkdir(parents=True)
        (source_root / "com/acme/Foo.java").touch()

        result = runner.invoke(app, ["convert", str(_write_run(tmp_path)), "-s", str(source_root)])

        assert result.exit_code == 0, result.output
        run = json.loads(result.stdout)["runs"][0]
        artifact = run["results"][0]["locations"][0]["physicalLocation"]["artifactLocation"]
        assert artifact == {"uri": "com/acme/Foo.java", "uriBaseId": "SRCROOT0"}
        assert run["originalUriBaseIds"]["SRCROOT0"]["uri"].endswith("/src/")

    def test_output_file(self, tmp_path):
        target = tmp_path / "report.sarif"

        result = runner.invoke(app, ["convert", str(_write_run(tmp_path)), "--output", str(target)])

        assert result.exit_code == 0, result.output
        assert "Output written to" in result.output
        assert json.loads(target.read_text(encoding="utf-8"))["version"] == "2.1.0"

    def test_ci_mode_exit_code(self, tmp_path):
        run_file = _write_run(tmp_path, missing_classes=["a/B"], errors=[{"message": "boom"}])
        target = tmp_path / "report.sarif"

        result = runner.invoke(app, ["convert", str(run_file), "-o", str(target), "--ci-mode"])

        assert result.exit_code == 7
        invocation = json.loads(target.read_text(encoding="utf-8"))["runs"][0]["invocations"][0]
        assert invocation["exitSignalName"] == "ERROR,MISSING CLASS,BUGS FOUND"
        assert invocation["toolExecutionNotifications"][0]["message"]["text"] == "boom"

    def test_ci_mode_clean_run(self, tmp_path):
        run_file = _write_run(tmp_path, bugs=[])
        result = runner.invoke(app, ["convert", str(run_file), "-o", str(tmp_path / "r.sarif"), "--ci-mode"])
        assert result.exit_code == 0

    def test_pattern_catalog_option(self, tmp_path):
        catalog = tmp_path / "extra.yml"
        catalog.write_text(
            textwrap.dedent("""\
                patterns:
                  - type: DM_EXIT
                    category: BAD_PRACTICE
                    long_description: Calls exit in {0}
            """),
            encoding="utf-8",
        )
        run_file = _write_run(
            tmp_path,
            bugs=[{"type": "DM_EXIT", "rank": 16, "annotations": [{"kind": "class", "class_name": "Foo"}]}],
        )

        result = runner.invoke(app, ["convert", str(run_file), "-p", str(catalog)])

        assert result.exit_code == 0, result.output
        run = json.loads(result.stdout)["runs"][0]
        assert [rule["id"] for rule in run["tool"]["driver"]["rules"]] == ["DM_EXIT"]
        assert run["results"][0]["level"] == "note"

    def test_unreadable_run_file(self, tmp_path):
        result = runner.invoke(app, ["convert", str(tmp_path / "missing.json")])
        assert result.exit_code == 8

    def test_invalid_run_file(self, tmp_path):
        path = tmp_path / "run.json"
        path.write_text('{"bugs": [{"type": "X"}]}', encoding="utf-8")
        result = runner.invoke(app, ["convert", str(path)])
        assert result.exit_code == 8

    def test_unknown_pattern_fails(self, tmp_path):
        run_file = _write_run(tmp_path, patterns=[])
        result = runner.invoke(app, ["convert", str(run_file)])
        assert result.exit_code == 8
        assert "Report generation failed" in result.output


# ---------------------------------------------------------------------------
# patterns / version
# ---------------------------------------------------------------------------


class TestPatterns:
    def test_lists_catalog(self, tmp_path):
        catalog = tmp_path / "catalog.yml"
        catalog.write_text(
            "patterns:\n  - type: DM_EXIT\n    category: BAD_PRACTICE\n    short_description: Exits\n",
            encoding="utf-8",
        )

        result = runner.invoke(app, ["patterns", str(catalog)])

        assert result.exit_code == 0
        assert "Bug Patterns" in result.output
        assert "DM_EXIT" in result.output

    def test_empty_directory(self, tmp_path):
        result = runner.invoke(app, ["patterns", str(tmp_path)])
        assert result.exit_code == 0
        assert "No bug patterns found." in result.output

    def test_broken_catalog(self, tmp_path):
        catalog = tmp_path / "bad.yml"
        catalog.write_text("rules: []\n", encoding="utf-8")
        result = runner.invoke(app, ["patterns", str(catalog)])
        assert result.exit_code == 8


class TestVersion:
    def test_version(self):
        from bugsarif import __version__

        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert f"bugsarif v{__version__}" in result.output
