# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for exit code flags and signal names."""

from __future__ import annotations

import pytest

from bugsarif.ci.exit_codes import FAILURE_EXIT_CODE, ExitCodes, exit_code_from, signal_name


class TestExitCodeFrom:
    def test_success(self):
        assert exit_code_from(0, 0, 0) == 0

    @pytest.mark.parametrize(
        ("errors", "missing", "bugs", "expected"),
        [
            (0, 0, 3, 1),
            (0, 2, 0, 2),
            (1, 0, 0, 4),
            (1, 1, 1, 7),
            (5, 0, 9, 5),
        ],
    )
    def test_flags(self, errors, missing, bugs, expected):
        assert exit_code_from(errors, missing, bugs) == expected

    def test_failure_code_outside_flags(self):
        all_flags = ExitCodes.BUGS_FOUND | ExitCodes.MISSING_CLASS | ExitCodes.ERROR
        assert FAILURE_EXIT_CODE & all_flags == 0


class TestSignalName:
    @pytest.mark.parametrize(
        ("code", "name"),
        [
            (0, "SUCCESS"),
            (1, "BUGS FOUND"),
            (2, "MISSING CLASS"),
            (4, "ERROR"),
            (3, "MISSING CLASS,BUGS FOUND"),
            (5, "ERROR,BUGS FOUND"),
            (7, "ERROR,MISSING CLASS,BUGS FOUND"),
            (8, "UNKNOWN"),
        ],
    )
    def test_names(self, code, name):
        assert signal_name(code) == name
