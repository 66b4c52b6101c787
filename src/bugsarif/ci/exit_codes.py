# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Exit codes reported in the SARIF invocation and used by CI mode.

The exit code is a bit set:
    1  BUGS_FOUND     at least one bug was reported
    2  MISSING_CLASS  classes needed for analysis were missing
    4  ERROR          errors were recorded during analysis

The CLI exits with 8 when no report could be produced at all.
"""

from __future__ import annotations

from enum import IntFlag


class ExitCodes(IntFlag):
    """Exit code flags combined into the analysis exit code."""

    BUGS_FOUND = 1
    MISSING_CLASS = 2
    ERROR = 4


# Order in which set flags are named in the signal name
_SIGNAL_NAMES: list[tuple[ExitCodes, str]] = [
    (ExitCodes.ERROR, "ERROR"),
    (ExitCodes.MISSING_CLASS, "MISSING CLASS"),
    (ExitCodes.BUGS_FOUND, "BUGS FOUND"),
]


def exit_code_from(errors: int, missing_classes: int, bugs: int) -> int:
    """Combine the three run counters into an exit code."""
    code = ExitCodes(0)
    if errors > 0:
        code |= ExitCodes.ERROR
    if missing_classes > 0:
        code |= ExitCodes.MISSING_CLASS
    if bugs > 0:
        code |= ExitCodes.BUGS_FOUND
    return int(code)


def signal_name(exit_code: int) -> str:
    """Return a human readable name for *exit_code*.

    Args:
        exit_code: Value produced by :func:`exit_code_from`.

    Returns:
        ``"SUCCESS"`` for zero, the names of the set flags joined with
        ``","`` otherwise, or ``"UNKNOWN"`` when none of the known flags
        is set.
    """
    if exit_code == 0:
        return "SUCCESS"

    names = [name for flag, name in _SIGNAL_NAMES if exit_code & flag]
    return ",".join(names) if names else "UNKNOWN"


# Exit status for runs where no report could be produced; outside the flag bits
FAILURE_EXIT_CODE = 8
