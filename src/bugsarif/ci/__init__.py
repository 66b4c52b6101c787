# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""CI/CD integration: exit code flags shared by the report and the CLI."""

from bugsarif.ci.exit_codes import FAILURE_EXIT_CODE, ExitCodes, exit_code_from, signal_name

__all__ = [
    "FAILURE_EXIT_CODE",
    "ExitCodes",
    "exit_code_from",
    "signal_name",
]
