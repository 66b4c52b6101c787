# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Typer CLI application root."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from bugsarif.ci.exit_codes import FAILURE_EXIT_CODE
from bugsarif.core.config import get_settings
from bugsarif.core.exceptions import BugSarifError
from bugsarif.core.logging import setup_logging

app = typer.Typer(
    name="bugsarif",
    help="Convert finished static-analysis runs into SARIF 2.1.0 reports",
    no_args_is_help=True,
)


@app.command()
def convert(
    run_file: Annotated[
        Path, typer.Argument(help="Analysis run JSON document (patterns, bugs, errors)")
    ],
    patterns: Annotated[
        list[Path] | None,
        typer.Option("--patterns", "-p", help="YAML pattern catalog file or directory (repeatable)"),
    ] = None,
    source_roots: Annotated[
        list[Path] | None,
        typer.Option("--source-root", "-s", help="Source root directory (repeatable, most specific first)"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path (stdout when omitted)"),
    ] = None,
    language: Annotated[
        str | None,
        typer.Option("--language", help="Report language code, e.g. 'en' or 'ja'"),
    ] = None,
    ci_mode: Annotated[
        bool,
        typer.Option("--ci-mode", help="Exit with the analysis exit code"),
    ] = False,
) -> None:
    """Write the SARIF report for an analysis run."""
    from bugsarif.models.run import AnalysisRun
    from bugsarif.patterns.yaml_loader import load_patterns_from_directory, load_patterns_from_file
    from bugsarif.sarif.reporter import SarifBugReporter
    from bugsarif.sources.finder import SourceFinder

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if language:
        settings = settings.model_copy(update={"language": language})

    try:
        run = AnalysisRun.from_file(run_file)
    except (OSError, ValidationError) as exc:
        typer.echo(f"Cannot load analysis run {run_file}: {exc}", err=True)
        raise typer.Exit(FAILURE_EXIT_CODE) from exc

    roots = [str(root) for root in source_roots] if source_roots else settings.source_roots
    reporter = SarifBugReporter(
        source_finder=SourceFinder(roots),
        plugins=run.plugins,
        output=output,
        settings=settings,
    )

    try:
        reporter.register_patterns(run.patterns)
        for catalog in patterns or []:
            if catalog.is_dir():
                reporter.register_patterns(load_patterns_from_directory(catalog))
            else:
                reporter.register_patterns(load_patterns_from_file(catalog))

        for bug in run.bugs:
            reporter.report_bug(bug)
        for error in run.errors:
            reporter.log_error(error.message)
        for class_name in run.missing_classes:
            reporter.report_missing_class(class_name)

        report = reporter.finish()
    except BugSarifError as exc:
        typer.echo(f"Report generation failed: {exc}", err=True)
        raise typer.Exit(FAILURE_EXIT_CODE) from exc

    if output:
        typer.echo(f"Output written to {output}")

    if ci_mode:
        raise typer.Exit(report.runs[0].invocations[0].exitCode)


@app.command(name="patterns")
def patterns_list(
    catalog: Annotated[Path, typer.Argument(help="YAML pattern catalog file or directory")],
) -> None:
    """List the bug patterns in a catalog."""
    from rich.console import Console
    from rich.table import Table

    from bugsarif.patterns.yaml_loader import load_patterns_from_directory, load_patterns_from_file

    try:
        if catalog.is_dir():
            loaded = load_patterns_from_directory(catalog)
        else:
            loaded = load_patterns_from_file(catalog)
    except BugSarifError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(FAILURE_EXIT_CODE) from exc

    console = Console()
    if not loaded:
        console.print("[dim]No bug patterns found.[/dim]")
        return

    table = Table(title="Bug Patterns")
    table.add_column("Type", style="cyan", no_wrap=True)
    table.add_column("Category")
    table.add_column("Description")
    table.add_column("Help URI")

    for pattern in loaded:
        table.add_row(pattern.type, pattern.category, pattern.short_description, pattern.help_uri or "")

    console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    from bugsarif import __version__

    typer.echo(f"bugsarif v{__version__}")
