"""CLI entrypoint for code-analyze."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated

import click
import typer

from code_analyze import __version__
from code_analyze.analyzer import analyze_path
from code_analyze.config import FORMAT_CHOICES, AppConfig, load_app_config
from code_analyze.output import render_results, render_rule_list
from code_analyze.results import filter_results
from code_analyze.rules import list_rule_info

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="code-analyze",
    add_completion=False,
    help="Static analyzer of code.",
)


def version_callback(value: bool) -> None:
    """Print version and exit when --version is provided."""
    if value:
        typer.echo(__version__)
        raise typer.Exit()


def list_rules_callback(value: bool) -> None:
    """Print the rule catalog and exit when --list-rules is provided."""
    if value:
        typer.echo(render_rule_list(list_rule_info()))
        raise typer.Exit()


@app.command()
def analyze_command(
    path: Annotated[str, typer.Argument(help="File or directory to analyze.")],
    errors_only: Annotated[
        bool | None,
        typer.Option(
            "--errors-only/--no-errors-only",
            "-e",
            help="Report only error-severity diagnostics.",
        ),
    ] = None,
    format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: text|compact.", show_default="text"),
    ] = None,
    ignore: Annotated[
        list[str] | None,
        typer.Option("--ignore", "-i", help="Skip paths containing this substring."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to config TOML file."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log skipped files and scan progress to stderr."),
    ] = False,
    list_rules: Annotated[
        bool,
        typer.Option(
            "--list-rules",
            help="List built-in rules and exit.",
            callback=list_rules_callback,
            is_eager=True,
        ),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Scan PATH for unsafe constructs, panicking calls and style issues."""
    _ = (list_rules, version)
    _configure_logging(verbose)

    if format is not None and format.lower() not in FORMAT_CHOICES:
        raise typer.BadParameter(
            f"format must be one of: {', '.join(FORMAT_CHOICES)}", param_hint="--format"
        )

    root = Path(path)
    if not root.exists():
        typer.echo(f"{click.style('Error', fg='red')}: path '{path}' does not exist", err=True)
        raise typer.Exit(code=1)

    app_config = _load_config_or_raise(root, config_file)
    output_format = (format or app_config.format).lower()

    resolved_errors_only = errors_only if errors_only is not None else app_config.errors_only
    ignore_patterns = [*app_config.ignore, *(ignore or [])]
    logger.debug(
        "Analyzing %s (format=%s, errors_only=%s, ignore=%s, config=%s)",
        path,
        output_format,
        resolved_errors_only,
        ignore_patterns,
        app_config.source or "defaults",
    )

    results = analyze_path(path, ignore_patterns)
    selected = filter_results(results, errors_only=resolved_errors_only)

    rendered = render_results(selected, output_format)
    if rendered:
        typer.echo(rendered)


def main() -> None:
    """Console script entrypoint."""
    app()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _load_config_or_raise(root: Path, config_file: Path | None) -> AppConfig:
    try:
        return load_app_config(root, config_path=config_file)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc
