"""Output rendering."""

from __future__ import annotations

from collections.abc import Sequence

import click

from code_analyze.results import count_by_severity
from code_analyze.rules import RuleInfo
from code_analyze.rules.base import AnalysisResult, Severity

_SEVERITY_STYLES: dict[Severity, tuple[str, str]] = {
    Severity.ERROR: ("ERROR", "red"),
    Severity.WARNING: ("WARNING", "yellow"),
    Severity.INFO: ("INFO", "green"),
}

_SEVERITY_LETTERS: dict[Severity, str] = {
    Severity.ERROR: "E",
    Severity.WARNING: "W",
    Severity.INFO: "I",
}


def render_results(results: Sequence[AnalysisResult], output_format: str) -> str:
    """Render diagnostics in the requested format."""
    if output_format == "compact":
        return render_compact(results)
    if output_format == "text":
        return render_text(results)
    raise ValueError(f"Unknown output format: {output_format}")


def render_text(results: Sequence[AnalysisResult]) -> str:
    """Render a colorized, human-readable report with summary counts."""
    if not results:
        return click.style("✓ No problems found", fg="green")

    lines: list[str] = ["Analysis results:", "=================", ""]
    for result in results:
        lines.append(f"{severity_label(result.severity)}: {result.file}:{result.line}")
        lines.append(f"  Rule: {result.rule_name}")
        lines.append(f"  Message: {result.message}")
        lines.append(f"  Code: {click.style(result.code_snippet, dim=True)}")
        lines.append("")

    counts = count_by_severity(results)
    lines.extend(
        [
            "Statistics:",
            f"  Errors: {click.style(str(counts.errors), fg='red')}",
            f"  Warnings: {click.style(str(counts.warnings), fg='yellow')}",
            f"  Infos: {click.style(str(counts.infos), fg='blue')}",
            f"  Total: {len(results)}",
        ]
    )
    return "\n".join(lines)


def render_compact(results: Sequence[AnalysisResult]) -> str:
    """Render one ``file:line:L: rule - message`` line per diagnostic."""
    return "\n".join(
        f"{item.file}:{item.line}:{severity_letter(item.severity)}: "
        f"{item.rule_name} - {item.message}"
        for item in results
    )


def render_rule_list(rules: Sequence[RuleInfo]) -> str:
    """Render the rule catalog for ``--list-rules``."""
    lines = ["Available rules:"]
    for info in rules:
        languages = ", ".join(info.languages)
        lines.append(
            f"- {info.name} [{severity_label(info.severity)}] ({languages}) - {info.message}"
        )
    return "\n".join(lines)


def severity_label(severity: Severity) -> str:
    label, color = _SEVERITY_STYLES[severity]
    return click.style(label, fg=color)


def severity_letter(severity: Severity) -> str:
    return _SEVERITY_LETTERS[severity]
