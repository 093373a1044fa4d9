"""Aggregation and output rendering tests."""

from __future__ import annotations

import click
import pytest

from code_analyze.config import FORMAT_CHOICES
from code_analyze.output import render_compact, render_results, render_rule_list, render_text
from code_analyze.results import count_by_severity, filter_results
from code_analyze.rules import list_rule_info
from code_analyze.rules.base import AnalysisResult, Severity


def test_errors_only_is_an_ordered_subset() -> None:
    results = [
        _result("a.c", 1, Severity.INFO, "c-printf-format"),
        _result("a.c", 2, Severity.ERROR, "c-unsafe-function"),
        _result("b.rs", 3, Severity.WARNING, "rust-unwrap"),
        _result("b.c", 4, Severity.ERROR, "c-unsafe-function"),
    ]
    selected = filter_results(results, errors_only=True)
    assert selected == [results[1], results[3]]
    assert filter_results(results, errors_only=False) == results


def test_count_by_severity() -> None:
    counts = count_by_severity(
        [
            _result("a.c", 1, Severity.ERROR, "x"),
            _result("a.c", 2, Severity.WARNING, "y"),
            _result("a.c", 3, Severity.WARNING, "y"),
        ]
    )
    assert (counts.errors, counts.warnings, counts.infos, counts.total) == (1, 2, 0, 3)


def test_compact_line_format() -> None:
    result = AnalysisResult(
        file="path/to/file.rs",
        line=12,
        message="TODO comment found",
        severity=Severity.INFO,
        rule_name="rust-todo",
        code_snippet="x(); // TODO: later",
    )
    assert render_compact([result]) == "path/to/file.rs:12:I: rust-todo - TODO comment found"


def test_compact_severity_letters() -> None:
    rendered = render_compact(
        [
            _result("a.c", 1, Severity.ERROR, "e-rule"),
            _result("a.c", 2, Severity.WARNING, "w-rule"),
        ]
    )
    assert rendered.splitlines() == [
        "a.c:1:E: e-rule - message for e-rule",
        "a.c:2:W: w-rule - message for w-rule",
    ]
    assert render_compact([]) == ""


def test_text_report_has_entries_and_statistics() -> None:
    rendered = click.unstyle(
        render_text(
            [
                _result("src/a.c", 7, Severity.ERROR, "c-unsafe-function"),
                _result("src/b.rs", 9, Severity.INFO, "magic-number"),
            ]
        )
    )
    assert "ERROR: src/a.c:7" in rendered
    assert "  Rule: c-unsafe-function" in rendered
    assert "  Message: message for c-unsafe-function" in rendered
    assert "  Code: snippet 7" in rendered
    assert "INFO: src/b.rs:9" in rendered
    assert "  Errors: 1" in rendered
    assert "  Warnings: 0" in rendered
    assert "  Infos: 1" in rendered
    assert rendered.endswith("  Total: 2")


def test_text_report_for_empty_results() -> None:
    assert click.unstyle(render_text([])) == "✓ No problems found"


def test_render_results_dispatch() -> None:
    results = [_result("a.c", 1, Severity.ERROR, "r")]
    assert render_results(results, "compact") == render_compact(results)
    assert render_results(results, "text") == render_text(results)
    with pytest.raises(ValueError):
        render_results(results, "json")


def test_rule_list_mentions_every_rule() -> None:
    rendered = click.unstyle(render_rule_list(list_rule_info()))
    assert rendered.startswith("Available rules:")
    assert "- c-unsafe-function [ERROR] (c, cpp)" in rendered
    assert "- magic-number [INFO] (rust, c, cpp)" in rendered


def _result(file: str, line: int, severity: Severity, rule_name: str) -> AnalysisResult:
    return AnalysisResult(
        file=file,
        line=line,
        message=f"message for {rule_name}",
        severity=severity,
        rule_name=rule_name,
        code_snippet=f"snippet {line}",
    )


def test_every_configurable_format_renders() -> None:
    results = [_result("a.rs", 3, Severity.WARNING, "rust-unwrap")]
    for output_format in FORMAT_CHOICES:
        assert render_results(results, output_format)
