"""Result filtering and summary counts."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from code_analyze.rules.base import AnalysisResult, Severity


@dataclass(frozen=True, slots=True)
class SeverityCounts:
    """Diagnostic totals per severity."""

    errors: int
    warnings: int
    infos: int

    @property
    def total(self) -> int:
        return self.errors + self.warnings + self.infos


def filter_results(results: Sequence[AnalysisResult], *, errors_only: bool) -> list[AnalysisResult]:
    """Keep only error diagnostics when requested, preserving order."""
    if not errors_only:
        return list(results)
    return [result for result in results if result.severity is Severity.ERROR]


def count_by_severity(results: Sequence[AnalysisResult]) -> SeverityCounts:
    """Count diagnostics per severity."""
    return SeverityCounts(
        errors=sum(1 for item in results if item.severity is Severity.ERROR),
        warnings=sum(1 for item in results if item.severity is Severity.WARNING),
        infos=sum(1 for item in results if item.severity is Severity.INFO),
    )
