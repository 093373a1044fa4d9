"""Base rule and diagnostic models."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


class Severity(str, Enum):
    """Diagnostic severity."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True, slots=True)
class TextRule:
    """A single-line regex rule scoped to a set of languages."""

    name: str
    pattern: re.Pattern[str]
    message: str
    severity: Severity
    languages: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """A single diagnostic emitted for one source line."""

    file: str
    line: int
    message: str
    severity: Severity
    rule_name: str
    code_snippet: str


def text_rule(
    name: str,
    pattern: str,
    message: str,
    severity: Severity,
    languages: tuple[str, ...],
    *,
    flags: int = 0,
) -> TextRule:
    """Build a rule, compiling its pattern eagerly."""
    return TextRule(
        name=name,
        pattern=re.compile(pattern, flags),
        message=message,
        severity=severity,
        languages=languages,
    )
