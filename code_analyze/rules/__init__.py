"""Rules package."""

from dataclasses import dataclass

from code_analyze.rules import c_family, general, rust
from code_analyze.rules.base import AnalysisResult, Severity, TextRule

__all__ = [
    "AnalysisResult",
    "RuleInfo",
    "Severity",
    "TextRule",
    "default_rules",
    "list_rule_info",
]


@dataclass(frozen=True, slots=True)
class RuleInfo:
    """Rule metadata for listing."""

    name: str
    severity: Severity
    languages: tuple[str, ...]
    message: str


_CATALOG: tuple[TextRule, ...] = (*rust.RULES, *c_family.RULES, *general.RULES)


def _check_unique_names(rules: tuple[TextRule, ...]) -> None:
    seen: set[str] = set()
    for rule in rules:
        if rule.name in seen:
            raise ValueError(f"Duplicate rule name in catalog: {rule.name}")
        seen.add(rule.name)


_check_unique_names(_CATALOG)


def default_rules() -> list[TextRule]:
    """Return the fixed rule catalog in evaluation order."""
    return list(_CATALOG)


def list_rule_info() -> list[RuleInfo]:
    """Return metadata for every rule in the catalog."""
    return [
        RuleInfo(
            name=rule.name,
            severity=rule.severity,
            languages=rule.languages,
            message=rule.message,
        )
        for rule in _CATALOG
    ]
