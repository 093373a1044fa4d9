"""C and C++ rules."""

from __future__ import annotations

from code_analyze.rules.base import Severity, text_rule

C_FAMILY = ("c", "cpp")

RULES = [
    text_rule(
        "c-unsafe-function",
        r"\b(gets|strcpy|sprintf)\s*\(",
        "Use of an unsafe function",
        Severity.ERROR,
        C_FAMILY,
    ),
    text_rule(
        "c-malloc-without-free",
        r"malloc\s*\(",
        "malloc without a matching free check",
        Severity.WARNING,
        C_FAMILY,
    ),
    text_rule(
        "c-printf-format",
        r"printf\s*\(",
        "printf used instead of fprintf/std::cout",
        Severity.INFO,
        C_FAMILY,
    ),
]
