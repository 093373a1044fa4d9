"""Rust-specific rules."""

from __future__ import annotations

from code_analyze.rules.base import Severity, text_rule

RUST = ("rust",)

RULES = [
    text_rule(
        "rust-unsafe-block",
        r"unsafe\s*\{",
        "Unsafe block found",
        Severity.WARNING,
        RUST,
    ),
    text_rule(
        "rust-unwrap",
        r"\.unwrap\(\)",
        "Use of unwrap() may panic",
        Severity.WARNING,
        RUST,
    ),
    text_rule(
        "rust-expect",
        r"\.expect\([^)]*\)",
        "Use of expect() may panic",
        Severity.WARNING,
        RUST,
    ),
    # Both match comment text, so the comment filter runs first and hides them.
    text_rule(
        "rust-todo",
        r"//\s*TODO:?\s*.+",
        "TODO comment found",
        Severity.INFO,
        RUST,
    ),
    text_rule(
        "rust-fixme",
        r"//\s*FIXME:?\s*.+",
        "FIXME comment found",
        Severity.INFO,
        RUST,
    ),
]
