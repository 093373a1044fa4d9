"""Rules shared by every supported language."""

from __future__ import annotations

import re

from code_analyze.rules.base import Severity, text_rule

ALL_LANGUAGES = ("rust", "c", "cpp")

LONG_LINE_THRESHOLD = 100

MAGIC_NUMBER_PATTERN = r"""
    \b
    (
      0\b
    | -1\b
    | 1\b
    | (?:
        10|100|1000          # powers of ten
      | 255|256|1024         # byte sizes
      | 60|3600|24|7         # time units
      | 8080|3000|3306       # well-known ports
      )\b
    )
    (?!\.\d)                 # not a float
    (?!\()                   # not a call
    (?!\w)                   # not part of an identifier
"""

RULES = [
    text_rule(
        "long-line",
        rf"^.{{{LONG_LINE_THRESHOLD},}}$",
        f"Line is longer than {LONG_LINE_THRESHOLD} characters",
        Severity.WARNING,
        ALL_LANGUAGES,
    ),
    text_rule(
        "magic-number",
        MAGIC_NUMBER_PATTERN,
        "Possible magic number - consider using a named constant",
        Severity.INFO,
        ALL_LANGUAGES,
        flags=re.VERBOSE,
    ),
]
