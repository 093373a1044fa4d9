"""Rule-specific suppression of pattern matches that are usually noise."""

from __future__ import annotations

import re
from collections.abc import Callable

IPV4_RE = re.compile(r"\b\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}\b")
VERSION_MARKERS = ("version", "v1.", "v0.")


def _magic_number_is_noise(line: str) -> bool:
    # array initializers and sizes
    if "[" in line and "]" in line:
        return True
    if any(marker in line for marker in VERSION_MARKERS):
        return True
    return IPV4_RE.search(line) is not None


SUPPRESSIONS: dict[str, Callable[[str], bool]] = {
    "magic-number": _magic_number_is_noise,
}


def is_false_positive(line: str, rule_name: str) -> bool:
    """Return True when a matched rule should be vetoed for this line."""
    predicate = SUPPRESSIONS.get(rule_name)
    if predicate is None:
        return False
    return predicate(line)
