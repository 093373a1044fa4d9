"""Path exclusion policy for directory traversal."""

from __future__ import annotations

import os
from collections.abc import Iterable

BUILTIN_IGNORES = ("/target/", "/.git/", "/node_modules/", "/build/")


def should_ignore(path: str | os.PathLike[str], ignore_patterns: Iterable[str] = ()) -> bool:
    """Return True if the path contains a built-in or user ignore substring.

    Patterns are plain substrings; no glob or regex semantics apply.
    """
    path_str = os.fspath(path)
    if any(marker in path_str for marker in BUILTIN_IGNORES):
        return True
    return any(pattern in path_str for pattern in ignore_patterns)
