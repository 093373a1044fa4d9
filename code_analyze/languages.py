"""Extension-based language classification and comment detection."""

from __future__ import annotations

from pathlib import Path

LANGUAGE_EXTENSIONS: dict[str, frozenset[str]] = {
    "rust": frozenset({"rs"}),
    "c": frozenset({"c"}),
    "cpp": frozenset({"cpp", "cxx", "cc", "hpp"}),
}

COMMENT_EXTENSIONS = frozenset({"rs", "c", "cpp", "h", "hpp"})
COMMENT_PREFIXES = ("//", "/*", "*")


def file_extension(path: str | Path) -> str:
    """Return the lower-cased extension without the leading dot."""
    return Path(path).suffix.lstrip(".").lower()


def matches_language(extension: str, language: str) -> bool:
    """Return True when a file extension belongs to the language tag."""
    extensions = LANGUAGE_EXTENSIONS.get(language)
    if extensions is None:
        return False
    return extension in extensions


def is_comment_line(line: str, extension: str) -> bool:
    """Single-line heuristic for comment-only lines.

    ``line`` is expected to be trimmed already. Block comments are not
    tracked: a line inside ``/* ... */`` that does not itself start with
    ``/*`` or ``*`` is treated as code.
    """
    if extension not in COMMENT_EXTENSIONS:
        return False
    return line.startswith(COMMENT_PREFIXES)
