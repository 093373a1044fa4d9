"""Tree traversal and per-line rule evaluation."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Sequence
from pathlib import Path

from code_analyze.ignore import should_ignore
from code_analyze.languages import file_extension, is_comment_line, matches_language
from code_analyze.rules import default_rules
from code_analyze.rules.base import AnalysisResult, TextRule
from code_analyze.rules.false_positives import is_false_positive

logger = logging.getLogger(__name__)

# Unicode White_Space; unlike str.strip() this keeps the \x1c-\x1f separators.
TRIM_CHARS = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def analyze_path(
    root: str | Path,
    ignore_patterns: Sequence[str] = (),
    rules: Sequence[TextRule] | None = None,
) -> list[AnalysisResult]:
    """Analyze every non-ignored file under ``root`` in traversal order."""
    active_rules = list(rules) if rules is not None else default_rules()
    results: list[AnalysisResult] = []
    files_scanned = 0
    for path in iter_files(root, ignore_patterns):
        files_scanned += 1
        results.extend(analyze_file(path, active_rules))
    logger.debug("Scanned %d files, %d diagnostics", files_scanned, len(results))
    return results


def analyze_file(path: str | Path, rules: Sequence[TextRule]) -> list[AnalysisResult]:
    """Evaluate applicable rules against each line of one file.

    Unreadable or non-UTF-8 files produce no diagnostics.
    """
    file_path = Path(path)
    try:
        content = file_path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Skipping unreadable file %s: %s", file_path, exc)
        return []

    extension = file_extension(file_path)
    applicable = [
        rule
        for rule in rules
        if any(matches_language(extension, language) for language in rule.languages)
    ]
    if not applicable:
        return []

    display = str(path)
    results: list[AnalysisResult] = []
    for line_number, raw_line in enumerate(content.split("\n"), start=1):
        line = raw_line.strip(TRIM_CHARS)
        if not line:
            continue
        if is_comment_line(line, extension):
            continue

        for rule in applicable:
            if rule.pattern.search(line) and not is_false_positive(line, rule.name):
                results.append(
                    AnalysisResult(
                        file=display,
                        line=line_number,
                        message=rule.message,
                        severity=rule.severity,
                        rule_name=rule.name,
                        code_snippet=line,
                    )
                )
    return results


def iter_files(root: str | Path, ignore_patterns: Sequence[str] = ()) -> Iterator[str]:
    """Yield regular files under ``root``, sorted by name at each level.

    Symlinks below the root are not followed. Directories that cannot be
    listed are skipped.
    """
    root_str = os.fspath(root)
    if os.path.isfile(root_str):
        if not should_ignore(root_str, ignore_patterns):
            yield root_str
        return

    for dirpath, dirnames, filenames in os.walk(root_str, onerror=_log_walk_error):
        # Every path below ``dir/`` contains ``dir/`` as a prefix, so a pruned
        # directory can only hide files the policy would ignore anyway.
        dirnames[:] = [
            name
            for name in sorted(dirnames)
            if not should_ignore(os.path.join(dirpath, name, ""), ignore_patterns)
        ]
        for name in sorted(filenames):
            path = os.path.join(dirpath, name)
            if os.path.islink(path) or not os.path.isfile(path):
                continue
            if should_ignore(path, ignore_patterns):
                logger.debug("Ignoring %s", path)
                continue
            yield path


def _log_walk_error(exc: OSError) -> None:
    logger.debug("Skipping unreadable directory %s: %s", exc.filename, exc)
