"""Configuration loading for code-analyze."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = (".code-analyze.toml", "code-analyze.toml")
PYPROJECT_FILENAME = "pyproject.toml"
PYPROJECT_TOOL_KEYS = ("code_analyze", "code-analyze")
FORMAT_CHOICES = ("text", "compact")


@dataclass(slots=True)
class AppConfig:
    """Runtime defaults resolved from project files."""

    format: str = "text"
    errors_only: bool = False
    ignore: list[str] = field(default_factory=list)
    source: str | None = None


def load_app_config(root: Path, config_path: Path | None = None) -> AppConfig:
    """Load config from an explicit path or files next to the scan root.

    An explicit ``config_path`` must exist and be valid. Files found by
    discovery are best-effort: a broken one is logged and defaults are used,
    since the scanned tree is not ours to validate.
    """
    if config_path is not None:
        if not config_path.exists():
            raise ValueError(f"config file {config_path} does not exist")
        return _read_config(config_path)

    if not root.is_dir():
        return AppConfig()

    candidates = [root / filename for filename in CONFIG_FILENAMES]
    candidates.append(root / PYPROJECT_FILENAME)
    for candidate in candidates:
        if not candidate.is_file():
            continue
        try:
            config = _read_config(candidate)
        except ValueError as exc:
            logger.debug("Ignoring unusable config %s: %s", candidate, exc)
            return AppConfig()
        if config is not None:
            return config

    return AppConfig()


def _read_config(path: Path) -> AppConfig | None:
    document = _parse_toml(path)
    section = _tool_section(document)
    if path.name == PYPROJECT_FILENAME:
        if section is None:
            return None
        return _from_mapping(section, path)
    return _from_mapping(section if section is not None else document, path)


def _parse_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"{path} is not valid TOML: {exc}") from exc
    except OSError as exc:
        raise ValueError(f"cannot read {path}: {exc}") from exc


def _tool_section(document: dict[str, Any]) -> dict[str, Any] | None:
    tool = document.get("tool")
    if not isinstance(tool, dict):
        return None
    for key in PYPROJECT_TOOL_KEYS:
        section = tool.get(key)
        if isinstance(section, dict):
            return section
    return None


def _from_mapping(mapping: dict[str, Any], path: Path) -> AppConfig:
    raw_format = str(mapping.get("format", "text")).lower()
    if raw_format not in FORMAT_CHOICES:
        raise ValueError(
            f"{path}: format must be 'text' or 'compact', got {mapping.get('format')!r}"
        )

    errors_only = mapping.get("errors_only", False)
    if not isinstance(errors_only, bool):
        raise ValueError(f"{path}: errors_only must be true or false")

    ignore = mapping.get("ignore", [])
    if not isinstance(ignore, list) or not all(isinstance(item, str) for item in ignore):
        raise ValueError(f"{path}: ignore must be a list of path substrings")

    return AppConfig(
        format=raw_format,
        errors_only=errors_only,
        ignore=list(ignore),
        source=str(path),
    )
