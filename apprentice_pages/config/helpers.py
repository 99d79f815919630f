"""Utility helpers shared by the build configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from .models import BuildConfigError

DEFAULT_OUTPUT_DIR = "public"
DEFAULT_TEMPLATES_DIR = "templates"
DEFAULT_CHAPTER_DIR = "chapters"
DEFAULT_FILES_DIR = "files"


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _resolve_dir(base: Path, value: object | None, default: str) -> Path:
    """Resolve a configured directory against ``base`` unless already absolute."""
    raw = _optional_str(value) or default
    path = Path(raw).expanduser()
    if path.is_absolute():
        return path
    return base / path


def _page_label(index: int, payload: typ.Mapping[str, typ.Any] | None) -> str:
    """Describe a page entry for error messages, preferring its name."""
    name = _optional_str(payload.get("name")) if payload else None
    return f"'{name}'" if name else f"#{index}"


def _coerce_variables(label: str, value: object | None) -> dict[str, typ.Any]:
    """Return page variables as a plain dict with string keys."""
    match value:
        case None:
            return {}
        case dict():
            return {str(key): item for key, item in value.items()}
        case _:
            msg = f"Page {label}: 'variables' must be a mapping."
            raise BuildConfigError(msg)


__all__ = [
    "DEFAULT_CHAPTER_DIR",
    "DEFAULT_FILES_DIR",
    "DEFAULT_OUTPUT_DIR",
    "DEFAULT_TEMPLATES_DIR",
    "_coerce_variables",
    "_optional_str",
    "_page_label",
    "_resolve_dir",
]
