"""Load build configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    DEFAULT_CHAPTER_DIR,
    DEFAULT_FILES_DIR,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_TEMPLATES_DIR,
    _coerce_variables,
    _optional_str,
    _page_label,
    _resolve_dir,
)
from .models import BuildConfig, BuildConfigError, PageSpec


def load_build_config(path: Path) -> BuildConfig:
    """Load the YAML configuration describing directories and pages.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/pages.yaml``). Relative directories inside the file resolve
        against the directory that holds it.

    Returns
    -------
    BuildConfig
        Parsed configuration with resolved directories and pages in the order
        they appear in the file.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    BuildConfigError
        If the page list is missing, empty, malformed, or names a page twice.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from apprentice_pages.config import load_build_config
    >>> config = load_build_config(Path("config/pages.yaml"))  # doctest: +SKIP
    >>> config.page_names()[:1]  # doctest: +SKIP
    ['index']
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    base = path.resolve().parent

    pages_raw = raw.get("pages") or []
    if not isinstance(pages_raw, list):
        msg = "'pages' must be a list of page entries."
        raise BuildConfigError(msg)
    if not pages_raw:
        msg = "No pages defined in build configuration."
        raise BuildConfigError(msg)

    pages = [
        _build_page_spec(index=index, payload=payload)
        for index, payload in enumerate(pages_raw)
    ]

    return BuildConfig(
        output_dir=_resolve_dir(base, raw.get("output_dir"), DEFAULT_OUTPUT_DIR),
        templates_dir=_resolve_dir(
            base, raw.get("templates_dir"), DEFAULT_TEMPLATES_DIR
        ),
        chapter_dir=_resolve_dir(base, raw.get("chapter_dir"), DEFAULT_CHAPTER_DIR),
        files_dir=_resolve_dir(base, raw.get("files_dir"), DEFAULT_FILES_DIR),
        pages=pages,
    )


def _build_page_spec(*, index: int, payload: object) -> PageSpec:
    """Build a PageSpec for a single entry of the ``pages`` list."""
    if not isinstance(payload, dict):
        msg = f"Page #{index} must be a mapping."
        raise BuildConfigError(msg)
    label = _page_label(index, payload)
    name = _optional_str(payload.get("name"))
    if not name:
        msg = f"Page {label} is missing 'name'."
        raise BuildConfigError(msg)
    return PageSpec(
        name=name,
        template=_optional_str(payload.get("template")),
        chapter=_optional_str(payload.get("chapter")),
        variables=_coerce_variables(label, payload.get("variables")),
    )


__all__ = ["load_build_config"]
