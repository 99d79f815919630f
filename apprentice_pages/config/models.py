"""Typed dataclasses describing an apprentice site build."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ
from pathlib import Path


class BuildConfigError(ValueError):
    """Raised when the build configuration is invalid or incomplete."""


class PageNotFoundError(LookupError):
    """Raised when a page name does not match any configured page."""

    def __init__(self, name: str, known: cabc.Iterable[str]) -> None:
        self.name = name
        self.known = list(known)
        available = ", ".join(self.known) or "<none>"
        super().__init__(f"Unknown page '{name}'. Known pages: {available}")


@dc.dataclass(slots=True)
class PageSpec:
    """A single page definition sourced from configuration.

    Attributes
    ----------
    name : str
        Unique page identifier; also the output filename stem. May contain
        ``/`` to place the page in a nested output directory.
    template : str or None
        Template identifier relative to the templates directory; ``None`` or
        an empty string selects the default template.
    chapter : str or None
        Markdown source relative to the chapter directory.
    variables : dict[str, Any]
        Values exposed to the template as named bindings.
    """

    name: str
    template: str | None = None
    chapter: str | None = None
    variables: dict[str, typ.Any] = dc.field(default_factory=dict)


@dc.dataclass(slots=True)
class BuildConfig:
    """Directories and ordered page definitions for one build."""

    output_dir: Path
    templates_dir: Path
    chapter_dir: Path
    files_dir: Path
    pages: list[PageSpec] = dc.field(default_factory=list)

    def __post_init__(self) -> None:
        """Reject duplicate page names before any build can start."""
        seen: set[str] = set()
        duplicates: list[str] = []
        for page in self.pages:
            if page.name in seen and page.name not in duplicates:
                duplicates.append(page.name)
            seen.add(page.name)
        if duplicates:
            msg = f"Duplicate page names in configuration: {', '.join(duplicates)}"
            raise BuildConfigError(msg)

    def page_names(self) -> list[str]:
        """Return page names in configuration order."""
        return [page.name for page in self.pages]

    def get_page(self, name: str) -> PageSpec:
        """Return the first page whose name matches ``name`` exactly.

        Raises
        ------
        PageNotFoundError
            If no configured page carries ``name``.
        """
        for page in self.pages:
            if page.name == name:
                return page
        raise PageNotFoundError(name, self.page_names())

    def with_output_dir(self, output_dir: Path) -> BuildConfig:
        """Return a copy of this config writing to ``output_dir``."""
        return dc.replace(self, output_dir=output_dir)


__all__ = ["BuildConfig", "BuildConfigError", "PageNotFoundError", "PageSpec"]
