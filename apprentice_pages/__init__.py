"""Utilities for building apprentice static sites.

This package exposes the CLI entry points used by ``pages build`` and the
:class:`Builder` that renders configured pages, chapters, and assets.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``Builder``: Orchestrates full-site and single-page builds.

Examples
--------
>>> from apprentice_pages import main
>>> main()  # doctest: +SKIP
>>> from apprentice_pages import Builder
>>> Builder.__name__
'Builder'
"""

from __future__ import annotations

from .builder import Builder, MissingChapterError
from .cli import app, main

__all__ = ["Builder", "MissingChapterError", "app", "main"]
