"""Cyclopts CLI entrypoint for building apprentice sites.

The ``pages`` console script defined here renders every page listed in
``config/pages.yaml`` into the output folder, or rebuilds a single page while
leaving the rest of the site alone. Typical usage involves running
``pages build`` locally or in CI, and ``pages build --page about`` while
iterating on one template.

Examples
--------
Build the whole site for the default configuration:

>>> from apprentice_pages.cli import main
>>> main()  # doctest: +SKIP

Rebuild a single page into a custom directory:

>>> from apprentice_pages.cli import app
>>> app(["build", "--page", "about", "--output-dir", "dist"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .builder import Builder
from .config import load_build_config

DEFAULT_CONFIG = Path("config/pages.yaml")

app = App(name="pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Build HTML pages and copy static files into the output folder.")
def build(
    *,
    page: typ.Annotated[
        str | None, Parameter(help="Page name", env_var="INPUT_PAGE")
    ] = None,
    config: typ.Annotated[
        Path, Parameter(help="Path to build config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    verbose: typ.Annotated[
        bool, Parameter(help="Log build steps", env_var="INPUT_VERBOSE")
    ] = False,
) -> None:
    """Build the site, or a single page, for the requested configuration.

    Parameters
    ----------
    page : str or None, optional
        Name of the page to rebuild; when ``None`` (default) the output folder
        is cleaned, assets are copied, and every page is built.
    config : Path, optional
        Path to the ``pages.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output_dir : Path or None, optional
        Write into this folder instead of the configured ``output_dir``.
    verbose : bool, optional
        Emit debug logging for cleaning, copying, and writing.

    Returns
    -------
    None
        Writes rendered pages and prints the generated paths.

    Raises
    ------
    PageNotFoundError
        If ``page`` does not name a configured page.
    MissingChapterError
        If a page references a chapter that does not exist.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )

    build_config = load_build_config(config)
    if output_dir is not None:
        build_config = build_config.with_output_dir(output_dir)
    builder = Builder(build_config)

    if page:
        builder.build_one(page)
        written = [builder.output_path(build_config.get_page(page))]
    else:
        builder.build_all()
        written = [builder.output_path(spec) for spec in build_config.pages]

    for path in written:
        print(f"wrote {_format_path(path)}")


@app.command(name="list", help="List the pages defined in the build config.")
def list_pages(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to build config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Print each configured page with its template and chapter."""
    build_config = load_build_config(config)
    for spec in build_config.pages:
        template = spec.template or "(default)"
        line = f"{spec.name}: {template}"
        if spec.chapter:
            line = f"{line} [{spec.chapter}]"
        print(line)


def main() -> None:
    """Invoke the Cyclopts application that powers the `pages` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
