"""Orchestrate building configured pages into an output directory.

This module exposes :class:`Builder`, which consumes a
:class:`~apprentice_pages.config.BuildConfig`, renders each
:class:`~apprentice_pages.config.PageSpec` through a template renderer
(optionally embedding a markdown chapter), and writes ``<name>.html`` files
beside the static assets copied from the files directory.

Example
-------
>>> from pathlib import Path
>>> from apprentice_pages.builder import Builder
>>> from apprentice_pages.config import load_build_config
>>> config = load_build_config(Path("config/pages.yaml"))  # doctest: +SKIP
>>> Builder(config).build_all()  # doctest: +SKIP
>>> Builder(config).build_one("about")[:15]  # doctest: +SKIP
'<!doctype html>'
"""

from __future__ import annotations

import logging
import shutil
import typing as typ

from markupsafe import Markup

from apprentice_pages._constants import (
    CHAPTER_KEY,
    DEFAULT_TEMPLATE,
    HTML_SUFFIX,
    PAGE_FILENAME_TEMPLATE,
    PYGMENTS_CSS_KEY,
)
from apprentice_pages.rendering import ChapterMarkdownRenderer, JinjaTemplateRenderer

if typ.TYPE_CHECKING:
    from pathlib import Path

    from apprentice_pages.config import BuildConfig, PageSpec
    from apprentice_pages.rendering import MarkdownRenderer, TemplateRenderer

logger = logging.getLogger(__name__)


class MissingChapterError(FileNotFoundError):
    """Raised when a page references a chapter file that does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Chapter file not found: {path}")
        self.path = path


class Builder:
    """Render configured pages and copy static assets into the output folder."""

    def __init__(
        self,
        config: BuildConfig,
        *,
        markdown_renderer: MarkdownRenderer | None = None,
        template_renderer: TemplateRenderer | None = None,
    ) -> None:
        """Initialize the builder with configuration and render collaborators.

        Parameters
        ----------
        config : BuildConfig
            Directories and ordered page definitions for the build.
        markdown_renderer : MarkdownRenderer, optional
            Converts chapter markdown to HTML; defaults to
            :class:`ChapterMarkdownRenderer`.
        template_renderer : TemplateRenderer, optional
            Renders page templates; defaults to a
            :class:`JinjaTemplateRenderer` over ``config.templates_dir``.
        """
        self.config = config
        self.markdown_renderer = markdown_renderer or ChapterMarkdownRenderer()
        self.template_renderer = template_renderer or JinjaTemplateRenderer(
            config.templates_dir
        )

    def build_all(self) -> None:
        """Rebuild every configured page from a clean output folder.

        Notes
        -----
        Creates the output folder, removes the ``*.html`` files directly inside
        it, copies assets from the files directory, then builds pages in
        configuration order. The first failure aborts the run and leaves any
        pages already written in place.
        """
        self._create_output_dir()
        self._clean_output_dir()
        self._copy_files()
        for page in self.config.pages:
            self.build_page(page)

    def build_one(self, name: str) -> str:
        """Build the page called ``name`` and return its rendered contents.

        The output folder is created if needed but is neither cleaned nor
        refreshed with assets, so previously built pages stay untouched.

        Raises
        ------
        PageNotFoundError
            If no configured page is called ``name``.
        """
        self._create_output_dir()
        page = self.config.get_page(name)
        return self.build_page(page)

    def build_page(self, page: PageSpec) -> str:
        """Render ``page`` into ``<output_dir>/<name>.html``.

        Parameters
        ----------
        page : PageSpec
            Page definition from the build configuration.

        Returns
        -------
        str
            The rendered page, exactly as written to disk.

        Raises
        ------
        MissingChapterError
            If ``page.chapter`` does not exist under the chapter directory; no
            file is written for the page.
        jinja2.TemplateNotFound
            If the selected template cannot be located.
        """
        context = self._build_context(page)
        template = page.template or DEFAULT_TEMPLATE
        output = self.template_renderer.render(template, context)

        path = self.output_path(page)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(output, encoding="utf-8")
        logger.debug("wrote page %s to %s", page.name, path)
        return output

    def output_path(self, page: PageSpec) -> Path:
        """Return the file ``build_page`` writes for ``page``."""
        return self.config.output_dir / PAGE_FILENAME_TEMPLATE.format(name=page.name)

    def _build_context(self, page: PageSpec) -> dict[str, typ.Any]:
        """Return template variables for ``page``, including rendered chapter HTML."""
        stylesheet = getattr(self.markdown_renderer, "stylesheet", "")
        context: dict[str, typ.Any] = {
            PYGMENTS_CSS_KEY: Markup(stylesheet),
            **page.variables,
        }
        if page.chapter:
            chapter_path = self.config.chapter_dir / page.chapter
            if not chapter_path.exists():
                raise MissingChapterError(chapter_path)
            source = chapter_path.read_text(encoding="utf-8")
            context[CHAPTER_KEY] = Markup(self.markdown_renderer.markdown(source))
        return context

    def _create_output_dir(self) -> None:
        """Create the output folder and any missing parents."""
        self.config.output_dir.mkdir(parents=True, exist_ok=True)

    def _clean_output_dir(self) -> None:
        """Delete HTML files directly inside the output folder."""
        for path in sorted(self.config.output_dir.glob(f"*{HTML_SUFFIX}")):
            if path.is_file():
                path.unlink()
                logger.debug("removed stale page %s", path)

    def _copy_files(self) -> None:
        """Copy top-level files from the files directory into the output root."""
        files_dir = self.config.files_dir
        if not files_dir.is_dir():
            logger.debug("no files directory at %s; skipping asset copy", files_dir)
            return
        for source in sorted(files_dir.iterdir()):
            if not source.is_file():
                continue
            shutil.copy2(source, self.config.output_dir / source.name)
            logger.debug("copied asset %s", source.name)


__all__ = ["Builder", "MissingChapterError"]
