"""Jinja-backed template rendering for configured pages."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class TemplateRenderer(typ.Protocol):
    """Render a named template with a mapping of variables."""

    def render(
        self, template_id: str, variables: cabc.Mapping[str, typ.Any]
    ) -> str:
        """Return the output of ``template_id`` rendered with ``variables``."""
        ...


class JinjaTemplateRenderer:
    """Look up page templates in a directory and render them with Jinja2."""

    def __init__(self, templates_dir: Path) -> None:
        """Initialize the Jinja environment rooted at ``templates_dir``.

        Parameters
        ----------
        templates_dir : Path
            Directory searched for template identifiers. Identifiers may name
            files in subdirectories using ``/`` separators.

        Notes
        -----
        Autoescaping applies to ``.html``, ``.xml``, and ``.jinja`` templates,
        so values meant to be embedded verbatim must be marked safe by the
        caller. Trailing newlines in templates are preserved.
        """
        self.templates_dir = templates_dir
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def render(
        self, template_id: str, variables: cabc.Mapping[str, typ.Any]
    ) -> str:
        """Render ``template_id`` with ``variables`` as named bindings.

        Raises
        ------
        jinja2.TemplateNotFound
            If ``template_id`` cannot be located under the templates directory.
        """
        template = self.env.get_template(template_id)
        return template.render(**variables)


__all__ = ["JinjaTemplateRenderer", "TemplateRenderer"]
