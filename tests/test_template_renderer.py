"""Tests for the Jinja-backed template renderer."""

from __future__ import annotations

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound
from markupsafe import Markup

from apprentice_pages.rendering import JinjaTemplateRenderer


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    root = tmp_path / "templates"
    (root / "partials").mkdir(parents=True)
    (root / "page.jinja").write_text(
        "{% include 'partials/header.jinja' %}\n<p>{{ body }}</p>\n",
        encoding="utf-8",
    )
    (root / "partials" / "header.jinja").write_text(
        "<h1>{{ title }}</h1>", encoding="utf-8"
    )
    (root / "plain.txt").write_text("{{ body }}", encoding="utf-8")
    return root


def test_variables_become_named_bindings(templates_dir: Path) -> None:
    renderer = JinjaTemplateRenderer(templates_dir)

    output = renderer.render("page.jinja", {"title": "Docs", "body": "Text"})

    assert output == "<h1>Docs</h1><p>Text</p>\n"


def test_html_templates_escape_unless_marked_safe(templates_dir: Path) -> None:
    renderer = JinjaTemplateRenderer(templates_dir)

    escaped = renderer.render("page.jinja", {"title": "", "body": "<b>x</b>"})
    trusted = renderer.render("page.jinja", {"title": "", "body": Markup("<b>x</b>")})

    assert "<p>&lt;b&gt;x&lt;/b&gt;</p>" in escaped
    assert "<p><b>x</b></p>" in trusted


def test_non_html_templates_are_not_escaped(templates_dir: Path) -> None:
    renderer = JinjaTemplateRenderer(templates_dir)

    assert renderer.render("plain.txt", {"body": "<b>x</b>"}) == "<b>x</b>"


def test_unknown_template_raises(templates_dir: Path) -> None:
    renderer = JinjaTemplateRenderer(templates_dir)

    with pytest.raises(TemplateNotFound):
        renderer.render("missing.jinja", {})
