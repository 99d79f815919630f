"""Shared fixtures that lay out a small site on disk for builder tests.

The ``site_root`` fixture creates ``templates/``, ``chapters/``, and
``files/`` folders under ``tmp_path`` with a default template, an alternate
template, a markdown chapter, and a binary asset. ``write_config`` serialises
a ``pages.yaml`` beside them so tests exercise the real loader, and
``build_config`` returns the loaded :class:`BuildConfig` directly.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from pathlib import Path

import pytest
from ruamel.yaml import YAML

from apprentice_pages.config import BuildConfig, load_build_config

DEFAULT_TEMPLATE_BODY = (
    "<html><head><title>{{ title }}</title></head><body>\n"
    "{% if chapter is defined %}<article>{{ chapter }}</article>{% endif %}\n"
    "{% if body is defined %}<p>{{ body }}</p>{% endif %}\n"
    "</body></html>\n"
)
ALT_TEMPLATE_BODY = '<section class="alt">{{ greeting }}</section>\n'
LOGO_BYTES = b"\x89PNG\r\n\x1a\nfixture-logo"

WriteConfig = cabc.Callable[..., Path]


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Create templates, chapters, and files folders for a fixture site."""
    root = tmp_path / "site"
    templates = root / "templates"
    templates.mkdir(parents=True)
    (templates / "default.jinja").write_text(DEFAULT_TEMPLATE_BODY, encoding="utf-8")
    (templates / "alt.jinja").write_text(ALT_TEMPLATE_BODY, encoding="utf-8")

    chapters = root / "chapters"
    chapters.mkdir()
    (chapters / "intro.md").write_text("# Hello\n\nWelcome aboard.\n", encoding="utf-8")

    files = root / "files"
    files.mkdir()
    (files / "logo.png").write_bytes(LOGO_BYTES)
    (files / "robots.txt").write_text("User-agent: *\n", encoding="utf-8")
    (files / "nested").mkdir()
    (files / "nested" / "ignored.css").write_text("body {}\n", encoding="utf-8")
    return root


@pytest.fixture
def default_pages() -> list[dict[str, typ.Any]]:
    """Return page entries covering default, alternate, chapter, and nested pages."""
    return [
        {"name": "index", "variables": {"title": "Home", "body": "Welcome"}},
        {"name": "about", "template": "alt.jinja", "variables": {"greeting": "Hi"}},
        {"name": "intro", "chapter": "intro.md", "variables": {"title": "Intro"}},
        {"name": "guides/setup", "variables": {"title": "Setup"}},
    ]


@pytest.fixture
def write_config(site_root: Path) -> WriteConfig:
    """Return a callable that writes ``pages.yaml`` into the fixture site."""

    def _write(
        pages: list[dict[str, typ.Any]], **overrides: typ.Any
    ) -> Path:
        document: dict[str, typ.Any] = {
            "output_dir": "public",
            "templates_dir": "templates",
            "chapter_dir": "chapters",
            "files_dir": "files",
            **overrides,
            "pages": pages,
        }
        path = site_root / "pages.yaml"
        yaml = YAML(typ="safe")
        yaml.default_flow_style = False
        with path.open("w", encoding="utf-8") as handle:
            yaml.dump(document, handle)
        return path

    return _write


@pytest.fixture
def build_config(
    write_config: WriteConfig, default_pages: list[dict[str, typ.Any]]
) -> BuildConfig:
    """Load the default fixture pages through the YAML loader."""
    return load_build_config(write_config(default_pages))
