"""Render chapter markdown into HTML with syntax-highlighted code blocks."""

from __future__ import annotations

import io
import re
import typing as typ
from html import escape

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
FENCE_LABEL_PATTERN = re.compile(
    r"^([`~]{3,})([A-Za-z0-9_+#.-]+)?(,[^\r\n]+)$", re.MULTILINE
)
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')
LANG_PREFIX = "language-"
MARKDOWN_EXTENSIONS = ("fenced_code", "codehilite", "tables", "sane_lists")


class MarkdownRenderer(typ.Protocol):
    """Convert a markdown document into an HTML fragment."""

    def markdown(self, text: str) -> str:
        """Return ``text`` rendered as HTML."""
        ...


class LanguageTaggedHtmlFormatter(HtmlFormatter):
    """Pygments formatter that stamps each block with its ``data-language``.

    Python-Markdown's codehilite extension instantiates the formatter once per
    code block and passes ``lang_str`` (``"language-<lexer alias>"``), so each
    block carries its own language regardless of how many other blocks the
    document holds.
    """

    def __init__(self, lang_str: str = "", **options: typ.Any) -> None:
        super().__init__(**options)
        self.language = lang_str.removeprefix(LANG_PREFIX) or "text"

    def format_unencoded(self, tokensource: typ.Any, outfile: typ.Any) -> None:
        buffer = io.StringIO()
        super().format_unencoded(tokensource, buffer)
        outfile.write(_attach_language_attribute(buffer.getvalue(), self.language))


class ChapterMarkdownRenderer:
    """Render markdown chapters with consistent code highlighting."""

    def __init__(self, pygments_style: str = "monokai") -> None:
        """Initialize a renderer using the given Pygments style.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults
            to ``"monokai"``.
        """
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(self, text: str) -> str:
        """Render markdown into HTML; blank input yields an empty string.

        Highlighted blocks are tagged with ``data-language`` holding the
        Pygments name of the fence's language, or ``"text"`` for unlabelled
        fences and indented code.
        """
        normalized = self._normalize_fenced_blocks(text)
        if not normalized.strip():
            return ""
        md = Markdown(
            extensions=list(MARKDOWN_EXTENSIONS),
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                    "lang_prefix": LANG_PREFIX,
                    "pygments_formatter": LanguageTaggedHtmlFormatter,
                }
            },
        )
        return md.convert(normalized)

    @staticmethod
    def _normalize_fenced_blocks(text: str) -> str:
        """Outdent list-nested fences and drop ``,no_run``-style label suffixes."""
        without_indent = FENCED_INDENT_PATTERN.sub(r"\1", text)

        def _strip_labels(match: re.Match[str]) -> str:
            fence, language, _extras = match.groups()
            return f"{fence}{language or ''}"

        return FENCE_LABEL_PATTERN.sub(_strip_labels, without_indent)


def _attach_language_attribute(html: str, language: str) -> str:
    """Add a single language attribute to an already highlighted block."""
    safe_lang = escape(language or "text", quote=True)

    def _repl(match: re.Match[str]) -> str:
        return f'<div class="codehilite" data-language="{safe_lang}">'

    return CODEHILITE_OPEN_TAG.sub(_repl, html, 1)


__all__ = [
    "ChapterMarkdownRenderer",
    "LanguageTaggedHtmlFormatter",
    "MarkdownRenderer",
]
