"""Markdown and template renderers used by the page builder."""

from .markdown import ChapterMarkdownRenderer, MarkdownRenderer
from .templates import JinjaTemplateRenderer, TemplateRenderer

__all__ = [
    "ChapterMarkdownRenderer",
    "JinjaTemplateRenderer",
    "MarkdownRenderer",
    "TemplateRenderer",
]
