"""Render markdown documents into HTML fragments."""

from __future__ import annotations

import typing as typ

from markdown import Markdown
from markupsafe import Markup

from .code_blocks import FencedCodeExtension
from .headings import HeadingIdExtension
from .link_rewriter import MarkdownLinkExtension

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension

    from .highlighter import Highlighter


class HtmlContentRenderer:
    """Render markdown with chrome-wrapped code, page links, and heading ids."""

    def __init__(self, highlighter: Highlighter) -> None:
        """Initialize a renderer around a provisioned highlighting engine.

        Parameters
        ----------
        highlighter : Highlighter
            Handle returned by
            :func:`~howtest_pages.generator.highlighter.create_highlighter`
            (or a stub exposing ``highlight`` and ``stylesheet``).
        """
        self.highlighter = highlighter

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self.highlighter.stylesheet

    def markdown(self, text: str) -> Markup:
        """Render markdown into a trusted HTML fragment.

        A fresh ``Markdown`` instance is used per call so no parser state
        leaks between documents.
        """
        if not text.strip():
            return Markup("")
        extensions: list[Extension | str] = [
            "tables",
            "sane_lists",
            "md_in_html",
            FencedCodeExtension(self.highlighter),
            MarkdownLinkExtension(),
            HeadingIdExtension(),
        ]
        md = Markdown(extensions=extensions, output_format="html")
        return Markup(md.convert(text))  # noqa: S704 - output of our own renderer


__all__ = ["HtmlContentRenderer"]
