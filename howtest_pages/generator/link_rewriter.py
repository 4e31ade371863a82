"""Helpers for rewriting internal markdown links to their published pages."""

from __future__ import annotations

import typing as typ

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from howtest_pages._constants import (
    HTML_SUFFIX,
    INDEX_STEM,
    MARKDOWN_SUFFIX,
    README_STEM,
)

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown

README_HTML = f"{README_STEM}{HTML_SUFFIX}"
INDEX_HTML = f"{INDEX_STEM}{HTML_SUFFIX}"


def rewrite_markdown_href(href: str | None) -> str | None:
    """Return ``href`` pointing at the HTML page built from a markdown source.

    Links ending in ``.md`` swap to ``.html`` and a trailing ``README.html``
    becomes ``index.html``; links already written as ``.../README.html`` are
    aliased the same way. Anything else, including external URLs, is returned
    unchanged.

    Examples
    --------
    >>> rewrite_markdown_href("guide.md")
    'guide.html'
    >>> rewrite_markdown_href("sub/README.md")
    'sub/index.html'
    >>> rewrite_markdown_href("https://example.com/page")
    'https://example.com/page'
    """
    if not href:
        return href
    if href.endswith(MARKDOWN_SUFFIX):
        href = href[: -len(MARKDOWN_SUFFIX)] + HTML_SUFFIX
        if href.endswith(README_HTML):
            href = href[: -len(README_HTML)] + INDEX_HTML
    if href.endswith(f"/{README_HTML}"):
        href = href[: -len(README_HTML)] + INDEX_HTML
    return href


class MarkdownLinkExtension(Extension):
    """Rewrite links to ``.md`` sources so they target rendered ``.html`` pages.

    Insert this extension into a ``markdown.Markdown`` instance so relative
    links between documents keep working once the tree is published.
    """

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the link treeprocessor on the Markdown instance."""
        md.treeprocessors.register(
            MarkdownLinkTreeprocessor(md), "howtest_markdown_links", 15
        )


class MarkdownLinkTreeprocessor(Treeprocessor):
    """Rewrite ``<a href>`` attributes in the parsed markdown tree."""

    def run(self, root: Element) -> Element:
        """Rewrite markdown hrefs in place and return the same tree."""
        for element in root.iter("a"):
            href = element.get("href")
            rewritten = rewrite_markdown_href(href)
            if rewritten and rewritten != href:
                element.set("href", rewritten)
        return root


__all__ = [
    "MarkdownLinkExtension",
    "MarkdownLinkTreeprocessor",
    "rewrite_markdown_href",
]
