"""Give every rendered heading an anchor id derived from its text."""

from __future__ import annotations

import re
import typing as typ

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor
from markdown.util import HTML_PLACEHOLDER_RE

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown

HEADING_TAGS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})
TAG_PATTERN = re.compile(r"<[^>]*>")
NON_SLUG_CHARS = re.compile(r"[^\w\s-]", re.ASCII)
WHITESPACE_RUN = re.compile(r"\s+")
HYPHEN_RUN = re.compile(r"-+")


def slugify_heading(text: str) -> str:
    """Convert heading text into an anchor id.

    Duplicate headings produce duplicate ids; callers do not deduplicate.

    Examples
    --------
    >>> slugify_heading("Hello World!")
    'hello-world'
    >>> slugify_heading("The <code>inject()</code> Pattern")
    'the-inject-pattern'
    """
    slug = TAG_PATTERN.sub("", text.lower())
    slug = NON_SLUG_CHARS.sub("", slug)
    slug = WHITESPACE_RUN.sub("-", slug)
    slug = HYPHEN_RUN.sub("-", slug)
    return slug.strip("-")


class HeadingIdTreeprocessor(Treeprocessor):
    """Set ``id`` on ``h1``-``h6`` elements from their visible text."""

    def run(self, root: Element) -> Element:
        """Assign ids to every heading in the tree."""
        for element in root.iter():
            if element.tag not in HEADING_TAGS:
                continue
            slug = slugify_heading(self._heading_text(element))
            if slug:
                element.set("id", slug)
        return root

    def _heading_text(self, element: Element) -> str:
        """Return heading text with escapes and stashed raw HTML restored."""
        text = "".join(element.itertext())
        # backslash escapes stay as placeholders until ``unescape`` runs
        text = self.md.treeprocessors["unescape"].unescape(text)
        return HTML_PLACEHOLDER_RE.sub(self._restore_placeholder, text)

    def _restore_placeholder(self, match: re.Match[str]) -> str:
        blocks = self.md.htmlStash.rawHtmlBlocks
        index = int(match.group(1))
        if index >= len(blocks):
            return ""
        block = blocks[index]
        return block if isinstance(block, str) else "".join(block.itertext())


class HeadingIdExtension(Extension):
    """Register :class:`HeadingIdTreeprocessor` after inline processing."""

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the heading id treeprocessor on the Markdown instance."""
        md.treeprocessors.register(
            HeadingIdTreeprocessor(md), "howtest_heading_ids", 6
        )


__all__ = ["HeadingIdExtension", "HeadingIdTreeprocessor", "slugify_heading"]
