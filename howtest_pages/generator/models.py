"""Shared dataclasses used by the page generation pipeline."""

from __future__ import annotations

import dataclasses as dc
import re
from pathlib import PurePosixPath

from howtest_pages._constants import MARKDOWN_SUFFIX

TITLE_PATTERN = re.compile(r"^#\s+(.+)$", re.MULTILINE)


@dc.dataclass(frozen=True, slots=True)
class SourceDocument:
    """A markdown file discovered beneath the source root.

    Attributes
    ----------
    rel_path : str
        POSIX path relative to the source root (``docs/react/overview.md``).
    text : str
        Raw markdown content.
    """

    rel_path: str
    text: str

    @property
    def title(self) -> str:
        """Return the first level-one heading, or the bare filename."""
        match = TITLE_PATTERN.search(self.text)
        if match:
            return match.group(1).strip()
        name = PurePosixPath(self.rel_path).name
        return name.removesuffix(MARKDOWN_SUFFIX)


@dc.dataclass(frozen=True, slots=True)
class Page:
    """A fully assembled HTML page ready to be written.

    Attributes
    ----------
    output_path : str
        Output-relative POSIX path (``react/overview.html``).
    html : str
        Complete HTML document.
    route : str
        Root-relative route identifier (``/react/overview.html``).
    """

    output_path: str
    html: str
    route: str


__all__ = ["Page", "SourceDocument", "TITLE_PATTERN"]
