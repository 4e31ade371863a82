"""Exception types raised by the site build pipeline."""

from __future__ import annotations

import collections.abc as cabc


class PagesError(RuntimeError):
    """Base class for fatal site generation failures."""


class HighlighterSetupError(PagesError):
    """Raised when the syntax highlighting engine cannot be provisioned."""


class BuildError(PagesError):
    """Raised when a document cannot be read, rendered to disk, or placed."""


class NavigationMismatchError(BuildError):
    """Raised when declared navigation and discovered documents disagree.

    Attributes
    ----------
    missing : tuple[str, ...]
        Source paths referenced by navigation items that were not discovered.
    orphans : tuple[str, ...]
        Discovered source paths that no navigation item references.
    """

    def __init__(
        self, *, missing: cabc.Iterable[str], orphans: cabc.Iterable[str]
    ) -> None:
        self.missing = tuple(sorted(missing))
        self.orphans = tuple(sorted(orphans))
        parts: list[str] = []
        if self.missing:
            parts.append(f"missing files: {', '.join(self.missing)}")
        if self.orphans:
            parts.append(f"pages absent from navigation: {', '.join(self.orphans)}")
        msg = f"Navigation does not match documents ({'; '.join(parts)})"
        super().__init__(msg)


__all__ = [
    "BuildError",
    "HighlighterSetupError",
    "NavigationMismatchError",
    "PagesError",
]
