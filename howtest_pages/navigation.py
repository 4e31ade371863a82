"""Sidebar navigation model shared by every documentation page.

Sections group the pages of one ecosystem. A section is "active" when the
current route lives beneath its routing directory, and an item is "active"
when its hyperlink equals the current route. Hyperlinks are stored in route
form (leading ``/``) and relativised per page so the output tree can be
served from any base path.
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import posixpath
import typing as typ

from ._constants import MARKDOWN_SUFFIX, README_STEM
from .errors import NavigationMismatchError


@dc.dataclass(frozen=True, slots=True)
class NavigationItem:
    """One sidebar entry.

    Attributes
    ----------
    title : str
        Label shown in the sidebar.
    href : str
        Root-relative route of the rendered page (``/react/overview.html``).
    file : str
        Source document path relative to the source root.
    """

    title: str
    href: str
    file: str


@dc.dataclass(frozen=True, slots=True)
class NavigationSection:
    """A named, ordered group of pages sharing a routing directory."""

    name: str
    dir: str
    items: tuple[NavigationItem, ...] = ()

    @property
    def route_prefix(self) -> str:
        """Return the route prefix (``/<dir>/``) matched for the active state."""
        return f"/{self.dir.strip('/')}/"

    def contains(self, route: str) -> bool:
        """Return whether ``route`` lives beneath this section's directory."""
        return route.startswith(self.route_prefix)


@dc.dataclass(frozen=True, slots=True)
class NavigationModel:
    """Immutable ordered collection of navigation sections."""

    sections: tuple[NavigationSection, ...] = ()

    def active_section(self, route: str) -> NavigationSection | None:
        """Return the first section containing ``route``, if any."""
        return next((s for s in self.sections if s.contains(route)), None)

    def sidebar(self, route: str, prefix: str) -> list[dict[str, typ.Any]]:
        """Build sidebar groups for the page at ``route``.

        Parameters
        ----------
        route : str
            Route identifier of the page being rendered.
        prefix : str
            Relative prefix from that page back to the site root.

        Returns
        -------
        list[dict[str, Any]]
            One mapping per section with ``name``, ``is_open`` and ``links``;
            each link carries ``title``, ``href`` and ``is_active``.
        """
        groups: list[dict[str, typ.Any]] = []
        for section in self.sections:
            links = [
                {
                    "title": item.title,
                    "href": prefix + item.href.lstrip("/"),
                    "is_active": item.href == route,
                }
                for item in section.items
            ]
            groups.append(
                {
                    "name": section.name,
                    "is_open": section.contains(route),
                    "links": links,
                }
            )
        return groups

    def source_files(self) -> set[str]:
        """Return every source path referenced by a navigation item."""
        return {item.file for section in self.sections for item in section.items}

    def validate(
        self, discovered: cabc.Iterable[str], *, root_document: str
    ) -> None:
        """Check that navigation items and discovered documents correspond.

        The root landing document and unlisted ``README.md`` directory index
        pages are never reported as orphans.

        Raises
        ------
        NavigationMismatchError
            When an item points at an undiscovered file or a discovered page
            is missing from navigation.
        """
        found = set(discovered)
        declared = self.source_files()
        missing = declared - found
        orphans = {
            path
            for path in found - declared
            if path != root_document and not _is_directory_index(path)
        }
        if missing or orphans:
            raise NavigationMismatchError(missing=missing, orphans=orphans)


def _is_directory_index(rel_path: str) -> bool:
    return posixpath.basename(rel_path) == f"{README_STEM}{MARKDOWN_SUFFIX}"


__all__ = ["NavigationItem", "NavigationModel", "NavigationSection"]
