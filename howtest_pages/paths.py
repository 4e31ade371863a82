"""Map markdown source paths to published HTML paths and routes.

Every output location is a pure function of its source path: the markdown
suffix is swapped for ``.html`` and a ``README`` base name becomes ``index``
in the same directory. Routes are the root-relative form of an output path
(``/tanstack/overview.html``) and drive sidebar highlighting and the relative
prefix used to reach shared assets.

Examples
--------
>>> markdown_to_html_path("docs/README.md")
'docs/index.html'
>>> output_relative_path("docs/vue/overview.md", strip_prefix="docs")
'vue/overview.html'
>>> root_prefix(route_for("vue/overview.html"))
'../'
"""

from __future__ import annotations

import posixpath

from ._constants import HTML_SUFFIX, INDEX_STEM, MARKDOWN_SUFFIX, README_STEM


def markdown_to_html_path(rel_path: str) -> str:
    """Return the output-relative HTML path for a markdown source path.

    Parameters
    ----------
    rel_path : str
        POSIX path relative to the source root, ending in ``.md``.

    Returns
    -------
    str
        The same location with an ``.html`` suffix; a ``README`` base name
        is aliased to ``index``.
    """
    directory, filename = posixpath.split(rel_path)
    stem = filename[: -len(MARKDOWN_SUFFIX)]
    html_name = f"{INDEX_STEM if stem == README_STEM else stem}{HTML_SUFFIX}"
    return posixpath.join(directory, html_name) if directory else html_name


def strip_path_prefix(rel_path: str, prefix: str | None) -> str:
    """Drop a leading directory (for example ``docs``) from ``rel_path``."""
    if not prefix:
        return rel_path
    head = prefix.strip("/") + "/"
    if rel_path.startswith(head):
        return rel_path[len(head) :]
    return rel_path


def output_relative_path(rel_path: str, *, strip_prefix: str | None = None) -> str:
    """Return the published HTML path for ``rel_path`` after prefix stripping."""
    return markdown_to_html_path(strip_path_prefix(rel_path, strip_prefix))


def route_for(html_rel_path: str) -> str:
    """Return the root-relative route identifier for an output path."""
    return "/" + html_rel_path.lstrip("/")


def root_prefix(route: str) -> str:
    """Return the relative prefix leading from ``route`` back to the site root.

    A page at the top level (``/guide.html``) gets ``./``; each directory
    level adds one ``../``.
    """
    depth = len([segment for segment in route.split("/") if segment]) - 1
    return "../" * depth if depth > 0 else "./"


__all__ = [
    "markdown_to_html_path",
    "output_relative_path",
    "root_prefix",
    "route_for",
    "strip_path_prefix",
]
