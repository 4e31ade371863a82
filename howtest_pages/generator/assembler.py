"""Wrap rendered fragments in the documentation page shell."""

from __future__ import annotations

import typing as typ

from howtest_pages.paths import root_prefix
from howtest_pages.templating import create_environment

if typ.TYPE_CHECKING:
    from pathlib import Path

    from markupsafe import Markup

    from howtest_pages.config import SiteMetaConfig
    from howtest_pages.navigation import NavigationModel


class PageAssembler:
    """Render complete documentation pages around markdown fragments."""

    def __init__(
        self,
        site: SiteMetaConfig,
        navigation: NavigationModel,
        *,
        stylesheet: str = "",
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the assembler and its Jinja environment.

        Parameters
        ----------
        site : SiteMetaConfig
            Site name, description, and asset locations used in the head and
            header.
        navigation : NavigationModel
            Sections rendered into the sidebar of every page.
        stylesheet : str, optional
            Highlighting CSS inlined into each page.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.
        """
        self.site = site
        self.navigation = navigation
        self.stylesheet = stylesheet
        self.env = create_environment(templates_dir)
        self.template = self.env.get_template("doc_page.jinja")

    def render(self, title: str, content: Markup, route: str) -> str:
        """Return the HTML document for one page.

        Parameters
        ----------
        title : str
            Page title; escaped on output.
        content : Markup
            Trusted HTML fragment produced by the content renderer.
        route : str
            Route identifier of the page, used for the active sidebar link
            and to compute the relative prefix back to the site root.
        """
        prefix = root_prefix(route)
        context = {
            "site": self.site,
            "title": title,
            "content": content,
            "prefix": prefix,
            "sidebar": self.navigation.sidebar(route, prefix),
            "pygments_css": self.stylesheet,
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html


__all__ = ["PageAssembler"]
