"""Landing page rendering pipeline.

This module turns the ``landing`` block of ``config/site.yaml`` into the root
``index.html`` of the generated site. The landing page does not use the
documentation shell or the sidebar: it renders a hero with a simulated
terminal transcript followed by one card per topic. The main entry point is
``LandingPageBuilder``, which loads the shared template macros, resolves card
links against the root-relative prefix, and returns the rendered HTML.

Typical usage mirrors the build pipeline:

>>> from howtest_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> html = LandingPageBuilder(site.site, site.landing).render("./")  # doctest: +SKIP

The builder expects templates to reside under ``howtest_pages/templates``
unless a custom directory is provided. It relies on Jinja2 with autoescape
enabled, so configuration strings are always escaped.
"""

from __future__ import annotations

import typing as typ

from .templating import create_environment

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import LandingConfig, SiteMetaConfig


class LandingPageBuilder:
    """Render the marketing landing page from structured config data."""

    def __init__(
        self,
        site: SiteMetaConfig,
        landing: LandingConfig,
        *,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        site : SiteMetaConfig
            Site branding used for the favicon, stylesheet, and social tags.
        landing : LandingConfig
            Hero copy, terminal transcript, and topic cards.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``howtest_pages/templates`` when not supplied.

        Notes
        -----
        Instantiating the builder configures the shared Jinja2 environment
        (autoescape, trimmed blocks) and eagerly loads the
        ``landing_page.jinja`` template so ``render`` only handles
        interpolation.
        """
        self.site = site
        self.landing = landing
        self.templates_dir = templates_dir
        self.env = create_environment(templates_dir)
        self.template = self.env.get_template("landing_page.jinja")

    def render(self, prefix: str) -> str:
        """Return the landing page HTML for a page living at ``prefix``.

        Parameters
        ----------
        prefix : str
            Relative path from the landing page back to the site root
            (``./`` for the root ``index.html``).

        Returns
        -------
        str
            Complete HTML document ending with a newline.
        """
        cards = [
            {
                "label": card.label,
                "description": card.description,
                "href": _resolve_href(card.href, prefix),
                "icon": card.icon,
                "color": card.color,
                "meta_label": card.meta_label,
            }
            for card in self.landing.cards
        ]
        context = {
            "site": self.site,
            "landing": self.landing,
            "cards": cards,
            "prefix": prefix,
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html


def _resolve_href(href: str, prefix: str) -> str:
    """Prefix root-relative hrefs; leave absolute URLs and anchors untouched."""
    if "://" in href or href.startswith(("#", "mailto:")):
        return href
    return prefix + href.lstrip("/")


__all__ = ["LandingPageBuilder"]
