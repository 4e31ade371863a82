"""Typed dataclasses describing the site configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from howtest_pages._constants import DEFAULT_EXCLUDED_DIRS, ROOT_DOCUMENT
from howtest_pages.navigation import NavigationModel


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class SiteMetaConfig:
    """Branding and social metadata shared by every page."""

    name: str = "How They Test"
    description: str = (
        "Testing conventions and patterns from the world's most influential "
        "open-source ecosystems."
    )
    logo: str = "styles/logo.svg"
    og_image: str = "styles/og-image.svg"
    stylesheet: str = "styles/main.css"


@dc.dataclass(slots=True)
class BuildConfig:
    """Filesystem locations and discovery rules for a build."""

    source_root: Path = Path("site")
    output_dir: Path = Path("dist")
    static_dir: Path = Path("site/styles")
    strip_prefix: str | None = None
    exclude_dirs: tuple[str, ...] = DEFAULT_EXCLUDED_DIRS
    validate_navigation: bool = True
    root_document: str = ROOT_DOCUMENT


@dc.dataclass(slots=True)
class HighlightConfig:
    """Pygments styles and languages provisioned for code blocks."""

    light_style: str = "default"
    dark_style: str = "github-dark"
    languages: tuple[str, ...] = (
        "typescript",
        "javascript",
        "tsx",
        "jsx",
        "json",
        "bash",
        "shell",
        "html",
        "css",
        "vue",
        "yaml",
        "markdown",
        "diff",
        "rust",
        "toml",
    )
    aliases: dict[str, str] = dc.field(
        default_factory=lambda: {
            "jsx": "javascript",
            "tsx": "typescript",
            "vue": "html",
        }
    )


@dc.dataclass(slots=True)
class TerminalLineConfig:
    """One line of the simulated terminal transcript on the landing page."""

    kind: str
    text: str
    note: str | None = None
    copyable: bool = False
    dim: bool = False


@dc.dataclass(slots=True)
class LandingCardConfig:
    """Topic card rendered in the landing page grid."""

    label: str
    description: str
    href: str
    icon: str
    color: str
    meta_label: str


@dc.dataclass(slots=True)
class LandingConfig:
    """Hero copy, terminal transcript, and topic cards for the landing page."""

    title: str
    badge: str
    title_primary: str
    title_accent: str
    description: str
    terminal: list[TerminalLineConfig] = dc.field(default_factory=list)
    cards: list[LandingCardConfig] = dc.field(default_factory=list)
    note: str = ""


@dc.dataclass(slots=True)
class SiteConfig:
    """Aggregated configuration consumed by the build orchestrator."""

    site: SiteMetaConfig
    build: BuildConfig
    highlight: HighlightConfig
    navigation: NavigationModel
    landing: LandingConfig


__all__ = [
    "BuildConfig",
    "HighlightConfig",
    "LandingCardConfig",
    "LandingConfig",
    "SiteConfig",
    "SiteConfigError",
    "SiteMetaConfig",
    "TerminalLineConfig",
]
