"""Load and validate the site configuration YAML.

This subpackage parses the project's ``site.yaml`` file, applies defaults for
branding, build locations, and highlighting, builds the immutable navigation
model, and returns strongly typed dataclasses (:class:`SiteConfig` and
friends) consumed by the build orchestrator. The primary entry point is
:func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from howtest_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.build.output_dir  # doctest: +SKIP
PosixPath('dist')
"""

from .loader import load_site_config
from .models import (
    BuildConfig,
    HighlightConfig,
    LandingCardConfig,
    LandingConfig,
    SiteConfig,
    SiteConfigError,
    SiteMetaConfig,
    TerminalLineConfig,
)

__all__ = [
    "BuildConfig",
    "HighlightConfig",
    "LandingCardConfig",
    "LandingConfig",
    "SiteConfig",
    "SiteConfigError",
    "SiteMetaConfig",
    "TerminalLineConfig",
    "load_site_config",
]
