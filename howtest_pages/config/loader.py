"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _as_list,
    _as_mapping,
    _build_build_config,
    _build_highlight_config,
    _build_landing_config,
    _build_navigation,
    _build_site_meta,
)
from .models import SiteConfig


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the site and its navigation.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration with branding, build locations, highlighting
        choices, the navigation model, and landing page content. Relative
        paths are kept relative to the working directory.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If a section has the wrong shape or a required field is missing.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from howtest_pages.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.navigation.sections[0].name  # doctest: +SKIP
    'Vue Ecosystem'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    site = _build_site_meta(_as_mapping(raw.get("site"), "site"))
    build = _build_build_config(_as_mapping(raw.get("build"), "build"))
    highlight = _build_highlight_config(_as_mapping(raw.get("highlight"), "highlight"))
    navigation = _build_navigation(
        _as_list(raw.get("navigation"), "navigation"),
        strip_prefix=build.strip_prefix,
    )
    landing = _build_landing_config(
        _as_mapping(raw.get("landing"), "landing"), site=site
    )
    return SiteConfig(
        site=site,
        build=build,
        highlight=highlight,
        navigation=navigation,
        landing=landing,
    )


__all__ = ["load_site_config"]
