"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from howtest_pages.navigation import (
    NavigationItem,
    NavigationModel,
    NavigationSection,
)
from howtest_pages.paths import output_relative_path, route_for

from .models import (
    BuildConfig,
    HighlightConfig,
    LandingCardConfig,
    LandingConfig,
    SiteConfigError,
    SiteMetaConfig,
    TerminalLineConfig,
)

TERMINAL_LINE_KINDS = frozenset({"command", "output", "cursor"})


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _require_str(payload: typ.Mapping[str, typ.Any], key: str, where: str) -> str:
    """Return ``payload[key]`` as a non-empty string or raise SiteConfigError."""
    value = _optional_str(payload.get(key))
    if value is None:
        msg = f"{where} is missing '{key}'."
        raise SiteConfigError(msg)
    return value


def _as_mapping(value: object, where: str) -> typ.Mapping[str, typ.Any]:
    match value:
        case None:
            return {}
        case dict():
            return value
        case _:
            msg = f"{where} must be a mapping."
            raise SiteConfigError(msg)


def _as_list(value: object, where: str) -> list[typ.Any]:
    match value:
        case None:
            return []
        case list():
            return value
        case _:
            msg = f"{where} must be a list."
            raise SiteConfigError(msg)


def _build_site_meta(payload: typ.Mapping[str, typ.Any]) -> SiteMetaConfig:
    """Build a SiteMetaConfig from ``payload`` falling back to defaults."""
    base = SiteMetaConfig()
    return SiteMetaConfig(
        name=payload.get("name", base.name),
        description=payload.get("description", base.description),
        logo=payload.get("logo", base.logo),
        og_image=payload.get("og_image", base.og_image),
        stylesheet=payload.get("stylesheet", base.stylesheet),
    )


def _build_build_config(payload: typ.Mapping[str, typ.Any]) -> BuildConfig:
    """Build a BuildConfig, converting directory entries to ``Path`` objects."""
    base = BuildConfig()
    source_root = Path(payload.get("source_root", base.source_root))
    exclude_dirs = payload.get("exclude_dirs")
    return BuildConfig(
        source_root=source_root,
        output_dir=Path(payload.get("output_dir", base.output_dir)),
        static_dir=Path(payload.get("static_dir", source_root / "styles")),
        strip_prefix=_optional_str(payload.get("strip_prefix")),
        exclude_dirs=(
            tuple(str(name) for name in exclude_dirs)
            if exclude_dirs is not None
            else base.exclude_dirs
        ),
        validate_navigation=bool(
            payload.get("validate_navigation", base.validate_navigation)
        ),
        root_document=payload.get("root_document", base.root_document),
    )


def _build_highlight_config(payload: typ.Mapping[str, typ.Any]) -> HighlightConfig:
    """Build a HighlightConfig, merging alias overrides onto the defaults."""
    base = HighlightConfig()
    languages = payload.get("languages")
    aliases = dict(base.aliases)
    aliases.update(_as_mapping(payload.get("aliases"), "highlight.aliases"))
    return HighlightConfig(
        light_style=payload.get("light_style", base.light_style),
        dark_style=payload.get("dark_style", base.dark_style),
        languages=(
            tuple(str(lang) for lang in languages)
            if languages is not None
            else base.languages
        ),
        aliases={str(key): str(value) for key, value in aliases.items()},
    )


def _build_navigation(
    entries: list[typ.Any], *, strip_prefix: str | None
) -> NavigationModel:
    """Build the navigation model from the ``navigation`` list.

    Items that omit ``href`` receive the route of their mapped source file.
    """
    sections: list[NavigationSection] = []
    for idx, raw in enumerate(entries):
        where = f"navigation[{idx}]"
        payload = _as_mapping(raw, where)
        name = _require_str(payload, "name", where)
        directory = _require_str(payload, "dir", where)
        items: list[NavigationItem] = []
        for item_idx, raw_item in enumerate(
            _as_list(payload.get("items"), f"{where}.items")
        ):
            item_where = f"{where}.items[{item_idx}]"
            item_payload = _as_mapping(raw_item, item_where)
            source = _require_str(item_payload, "file", item_where)
            href = _optional_str(item_payload.get("href")) or route_for(
                output_relative_path(source, strip_prefix=strip_prefix)
            )
            items.append(
                NavigationItem(
                    title=_require_str(item_payload, "title", item_where),
                    href=href,
                    file=source,
                )
            )
        sections.append(
            NavigationSection(name=name, dir=directory, items=tuple(items))
        )
    return NavigationModel(sections=tuple(sections))


def _build_terminal_line(
    payload: typ.Mapping[str, typ.Any], where: str
) -> TerminalLineConfig:
    kind = payload.get("kind", "output")
    if kind not in TERMINAL_LINE_KINDS:
        known = ", ".join(sorted(TERMINAL_LINE_KINDS))
        msg = f"{where} has unknown kind '{kind}' (expected one of: {known})."
        raise SiteConfigError(msg)
    return TerminalLineConfig(
        kind=kind,
        text=str(payload.get("text", "")),
        note=_optional_str(payload.get("note")),
        copyable=bool(payload.get("copyable", False)),
        dim=bool(payload.get("dim", False)),
    )


def _build_card(payload: typ.Mapping[str, typ.Any], where: str) -> LandingCardConfig:
    return LandingCardConfig(
        label=_require_str(payload, "label", where),
        description=str(payload.get("description", "")),
        href=_require_str(payload, "href", where),
        icon=str(payload.get("icon", "")),
        color=str(payload.get("color", "currentColor")),
        meta_label=str(payload.get("meta_label", "")),
    )


def _build_landing_config(
    payload: typ.Mapping[str, typ.Any], *, site: SiteMetaConfig
) -> LandingConfig:
    """Build the landing page configuration, defaulting copy to site metadata."""
    terminal = [
        _build_terminal_line(
            _as_mapping(raw, f"landing.terminal[{idx}]"), f"landing.terminal[{idx}]"
        )
        for idx, raw in enumerate(_as_list(payload.get("terminal"), "landing.terminal"))
    ]
    cards = [
        _build_card(_as_mapping(raw, f"landing.cards[{idx}]"), f"landing.cards[{idx}]")
        for idx, raw in enumerate(_as_list(payload.get("cards"), "landing.cards"))
    ]
    return LandingConfig(
        title=payload.get("title", site.name),
        badge=payload.get("badge", ""),
        title_primary=payload.get("title_primary", site.name),
        title_accent=payload.get("title_accent", ""),
        description=payload.get("description", site.description),
        terminal=terminal,
        cards=cards,
        note=payload.get("note", ""),
    )


__all__ = [
    "TERMINAL_LINE_KINDS",
    "_as_list",
    "_as_mapping",
    "_build_build_config",
    "_build_highlight_config",
    "_build_landing_config",
    "_build_navigation",
    "_build_site_meta",
    "_optional_str",
]
