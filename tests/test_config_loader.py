"""Tests for loading ``site.yaml`` into typed configuration objects."""

from __future__ import annotations

from pathlib import Path

import pytest

from howtest_pages.config import SiteConfigError, load_site_config

REPO_CONFIG = Path(__file__).resolve().parents[1] / "config" / "site.yaml"


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "site.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_repository_config_loads() -> None:
    """The shipped configuration declares every ecosystem section."""
    config = load_site_config(REPO_CONFIG)
    names = [section.name for section in config.navigation.sections]
    assert names == [
        "Vue Ecosystem",
        "TanStack",
        "Vercel",
        "Fastify",
        "Svelte",
        "Angular",
        "React",
    ]
    first = config.navigation.sections[0].items[0]
    assert first.file == "docs/vue-ecosystem/overview.md"
    assert first.href == "/vue-ecosystem/overview.html"
    assert config.build.strip_prefix == "docs"
    assert len(config.landing.cards) == len(names)


def test_defaults_apply_to_empty_config(tmp_path: Path) -> None:
    """An empty document falls back to the built-in defaults."""
    config = load_site_config(_write(tmp_path, ""))
    assert config.site.name == "How They Test"
    assert config.build.source_root == Path("site")
    assert config.build.static_dir == Path("site/styles")
    assert config.build.validate_navigation is True
    assert config.highlight.dark_style == "github-dark"
    assert config.highlight.aliases["vue"] == "html"
    assert config.navigation.sections == ()
    assert config.landing.title_primary == "How They Test"


def test_static_dir_follows_source_root(tmp_path: Path) -> None:
    """Without an explicit ``static_dir`` the styles live under the sources."""
    config = load_site_config(_write(tmp_path, "build:\n  source_root: content\n"))
    assert config.build.static_dir == Path("content/styles")


def test_alias_overrides_merge_with_defaults(tmp_path: Path) -> None:
    """Configured aliases extend rather than replace the defaults."""
    config = load_site_config(
        _write(tmp_path, "highlight:\n  aliases:\n    svelte: html\n")
    )
    assert config.highlight.aliases["svelte"] == "html"
    assert config.highlight.aliases["tsx"] == "typescript"


def test_explicit_href_is_kept(tmp_path: Path) -> None:
    """Items may override the derived route."""
    config = load_site_config(
        _write(
            tmp_path,
            "navigation:\n"
            "  - name: Guides\n"
            "    dir: guides\n"
            "    items:\n"
            "      - {title: Intro, file: guides/README.md}\n"
            "      - {title: Setup, file: guides/setup.md, href: /guides/start.html}\n",
        )
    )
    items = config.navigation.sections[0].items
    assert [item.href for item in items] == [
        "/guides/index.html",
        "/guides/start.html",
    ]


def test_missing_file_raises(tmp_path: Path) -> None:
    """A missing configuration file is reported before parsing."""
    with pytest.raises(FileNotFoundError, match="not found"):
        load_site_config(tmp_path / "absent.yaml")


def test_top_level_must_be_mapping(tmp_path: Path) -> None:
    """Lists at the top level are rejected."""
    with pytest.raises(TypeError, match="mapping"):
        load_site_config(_write(tmp_path, "- a\n- b\n"))


@pytest.mark.parametrize(
    ("text", "fragment"),
    [
        ("navigation:\n  - {dir: a, items: []}\n", "navigation[0] is missing 'name'"),
        (
            "navigation:\n  - name: A\n    dir: a\n    items:\n      - {file: a.md}\n",
            "navigation[0].items[0] is missing 'title'",
        ),
        ("navigation: {name: A}\n", "navigation must be a list"),
        (
            "landing:\n  terminal:\n    - {kind: banner, text: hi}\n",
            "unknown kind 'banner'",
        ),
        ("landing:\n  cards:\n    - {label: A}\n", "is missing 'href'"),
    ],
)
def test_invalid_sections_raise(tmp_path: Path, text: str, fragment: str) -> None:
    """Malformed sections name the offending location."""
    with pytest.raises(SiteConfigError) as excinfo:
        load_site_config(_write(tmp_path, text))
    assert fragment in str(excinfo.value)
