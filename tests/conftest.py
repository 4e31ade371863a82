"""Shared fixtures for the How They Test site generator tests.

The fixtures build a throwaway documentation tree beneath ``tmp_path`` with a
root ``README.md`` landing document, two guide pages, and a ``styles``
directory, together with a ``site.yaml`` whose navigation matches the tree.
Tests that need a different layout write extra files into
``site_tree.source_root`` or rewrite the configuration through
``write_site_config``.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

import pytest

from howtest_pages.config import HighlightConfig, SiteConfig, load_site_config
from howtest_pages.generator import HtmlContentRenderer, create_highlighter

if typ.TYPE_CHECKING:
    from howtest_pages.generator import Highlighter

GUIDE_MARKDOWN = """# Writing Guides

Start with the [reference](reference.md) or go back [home](../README.md).

## Hello World!

```ts
// src/app.test.ts
expect(a < b).toBe(true)
```
"""

REFERENCE_MARKDOWN = """Reference material without a level-one heading.

## Options

| Name | Value |
| ---- | ----- |
| a    | 1     |
"""

LANDING_MARKDOWN = "# How They Test\n\nSee [the guide](docs/guide.md).\n"


@dc.dataclass(slots=True)
class SiteTree:
    """Locations of a temporary site used by orchestrator tests."""

    root: Path
    source_root: Path
    output_dir: Path
    config_path: Path


def write_site_config(
    path: Path,
    *,
    source_root: Path,
    output_dir: Path,
    navigation: str | None = None,
    strip_prefix: str | None = None,
    validate_navigation: bool = True,
) -> Path:
    """Write a minimal ``site.yaml`` for a temporary tree and return its path."""
    nav = navigation or (
        "  - name: Guides\n"
        "    dir: docs\n"
        "    items:\n"
        "      - {title: Writing Guides, file: docs/guide.md}\n"
        "      - {title: Reference, file: docs/reference.md}\n"
    )
    prefix_line = f"  strip_prefix: {strip_prefix}\n" if strip_prefix else ""
    path.write_text(
        "site:\n"
        "  name: Test Site\n"
        "  description: Fixture site\n"
        "build:\n"
        f"  source_root: {source_root}\n"
        f"  output_dir: {output_dir}\n"
        f"{prefix_line}"
        f"  validate_navigation: {str(validate_navigation).lower()}\n"
        "navigation:\n"
        f"{nav}"
        "landing:\n"
        "  badge: FIXTURE\n"
        "  title_primary: Test\n"
        "  title_accent: Site\n"
        "  terminal:\n"
        "    - {kind: command, text: npm test, copyable: true}\n"
        "    - {kind: output, text: all green, note: (2 suites), dim: true}\n"
        "    - {kind: cursor}\n"
        "  cards:\n"
        "    - label: Guides\n"
        "      description: How to write guides\n"
        "      href: docs/guide.html\n"
        "      icon: G\n"
        "      color: '#42b883'\n"
        "      meta_label: 2 docs\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def site_tree(tmp_path: Path) -> SiteTree:
    """Return a temporary documentation tree with a matching configuration."""
    source_root = tmp_path / "site"
    docs = source_root / "docs"
    styles = source_root / "styles"
    docs.mkdir(parents=True)
    styles.mkdir()
    (source_root / "README.md").write_text(LANDING_MARKDOWN, encoding="utf-8")
    (docs / "guide.md").write_text(GUIDE_MARKDOWN, encoding="utf-8")
    (docs / "reference.md").write_text(REFERENCE_MARKDOWN, encoding="utf-8")
    (styles / "main.css").write_text("body { margin: 0; }\n", encoding="utf-8")
    output_dir = tmp_path / "dist"
    config_path = write_site_config(
        tmp_path / "site.yaml", source_root=source_root, output_dir=output_dir
    )
    return SiteTree(
        root=tmp_path,
        source_root=source_root,
        output_dir=output_dir,
        config_path=config_path,
    )


@pytest.fixture
def site_config(site_tree: SiteTree) -> SiteConfig:
    """Return the parsed configuration for ``site_tree``."""
    return load_site_config(site_tree.config_path)


@pytest.fixture(scope="session")
def highlighter() -> Highlighter:
    """Return a highlighter provisioned with the default language set."""
    return create_highlighter(HighlightConfig())


@pytest.fixture
def renderer(highlighter: Highlighter) -> HtmlContentRenderer:
    """Return a content renderer backed by the shared highlighter."""
    return HtmlContentRenderer(highlighter)


@pytest.fixture
def config_writer() -> typ.Callable[..., Path]:
    """Return the helper that writes a custom ``site.yaml``."""
    return write_site_config
