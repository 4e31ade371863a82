"""High-level orchestration for building the documentation site.

This module discovers markdown documents beneath the configured source root,
renders each one with :class:`HtmlContentRenderer`, wraps it with
:class:`PageAssembler` (or :class:`LandingPageBuilder` for the root
document), and writes the result into a freshly cleaned output directory next
to the copied static assets. It exposes :class:`SiteBuilder`, which consumes
a :class:`~howtest_pages.config.SiteConfig`.

Every step runs sequentially. Any read or write failure aborts the build with
:class:`~howtest_pages.errors.BuildError`; pages already written stay on disk.

Example
-------
>>> from pathlib import Path
>>> from howtest_pages.config import load_site_config
>>> from howtest_pages.generator import SiteBuilder
>>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> SiteBuilder(config).run()  # doctest: +SKIP
[PosixPath('dist/index.html'), PosixPath('dist/react/overview.html'), ...]
"""

from __future__ import annotations

import os
import shutil
import typing as typ
from pathlib import Path

from howtest_pages._constants import MARKDOWN_SUFFIX, STYLES_DIRNAME
from howtest_pages.errors import BuildError
from howtest_pages.landing_page import LandingPageBuilder
from howtest_pages.paths import output_relative_path, root_prefix, route_for

from .assembler import PageAssembler
from .highlighter import create_highlighter
from .models import Page, SourceDocument
from .renderer import HtmlContentRenderer

if typ.TYPE_CHECKING:
    from howtest_pages.config import SiteConfig

    from .highlighter import Highlighter


class SiteBuilder:
    """Discover markdown documents and emit the themed HTML site."""

    def __init__(
        self,
        config: SiteConfig,
        *,
        highlighter: Highlighter | None = None,
        templates_dir: Path | None = None,
        source_root: Path | None = None,
        output_dir: Path | None = None,
        validate_navigation: bool | None = None,
    ) -> None:
        """Initialize the builder with configuration and optional overrides.

        Parameters
        ----------
        config : SiteConfig
            Parsed site configuration.
        highlighter : Highlighter, optional
            Pre-provisioned highlighting engine; when ``None`` one is created
            from ``config.highlight`` at the start of :meth:`run`.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.
        source_root : Path, optional
            Override for ``config.build.source_root``.
        output_dir : Path, optional
            Override for ``config.build.output_dir``.
        validate_navigation : bool, optional
            Override for ``config.build.validate_navigation``.
        """
        self.config = config
        self.templates_dir = templates_dir
        self.source_root = source_root or config.build.source_root
        self.output_dir = output_dir or config.build.output_dir
        self.validate_navigation = (
            config.build.validate_navigation
            if validate_navigation is None
            else validate_navigation
        )
        self._highlighter = highlighter

    def run(self) -> list[Path]:
        """Build the whole site.

        Returns
        -------
        list[Path]
            Paths of the written HTML pages in discovery order; copied
            static assets are not included.

        Raises
        ------
        HighlighterSetupError
            If the highlighting engine cannot be provisioned.
        NavigationMismatchError
            If navigation validation is enabled and the declared pages do not
            match the discovered documents.
        BuildError
            If two documents map to the same output path, the output
            directory would overwrite the sources, or any read/write fails.
        """
        highlighter = self._highlighter or create_highlighter(self.config.highlight)
        renderer = HtmlContentRenderer(highlighter)
        assembler = PageAssembler(
            self.config.site,
            self.config.navigation,
            stylesheet=renderer.stylesheet,
            templates_dir=self.templates_dir,
        )
        landing = LandingPageBuilder(
            self.config.site, self.config.landing, templates_dir=self.templates_dir
        )

        sources = self.discover()
        if self.validate_navigation:
            self.config.navigation.validate(
                sources, root_document=self.config.build.root_document
            )
        targets = self._map_outputs(sources)

        self._prepare_output_dir()
        self._copy_static_assets()

        written: list[Path] = []
        for rel_path in sources:
            html_rel = targets[rel_path]
            route = route_for(html_rel)
            if rel_path == self.config.build.root_document:
                page = Page(html_rel, landing.render(root_prefix(route)), route)
            else:
                document = self._read_document(rel_path)
                fragment = renderer.markdown(document.text)
                html = assembler.render(document.title, fragment, route)
                page = Page(html_rel, html, route)
            written.append(self._write_page(page))
        return written

    def discover(self) -> list[str]:
        """Return source-relative markdown paths in a stable, sorted order.

        Directories named in ``exclude_dirs`` and the output directory itself
        are skipped.
        """
        root = self.source_root
        if not root.is_dir():
            msg = f"Source root '{root}' is not a directory."
            raise BuildError(msg)
        excluded = set(self.config.build.exclude_dirs)
        output = self.output_dir.resolve()
        found: list[str] = []
        for dirpath, dirnames, filenames in os.walk(root):
            current = Path(dirpath)
            dirnames[:] = sorted(
                name
                for name in dirnames
                if name not in excluded and (current / name).resolve() != output
            )
            for filename in sorted(filenames):
                if filename.endswith(MARKDOWN_SUFFIX):
                    found.append((current / filename).relative_to(root).as_posix())
        return found

    def _map_outputs(self, sources: list[str]) -> dict[str, str]:
        """Map each source to its output path, rejecting collisions."""
        targets: dict[str, str] = {}
        claimed: dict[str, str] = {}
        for rel_path in sources:
            html_rel = output_relative_path(
                rel_path, strip_prefix=self.config.build.strip_prefix
            )
            if html_rel in claimed:
                msg = (
                    f"'{rel_path}' and '{claimed[html_rel]}' both map to "
                    f"'{html_rel}'."
                )
                raise BuildError(msg)
            claimed[html_rel] = rel_path
            targets[rel_path] = html_rel
        return targets

    def _prepare_output_dir(self) -> None:
        """Remove and recreate the output directory."""
        output = self.output_dir.resolve()
        source = self.source_root.resolve()
        if output == source or source.is_relative_to(output):
            msg = f"Refusing to clean '{self.output_dir}': it contains the sources."
            raise BuildError(msg)
        try:
            if output.exists():
                shutil.rmtree(output)
            output.mkdir(parents=True)
        except OSError as exc:
            msg = f"Failed to prepare output directory '{self.output_dir}': {exc}"
            raise BuildError(msg) from exc

    def _copy_static_assets(self) -> None:
        """Copy the static directory verbatim into ``<output>/styles``."""
        static_dir = self.config.build.static_dir
        try:
            shutil.copytree(static_dir, self.output_dir / STYLES_DIRNAME)
        except OSError as exc:
            msg = f"Failed to copy static assets from '{static_dir}': {exc}"
            raise BuildError(msg) from exc

    def _read_document(self, rel_path: str) -> SourceDocument:
        path = self.source_root / rel_path
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"Failed to read '{path}': {exc}"
            raise BuildError(msg) from exc
        return SourceDocument(rel_path=rel_path, text=text)

    def _write_page(self, page: Page) -> Path:
        path = self.output_dir / page.output_path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(page.html, encoding="utf-8")
        except OSError as exc:
            msg = f"Failed to write '{path}': {exc}"
            raise BuildError(msg) from exc
        return path


__all__ = ["SiteBuilder"]
