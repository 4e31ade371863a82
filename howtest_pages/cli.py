"""Cyclopts CLI entrypoint for building the How They Test documentation site.

The ``pages`` console script defined here renders the markdown tree into
static HTML (``pages build``) and checks that the declared sidebar navigation
matches the documents on disk (``pages check``). Typical usage involves
running ``pages build`` locally or in CI and publishing the output directory.

Examples
--------
Build the site with the default configuration:

>>> from howtest_pages.cli import main
>>> main()  # doctest: +SKIP

Build into a custom directory without navigation validation:

>>> from howtest_pages.cli import app
>>> app(
...     ["build", "--output-dir", "public", "--no-validate-nav"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import SiteConfigError, load_site_config
from .errors import PagesError
from .generator import SiteBuilder

DEFAULT_CONFIG = Path("config/site.yaml")

app = App(name="pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Render the markdown tree into the static HTML site.")
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    source_root: typ.Annotated[
        Path | None,
        Parameter(help="Override the source root", env_var="INPUT_SOURCE_ROOT"),
    ] = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    validate_nav: typ.Annotated[
        bool | None,
        Parameter(help="Fail when navigation and documents disagree"),
    ] = None,
) -> None:
    """Build every page described by the site configuration.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    source_root : Path or None, optional
        Override for the directory scanned for markdown documents.
    output_dir : Path or None, optional
        Override for the directory that is cleaned and written.
    validate_nav : bool or None, optional
        Force navigation validation on or off; ``None`` keeps the configured
        behaviour.

    Returns
    -------
    None
        Writes the site and prints each generated path.
    """
    site_config = load_site_config(config)
    builder = SiteBuilder(
        site_config,
        source_root=source_root,
        output_dir=output_dir,
        validate_navigation=validate_nav,
    )
    written = builder.run()
    for path in written:
        print(f"wrote {_format_path(path)}")
    print(f"Built {len(written)} pages into {_format_path(builder.output_dir)}")


@app.command(help="Check that sidebar navigation matches the markdown tree.")
def check(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Validate the navigation table against discovered documents.

    Raises
    ------
    NavigationMismatchError
        If a navigation entry has no document or a document has no entry.
    """
    site_config = load_site_config(config)
    builder = SiteBuilder(site_config)
    sources = builder.discover()
    site_config.navigation.validate(
        sources, root_document=site_config.build.root_document
    )
    print(f"Navigation matches {len(sources)} markdown files")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``pages`` command.

    Build failures are reported on stderr and exit with status 1.
    """
    try:
        app()
    except (PagesError, SiteConfigError, FileNotFoundError) as exc:
        print(f"Build failed: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
