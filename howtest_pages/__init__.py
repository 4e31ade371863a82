"""Static site generator for the How They Test documentation.

This package exposes the CLI entry points used by ``uv run pages`` to render
the markdown tree into a browsable HTML site with a sidebar, highlighted code
blocks, and a landing page.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from howtest_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
