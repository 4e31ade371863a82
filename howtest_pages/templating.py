"""Jinja environment shared by the documentation and landing page builders."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
AUTOESCAPE_EXTENSIONS = ("html", "xml", "jinja")


def create_environment(templates_dir: Path | None = None) -> Environment:
    """Return a Jinja environment rooted at ``templates_dir``.

    Parameters
    ----------
    templates_dir : Path, optional
        Directory containing Jinja templates; defaults to the package
        templates.

    Returns
    -------
    Environment
        Environment with autoescaping for ``.html``, ``.xml`` and ``.jinja``
        templates and trimmed block whitespace.
    """
    return Environment(
        loader=FileSystemLoader(str(templates_dir or DEFAULT_TEMPLATES_DIR)),
        autoescape=select_autoescape(AUTOESCAPE_EXTENSIONS),
        trim_blocks=True,
        lstrip_blocks=True,
    )


__all__ = ["AUTOESCAPE_EXTENSIONS", "DEFAULT_TEMPLATES_DIR", "create_environment"]
