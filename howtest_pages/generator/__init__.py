"""Utilities for rendering, assembling, and writing the documentation site."""

from .assembler import PageAssembler
from .highlighter import Highlighter, create_highlighter
from .models import Page, SourceDocument
from .renderer import HtmlContentRenderer
from .site_builder import SiteBuilder

__all__ = [
    "Highlighter",
    "HtmlContentRenderer",
    "Page",
    "PageAssembler",
    "SiteBuilder",
    "SourceDocument",
    "create_highlighter",
]
