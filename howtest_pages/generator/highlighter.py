"""Provision the Pygments highlighting engine used for fenced code blocks.

The engine is created once per build by :func:`create_highlighter` and passed
explicitly to the content renderer, so tests can substitute a stub. Setup
resolves the light and dark styles plus a lexer for every configured
language; any failure there is fatal and raised as
:class:`~howtest_pages.errors.HighlighterSetupError`.

Highlighted markup uses short CSS classes; :attr:`Highlighter.stylesheet`
returns rules for both themes, with the dark palette applied under
``prefers-color-scheme: dark``.
"""

from __future__ import annotations

import dataclasses as dc
import types
import typing as typ

from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from howtest_pages.errors import HighlighterSetupError

if typ.TYPE_CHECKING:
    from pygments.lexer import Lexer

    from howtest_pages.config import HighlightConfig

CSS_CLASS = "codehilite"


class UnsupportedLanguageError(LookupError):
    """Raised when a code block asks for a language that was not provisioned."""


@dc.dataclass(frozen=True, slots=True)
class Highlighter:
    """Immutable handle over provisioned Pygments styles and lexers.

    Attributes
    ----------
    light_style : str
        Pygments style applied by default.
    dark_style : str
        Pygments style applied when the reader prefers a dark scheme.
    lexers : Mapping[str, Lexer]
        Lexers keyed by the language names code blocks may use.
    """

    light_style: str
    dark_style: str
    lexers: typ.Mapping[str, Lexer]

    def highlight(self, code: str, language: str) -> str:
        """Return highlighted HTML for ``code`` in ``language``.

        Raises
        ------
        UnsupportedLanguageError
            If ``language`` was not provisioned during setup.
        """
        lexer = self.lexers.get(language.lower())
        if lexer is None:
            msg = f"Language '{language}' is not provisioned for highlighting."
            raise UnsupportedLanguageError(msg)
        formatter = HtmlFormatter(cssclass=CSS_CLASS, wrapcode=True)
        return highlight(code, lexer, formatter)

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks in both themes."""
        selector = f".{CSS_CLASS}"
        light = HtmlFormatter(style=self.light_style).get_style_defs(selector)
        dark = HtmlFormatter(style=self.dark_style).get_style_defs(selector)
        indented = "\n".join(f"  {line}" for line in dark.splitlines())
        return f"{light}\n@media (prefers-color-scheme: dark) {{\n{indented}\n}}\n"


def create_highlighter(config: HighlightConfig) -> Highlighter:
    """Provision styles and lexers described by ``config``.

    Parameters
    ----------
    config : HighlightConfig
        Style names, language list, and language aliases (for example
        ``vue`` highlighted as ``html``).

    Returns
    -------
    Highlighter
        Handle ready to be passed to the content renderer.

    Raises
    ------
    HighlighterSetupError
        If a style or a configured language cannot be resolved.
    """
    for style in (config.light_style, config.dark_style):
        try:
            get_style_by_name(style)
        except ClassNotFound as exc:
            msg = f"Unknown Pygments style '{style}'."
            raise HighlighterSetupError(msg) from exc

    lexers: dict[str, Lexer] = {"text": get_lexer_by_name("text")}
    for language in config.languages:
        name = config.aliases.get(language, language)
        try:
            lexer = get_lexer_by_name(name)
        except ClassNotFound as exc:
            msg = f"No Pygments lexer available for language '{language}'."
            raise HighlighterSetupError(msg) from exc
        lexers[language.lower()] = lexer
        # short names such as ``ts`` or ``sh`` resolve to the same lexer
        for alias in lexer.aliases:
            lexers.setdefault(alias.lower(), lexer)
    return Highlighter(
        light_style=config.light_style,
        dark_style=config.dark_style,
        lexers=types.MappingProxyType(lexers),
    )


__all__ = [
    "CSS_CLASS",
    "Highlighter",
    "UnsupportedLanguageError",
    "create_highlighter",
]
