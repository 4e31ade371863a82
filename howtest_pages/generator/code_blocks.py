"""Render fenced code blocks with window chrome, breadcrumbs, and file trees.

Three flavours share one wrapper (``div.code-block`` holding a
``div.code-chrome`` header and the code):

* file trees: untagged blocks drawn with box glyphs or bare ``dir/`` lines
  are annotated with ``ft-*`` spans instead of being highlighted;
* filename-annotated code: a leading ``// path/to/file.ts`` comment (or
  ``# file.sh`` in shell, YAML and TOML blocks) becomes a breadcrumb label
  and is removed from the body;
* plain code: highlighted through the provisioned :class:`Highlighter`,
  falling back to escaped text when the language is unknown.

The :class:`FencedCodeExtension` plugs these rules into Python-Markdown in
place of the stock ``fenced_code`` extension.
"""

from __future__ import annotations

import logging
import re
import typing as typ
from html import escape

from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor

from .highlighter import UnsupportedLanguageError

if typ.TYPE_CHECKING:
    from markdown import Markdown

    from .highlighter import Highlighter

logger = logging.getLogger(__name__)

FENCED_BLOCK_RE = re.compile(
    r"(?P<fence>^(?:~{3,}|`{3,}))[ ]*(?P<lang>[\w#.+-]*)[^\n]*\n"
    r"(?P<code>.*?)(?<=\n)(?P=fence)[ ]*$",
    re.MULTILINE | re.DOTALL,
)
FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')

TREE_GLYPHS = ("├──", "└──")
BARE_DIRECTORY_LINE = re.compile(r"^\s*[\w.-]+/\s*$", re.MULTILINE)
TREE_COMMENT = re.compile(r"^(.*?)(#\s*.+)$")
TREE_BRANCH = re.compile(r"([│├└─┬┤┼]+(?:──)?)")
TREE_DIRECTORY = re.compile(r"(?<![.\w])([A-Za-z0-9_][\w.*-]*/)")
TREE_FILENAME = re.compile(r"(?<![.\w/])([A-Za-z0-9_][\w-]*(?:\.\w+)+)(?=\s|$)")
TREE_ELLIPSIS = re.compile(r"(\.\.\.\s*\d*\+?\s*\w*)")
FILENAME_COMMENT = re.compile(r"^(?P<marker>//|#)\s*(?P<name>[\w./-]+\.\w+)\s*\n")
HASH_COMMENT_LANGUAGES = frozenset({"bash", "sh", "shell", "zsh", "yaml", "yml", "toml"})

CHROME_DOTS = '<span class="code-dots"><span></span><span></span><span></span></span>'


def _escape_code(text: str) -> str:
    return escape(text, quote=False)


def _wrap(label_html: str, body_html: str, *, extra_class: str = "") -> str:
    classes = f"code-block {extra_class}".strip()
    return (
        f'<div class="{classes}"><div class="code-chrome">{CHROME_DOTS}'
        f"{label_html}</div>{body_html}</div>"
    )


def _plain_pre(text: str) -> str:
    return f'<pre class="shiki"><code>{_escape_code(text)}</code></pre>'


def is_file_tree(text: str, language: str | None) -> bool:
    """Return whether an untagged block looks like a directory diagram."""
    if language:
        return False
    return any(glyph in text for glyph in TREE_GLYPHS) or bool(
        BARE_DIRECTORY_LINE.search(text)
    )


def _file_span(match: re.Match[str]) -> str:
    filename = match.group(1)
    extension = filename.rsplit(".", 1)[-1]
    return f'<span class="ft-file ft-ext-{extension}">{filename}</span>'


def _annotate_tree_line(line: str) -> str:
    comment_match = TREE_COMMENT.match(line)
    main = comment_match.group(1) if comment_match else line
    comment = comment_match.group(2) if comment_match else ""

    main = TREE_BRANCH.sub(r'<span class="ft-branch">\1</span>', main)
    main = TREE_DIRECTORY.sub(r'<span class="ft-dir">\1</span>', main)
    main = TREE_FILENAME.sub(_file_span, main)
    main = TREE_ELLIPSIS.sub(r'<span class="ft-comment">\1</span>', main)
    if comment:
        main += f'<span class="ft-comment">{comment}</span>'
    return main


def render_file_tree(text: str) -> str:
    """Render a directory diagram with ``ft-*`` spans and a ``FILES`` label."""
    escaped = _escape_code(text)
    annotated = "\n".join(_annotate_tree_line(line) for line in escaped.split("\n"))
    return _wrap(
        '<span class="code-lang">FILES</span>',
        f'<pre class="shiki"><code>{annotated}</code></pre>',
        extra_class="file-tree",
    )


def split_filename_comment(
    text: str, language: str | None = None
) -> tuple[str | None, str]:
    """Return ``(filename, body)`` when the first line names a file.

    ``//`` comments name a file in any block. ``#`` comments only do so for
    the shell and config languages in :data:`HASH_COMMENT_LANGUAGES`; other
    blocks keep such a first line as code.

    Examples
    --------
    >>> split_filename_comment("// src/app.ts\\nexport {}")
    ('src/app.ts', 'export {}')
    >>> split_filename_comment("# run.sh\\nmake", "bash")
    ('run.sh', 'make')
    >>> split_filename_comment("# setup.py\\nimport os", "python")
    (None, '# setup.py\\nimport os')
    """
    match = FILENAME_COMMENT.match(text)
    if not match:
        return None, text
    hash_allowed = (language or "").lower() in HASH_COMMENT_LANGUAGES
    if match.group("marker") == "#" and not hash_allowed:
        return None, text
    return match.group("name"), text[match.end() :]


def breadcrumb_label(filename: str) -> str:
    """Render ``filename`` as directory segments followed by the file name."""
    *directories, name = filename.split("/")
    crumbs = "".join(
        f'{escape(part)}<span class="fp-sep">/</span>' for part in directories
    )
    return (
        f'<span class="code-filepath">{crumbs}'
        f'<span class="fp-file">{escape(name)}</span></span>'
    )


def _highlight_or_plain(highlighter: Highlighter, code: str, language: str) -> str:
    try:
        html = highlighter.highlight(code, language)
    except UnsupportedLanguageError:
        logger.debug("No lexer provisioned for %r; rendering plain text", language)
        return _plain_pre(code)
    except Exception:  # noqa: BLE001 - a single block must never abort the build
        logger.warning(
            "Highlighting failed for %r block; rendering plain text",
            language,
            exc_info=True,
        )
        return _plain_pre(code)
    safe_lang = escape(language, quote=True)
    return CODEHILITE_OPEN_TAG.sub(
        f'<div class="codehilite" data-language="{safe_lang}">', html, 1
    )


def render_code_block(
    text: str, language: str | None, highlighter: Highlighter
) -> str:
    """Render one fenced block into the shared ``code-block`` wrapper.

    Parameters
    ----------
    text : str
        Raw block contents without the fences or trailing newline.
    language : str or None
        Language tag from the opening fence.
    highlighter : Highlighter
        Provisioned highlighting engine.

    Returns
    -------
    str
        HTML for the complete block, including its chrome header.
    """
    if is_file_tree(text, language):
        return render_file_tree(text)

    lang = language or "text"
    filename, code = split_filename_comment(text, lang)
    if filename:
        label = breadcrumb_label(filename)
    else:
        label = f'<span class="code-lang">{escape(lang.upper())}</span>'
    body = _highlight_or_plain(highlighter, code, lang)
    return _wrap(label, body, extra_class="has-filename" if filename else "")


class FencedCodePreprocessor(Preprocessor):
    """Replace fenced blocks with stashed chrome-wrapped HTML."""

    def __init__(self, md: Markdown, highlighter: Highlighter) -> None:
        super().__init__(md)
        self.highlighter = highlighter

    def run(self, lines: list[str]) -> list[str]:
        """Render every fenced block in ``lines`` and stash the result."""
        text = FENCED_INDENT_PATTERN.sub(r"\1", "\n".join(lines))
        while match := FENCED_BLOCK_RE.search(text):
            code = match.group("code")[:-1]
            html = render_code_block(code, match.group("lang") or None, self.highlighter)
            placeholder = self.md.htmlStash.store(html)
            text = f"{text[: match.start()]}\n{placeholder}\n{text[match.end() :]}"
        return text.split("\n")


class FencedCodeExtension(Extension):
    """Register :class:`FencedCodePreprocessor` on a Markdown instance."""

    def __init__(self, highlighter: Highlighter) -> None:
        super().__init__()
        self.highlighter = highlighter

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the fenced code preprocessor ahead of block parsing."""
        md.registerExtension(self)
        processor = FencedCodePreprocessor(md, self.highlighter)
        md.preprocessors.register(processor, "howtest_fenced_code", 25)


__all__ = [
    "FENCED_BLOCK_RE",
    "HASH_COMMENT_LANGUAGES",
    "FencedCodeExtension",
    "FencedCodePreprocessor",
    "breadcrumb_label",
    "is_file_tree",
    "render_code_block",
    "render_file_tree",
    "split_filename_comment",
]
