"""Behaviour tests for code block chrome.

Scenarios from ``code_blocks.feature`` render markdown snippets through
:class:`~howtest_pages.generator.HtmlContentRenderer` and check the code
window header: directory diagrams become ``FILES`` trees with per-extension
spans, and snippets that open with a filename comment show that path as a
breadcrumb instead of in the code body.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

if typ.TYPE_CHECKING:
    from howtest_pages.generator import HtmlContentRenderer

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "code_blocks.feature"
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given("markdown with an untagged directory diagram")
def given_tree(scenario_state: dict[str, object]) -> None:
    """Store a fenced block drawn with box glyphs."""
    scenario_state["markdown"] = (
        "Layout:\n\n```\nsrc/\n├── index.ts\n└── index.test.ts\n```\n"
    )


@given("markdown with a snippet starting with a filename comment")
def given_filename_snippet(scenario_state: dict[str, object]) -> None:
    """Store a fenced block whose first line names its file."""
    scenario_state["markdown"] = (
        "```ts\n// test/setup.ts\nimport { vi } from 'vitest'\n```\n"
    )


@when("I render the markdown")
def when_render(
    renderer: HtmlContentRenderer, scenario_state: dict[str, object]
) -> None:
    """Render the stored markdown and keep the parsed code block."""
    html = renderer.markdown(typ.cast("str", scenario_state["markdown"]))
    soup = BeautifulSoup(html, "html.parser")
    scenario_state["block"] = soup.select_one("div.code-block")


@then(parsers.parse('the block is labelled "{label}"'))
def then_label(scenario_state: dict[str, object], label: str) -> None:
    """Verify the chrome label text."""
    block = typ.cast("typ.Any", scenario_state["block"])
    assert block is not None, "expected a rendered code block"
    assert block.select_one(".code-chrome .code-lang").get_text() == label


@then(parsers.parse('"{filename}" is marked as a typescript file'))
def then_ts_file(scenario_state: dict[str, object], filename: str) -> None:
    """Verify the tree span for ``filename`` carries the ``.ts`` class."""
    block = typ.cast("typ.Any", scenario_state["block"])
    spans = [
        span
        for span in block.select("span.ft-file")
        if span.get_text() == filename
    ]
    assert spans, f"expected a file span for {filename}"
    assert "ft-ext-ts" in spans[0]["class"]


@then(parsers.parse('the breadcrumb ends with "{filename}"'))
def then_breadcrumb(scenario_state: dict[str, object], filename: str) -> None:
    """Verify the breadcrumb shows the file name last."""
    block = typ.cast("typ.Any", scenario_state["block"])
    assert "has-filename" in block["class"]
    assert block.select_one(".code-filepath .fp-file").get_text() == filename


@then("the filename comment is removed from the code")
def then_comment_removed(scenario_state: dict[str, object]) -> None:
    """Verify the code body starts with the first real line."""
    block = typ.cast("typ.Any", scenario_state["block"])
    code = block.select_one("div.codehilite").get_text()
    assert "test/setup.ts" not in code
    assert code.lstrip().startswith("import")
