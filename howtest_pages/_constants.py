"""Common literal values used across howtest_pages.

These constants keep suffixes, directory names, and defaults centralized so
the path mapper, orchestrator, and tests can import the same values without
drifting. Intended for internal use within the howtest_pages package.

Examples
--------
>>> from howtest_pages import _constants
>>> _constants.MARKDOWN_SUFFIX
'.md'
>>> "node_modules" in _constants.DEFAULT_EXCLUDED_DIRS
True
"""

MARKDOWN_SUFFIX = ".md"
HTML_SUFFIX = ".html"
README_STEM = "README"
INDEX_STEM = "index"
ROOT_DOCUMENT = "README.md"
STYLES_DIRNAME = "styles"
DEFAULT_EXCLUDED_DIRS = (
    ".git",
    ".venv",
    "__pycache__",
    "dist",
    "node_modules",
)
