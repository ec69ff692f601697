"""Unit tests for markdown inclusion and ``%version%`` substitution."""

from __future__ import annotations

import typing as typ

import pytest
from bs4 import BeautifulSoup

from loki4j_site.markdown_include import (
    include_markdown,
    load_markdown,
    substitute_version,
)
from loki4j_site.renderer import HtmlContentRenderer

if typ.TYPE_CHECKING:
    from pathlib import Path


def test_substitute_version_replaces_token() -> None:
    assert substitute_version("version: %version%", "1.6.0") == "version: 1.6.0"


def test_substitute_version_replaces_every_occurrence() -> None:
    text = "%version% and %version%"
    assert substitute_version(text, "2.0") == "2.0 and 2.0"


def test_text_without_token_passes_through() -> None:
    text = "pattern: l=%level c=%logger{20}"
    assert substitute_version(text, "1.6.0") == text


def test_substitution_is_idempotent() -> None:
    once = substitute_version("version: %version%", "1.6.0")
    assert substitute_version(once, "9.9.9") == once, (
        "no token should remain after the first substitution"
    )


def test_load_markdown_reads_and_substitutes(index_doc: Path) -> None:
    content = load_markdown(index_doc, "1.6.0")
    assert content.startswith("version: 1.6.0")
    assert "%version%" not in content


def test_missing_document_is_fatal(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="index.md"):
        load_markdown(tmp_path / "missing" / "index.md", "1.6.0")


def test_include_markdown_renders_highlighted_code(index_doc: Path) -> None:
    included = include_markdown(index_doc, "1.6.0", HtmlContentRenderer())
    assert included.metadata == {
        "custom_edit_url": None,
        "hide_title": True,
        "title": "index",
    }
    soup = BeautifulSoup(included.html, "html.parser")
    block = soup.select_one("div.codehilite")
    assert block is not None, "expected a highlighted code block"
    assert block.get("data-language") == "xml"
    assert "1.6.0" in block.get_text()
    heading = soup.select_one("h2")
    assert heading is not None
    assert heading.get("id") == "quick-start", "toc should anchor the quick start"
