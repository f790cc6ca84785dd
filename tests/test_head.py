"""Unit tests for rendering resolved metadata into HTML head elements."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from page_meta.config import ConfigurationError
from page_meta.head import HeadRenderer


def test_render_title_and_meta_tags() -> None:
    """Title becomes <title>; other string fields become <meta> tags in order."""
    html = HeadRenderer().render(
        {"title": "Lamp - Lighting", "description": "All about Lamp", "keywords": "lamp,light"}
    )
    soup = BeautifulSoup(html, "html.parser")
    title = soup.find("title")
    assert title is not None, "expected a <title> element"
    assert title.get_text() == "Lamp - Lighting", "unexpected title text"
    metas = [(tag.get("name"), tag.get("content")) for tag in soup.find_all("meta")]
    assert metas == [("description", "All about Lamp"), ("keywords", "lamp,light")], (
        f"unexpected meta tags {metas!r}"
    )
    assert html.endswith("\n"), "expected trailing newline"


def test_render_escapes_values() -> None:
    """Field values should be HTML escaped."""
    html = HeadRenderer().render({"title": "<b>Bold</b>", "description": 'say "hi"'})
    assert "<b>" not in html, "expected markup in values to be escaped"
    soup = BeautifulSoup(html, "html.parser")
    meta = soup.find("meta", attrs={"name": "description"})
    assert meta is not None, "expected a description meta tag"
    assert meta.get("content") == 'say "hi"', "expected quotes preserved"


def test_render_skips_non_string_fields() -> None:
    """Non-string fields should not produce elements."""
    html = HeadRenderer().render({"description": "Text", "priority": 3})
    soup = BeautifulSoup(html, "html.parser")
    assert soup.find("title") is None, "expected no title without a title field"
    names = [tag.get("name") for tag in soup.find_all("meta")]
    assert names == ["description"], f"unexpected meta names {names!r}"


def test_render_rejects_non_mapping_metadata() -> None:
    """A malformed entry that is not a mapping should raise ConfigurationError."""
    with pytest.raises(ConfigurationError, match="mapping"):
        HeadRenderer().render("%name%")  # type: ignore[arg-type]
