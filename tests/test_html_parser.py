# tests/test_html_parser.py
"""
Unit tests for the BeautifulSoup bridge (html_attributes/parser/html_parser.py)
"""

import pytest
from bs4 import BeautifulSoup, Tag

from html_attributes import AttributeMap, HTMLParser

# ---------------------------------------------------------------------------
#                                FIXTURES
# ---------------------------------------------------------------------------


@pytest.fixture
def parser() -> HTMLParser:
    return HTMLParser()


@pytest.fixture
def button_tag(parser: HTMLParser) -> Tag:
    """A parsed <button> with multi-valued, flag and data attributes."""
    return parser.parse_element('<button class="btn primary" disabled data-id="42">Go</button>')


# ---------------------------------------------------------------------------
#                                TESTS
# ---------------------------------------------------------------------------


def test_parse_returns_soup(parser: HTMLParser) -> None:
    dom = parser.parse("<p id='x'>hi</p>")
    assert isinstance(dom, BeautifulSoup)
    assert dom.find("p")["id"] == "x"


def test_parse_element_finds_first_element(button_tag: Tag) -> None:
    assert button_tag is not None
    assert button_tag.name == "button"


def test_parse_element_without_elements(parser: HTMLParser) -> None:
    assert parser.parse_element("just text") is None


def test_attributes_of(parser: HTMLParser, button_tag: Tag) -> None:
    attrs = parser.attributes_of(button_tag)
    assert isinstance(attrs, AttributeMap)
    assert attrs == {"class": "btn primary", "disabled": True, "data-id": "42"}
    assert attrs.get_as_array("class") == ["btn", "primary"]


def test_serialized_map_survives_html5lib(parser: HTMLParser) -> None:
    attrs = AttributeMap({"id": "app", "class": "btn primary", "hidden": True, "lang": "en"})
    tag = parser.parse_element(f"<div {attrs.serialize()}></div>")
    assert parser.attributes_of(tag) == attrs


def test_create_element(parser: HTMLParser) -> None:
    tag = parser.create_element("input", 'type="checkbox" checked')
    assert tag.name == "input"
    assert dict(tag.attrs) == {"type": "checkbox", "checked": ""}


def test_create_element_omits_false_flags(parser: HTMLParser) -> None:
    tag = parser.create_element("input", {"hidden": False, "name": "q"})
    assert dict(tag.attrs) == {"name": "q"}


def test_apply_updates_and_removes(parser: HTMLParser, button_tag: Tag) -> None:
    parser.apply(button_tag, AttributeMap({"disabled": False, "type": "submit"}))
    assert "disabled" not in button_tag.attrs
    assert button_tag["type"] == "submit"
    assert button_tag["data-id"] == "42"


def test_apply_replace(parser: HTMLParser, button_tag: Tag) -> None:
    parser.apply(button_tag, {"role": "tab"}, replace=True)
    assert dict(button_tag.attrs) == {"role": "tab"}


def test_render(parser: HTMLParser) -> None:
    assert parser.render("button", 'class="btn" disabled') == '<button class="btn" disabled>'
    assert parser.render("br") == "<br>"
