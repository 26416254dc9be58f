"""
HTML parser bridge.
This module converts between BeautifulSoup tags (parsed with html5lib) and
AttributeMap instances.
"""

import logging
from typing import Any, Dict, Optional

from bs4 import BeautifulSoup, Tag
import html5lib

from html_attributes.dom.attribute_map import AttributeMap

logger = logging.getLogger(__name__)


class HTMLParser:
    """HTML parser using BeautifulSoup with html5lib for full HTML5 support."""

    def __init__(self):
        """Initialize the HTML parser."""
        logger.debug("HTML parser initialized with html5lib tree builder")

    def parse(self, html_content: str) -> BeautifulSoup:
        """
        Parse HTML content into a DOM tree.

        Args:
            html_content: HTML content to parse

        Returns:
            BeautifulSoup: Parsed DOM
        """
        try:
            return BeautifulSoup(html_content, 'html5lib')
        except Exception as e:
            logger.warning(f"html5lib parser failed: {e}, falling back to 'html.parser'")
            return BeautifulSoup(html_content, 'html.parser')

    def parse_element(self, html_content: str) -> Optional[Tag]:
        """
        Parse an HTML fragment and return its first element.

        Args:
            html_content: HTML fragment, e.g. ``<input disabled>``

        Returns:
            Optional[Tag]: The first element inside <body>, or None
        """
        dom = self.parse(html_content)
        body = dom.body if dom.body is not None else dom
        return body.find(True)

    def attributes_of(self, tag: Tag) -> AttributeMap:
        """
        Read the attributes of a tag.

        Multi-valued attributes such as ``class`` are joined with spaces and
        empty values become boolean flags.

        Args:
            tag: The element to read

        Returns:
            AttributeMap: The tag's attributes in document order
        """
        attributes: Dict[str, Any] = {}
        for name, value in tag.attrs.items():
            if isinstance(value, (list, tuple)):
                value = " ".join(value)
            attributes[name] = value if value != "" else True
        return AttributeMap(attributes)

    def apply(self, tag: Tag, attributes: Any, replace: bool = False) -> Tag:
        """
        Write attributes onto a tag.

        Args:
            tag: The element to modify
            attributes: Anything AttributeMap accepts
            replace: Remove the tag's existing attributes first

        Returns:
            Tag: The modified element
        """
        if replace:
            tag.attrs = {}

        for name, value in AttributeMap(attributes):
            if value is True:
                tag[name] = ""
            elif value is False:
                if name in tag.attrs:
                    del tag[name]
            else:
                tag[name] = value

        return tag

    def create_element(self, tag_name: str, attributes: Any = None) -> Tag:
        """
        Create a new HTML element.

        Args:
            tag_name: Tag name
            attributes: Anything AttributeMap accepts

        Returns:
            Tag: New element
        """
        tag = BeautifulSoup('', 'html5lib').new_tag(tag_name)
        return self.apply(tag, attributes)

    def render(self, tag_name: str, attributes: Any = None) -> str:
        """
        Render a start tag.

        Args:
            tag_name: Tag name
            attributes: Anything AttributeMap accepts

        Returns:
            str: e.g. ``<button class="btn" disabled>``
        """
        serialized = AttributeMap(attributes).serialize()
        return f"<{tag_name} {serialized}>" if serialized else f"<{tag_name}>"
