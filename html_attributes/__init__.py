"""
Wink Attributes - ordered HTML attribute maps for Python.
"""

__version__ = "1.0.0"
__author__ = "Wink Browser Team"
__description__ = "Ordered HTML attribute maps with parsing and serialization"

from html_attributes.dom.attr import Attr, AttrKind
from html_attributes.dom.attribute_map import AttributeMap, make
from html_attributes.exceptions import AttributeMapError, ConfigError, MalformedAttributeToken
from html_attributes.parser.attr_parser import AttributeParser, parse_attributes
from html_attributes.parser.html_parser import HTMLParser

__all__ = [
    'Attr',
    'AttrKind',
    'AttributeMap',
    'make',
    'AttributeParser',
    'parse_attributes',
    'HTMLParser',
    'AttributeMapError',
    'MalformedAttributeToken',
    'ConfigError',
]
