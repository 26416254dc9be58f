"""
Attribute string parsing.

The BeautifulSoup bridge lives in html_attributes.parser.html_parser.
"""

from .attr_parser import (
    AttributeParser,
    BARE_TOKEN_ERROR,
    BARE_TOKEN_FLAG,
    BARE_TOKEN_POLICIES,
    BARE_TOKEN_SKIP,
    parse_attributes,
)

__all__ = [
    'AttributeParser',
    'BARE_TOKEN_FLAG',
    'BARE_TOKEN_SKIP',
    'BARE_TOKEN_ERROR',
    'BARE_TOKEN_POLICIES',
    'parse_attributes',
]
