"""
Attribute string parser.
This module splits a flat, space separated list of ``name=value`` and bare
``name`` tokens into an ordered dictionary.
"""

import logging
from typing import Dict, Union

from html_attributes.exceptions import ConfigError, MalformedAttributeToken

logger = logging.getLogger(__name__)

# What to do with a token that has no '=' separator
BARE_TOKEN_FLAG = "flag"
BARE_TOKEN_SKIP = "skip"
BARE_TOKEN_ERROR = "error"
BARE_TOKEN_POLICIES = (BARE_TOKEN_FLAG, BARE_TOKEN_SKIP, BARE_TOKEN_ERROR)

DEFAULT_QUOTE_CHARS = "'\""


class AttributeParser:
    """Parser for single level HTML attribute strings."""

    def __init__(self, bare_tokens: str = BARE_TOKEN_FLAG, quote_chars: str = DEFAULT_QUOTE_CHARS):
        """
        Initialize the parser.

        Args:
            bare_tokens: Policy for tokens without '=' ("flag", "skip" or "error")
            quote_chars: Characters stripped from both ends of a value
        """
        if bare_tokens not in BARE_TOKEN_POLICIES:
            raise ConfigError(
                f"Unknown bare token policy {bare_tokens!r}, "
                f"expected one of {', '.join(BARE_TOKEN_POLICIES)}"
            )
        self.bare_tokens = bare_tokens
        self.quote_chars = quote_chars

    def parse(self, text: str) -> Dict[str, Union[str, bool]]:
        """
        Parse an attribute string.

        Args:
            text: A string of HTML attributes, e.g. ``id="app" disabled``

        Returns:
            Dict[str, Union[str, bool]]: Attribute names mapped to values, in order

        Raises:
            MalformedAttributeToken: If a bare token is found and the policy is "error"
        """
        attributes: Dict[str, Union[str, bool]] = {}
        position = 0
        for token in text.split(' '):
            start = position
            position += len(token) + 1

            # Repeated, leading or trailing spaces
            if not token:
                continue

            name, sep, value = token.partition('=')
            if sep:
                attributes[name] = value.strip(self.quote_chars)
            elif self.bare_tokens == BARE_TOKEN_FLAG:
                attributes[name] = True
            elif self.bare_tokens == BARE_TOKEN_SKIP:
                logger.warning(f"Skipping attribute token without value: {token!r}")
            else:
                raise MalformedAttributeToken(token, start)

        logger.debug(f"Parsed {len(attributes)} attributes from {text!r}")
        return attributes

    def __repr__(self) -> str:
        return f"AttributeParser(bare_tokens={self.bare_tokens!r}, quote_chars={self.quote_chars!r})"


default_parser = AttributeParser()


def parse_attributes(text: str) -> Dict[str, Union[str, bool]]:
    """Parse an attribute string with the default parser."""
    return default_parser.parse(text)
