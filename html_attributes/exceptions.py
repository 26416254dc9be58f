"""
Exception types raised by the attribute engine.
"""

from typing import Optional


class AttributeMapError(Exception):
    """Root of all errors raised by this package."""


class MalformedAttributeToken(AttributeMapError, ValueError):
    """
    Raised when an attribute string contains a token that cannot be split
    into a name and a value.
    """

    def __init__(self, token: str, position: Optional[int] = None):
        self.token = token
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Malformed attribute token {token!r}{where}: expected name=value")


class ConfigError(AttributeMapError):
    """Raised when a configuration value is not usable."""
