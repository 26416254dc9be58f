"""
Attr implementation for the attribute map.
This module implements a single HTML attribute holding either a text value
or a boolean presence flag.
"""

from enum import Enum
from typing import Any, Union

AttrValue = Union[str, bool]


class AttrKind(Enum):
    """The two shapes an attribute value can take."""
    FLAG = "flag"
    TEXT = "text"


class Attr:
    """
    Attribute node.

    A FLAG attribute (e.g. ``disabled``) carries a bool, a TEXT attribute
    (e.g. ``class="btn"``) carries a stripped string.
    """

    __slots__ = ('name', 'kind', 'value')

    def __init__(self, name: str, value: Any = True):
        """
        Initialize a new attribute.

        Args:
            name: The attribute name
            value: A bool for flag attributes, anything else is coerced to text
        """
        self.name = name
        if isinstance(value, bool):
            self.kind = AttrKind.FLAG
            self.value: AttrValue = value
        else:
            self.kind = AttrKind.TEXT
            self.value = coerce_text(value)

    @property
    def is_flag(self) -> bool:
        return self.kind is AttrKind.FLAG

    @property
    def is_text(self) -> bool:
        return self.kind is AttrKind.TEXT

    def matches(self, value: Any) -> bool:
        """
        Strict comparison: the kind must agree with the type of ``value``.

        Args:
            value: Value to compare against

        Returns:
            True if both kind and value are equal
        """
        if isinstance(value, bool):
            return self.is_flag and self.value is value
        if isinstance(value, str):
            return self.is_text and self.value == value
        return False

    def to_html(self) -> str:
        """
        Render this attribute as an HTML token.

        Returns:
            ``name`` for a true flag, ``""`` for a false flag, ``name="value"`` for text
        """
        if self.is_flag:
            return self.name if self.value else ""
        return f'{self.name}="{self.value}"'

    def clone(self) -> 'Attr':
        """
        Clone this attribute.

        Returns:
            A new Attr instance with the same name and value
        """
        return Attr(self.name, self.value)

    def __repr__(self) -> str:
        return f"Attr({self.name!r}, {self.value!r})"


def coerce_text(value: Any) -> str:
    """Convert a non-boolean value to stripped attribute text."""
    if value is None:
        return ""
    return str(value).strip()
