"""
AttributeMap implementation.
This module implements an ordered collection of HTML attributes that can be
built from a mapping, an attribute string or another AttributeMap, and
serialized back into an attribute string.
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .attr import Attr, AttrValue
from html_attributes.parser.attr_parser import AttributeParser, default_parser

logger = logging.getLogger(__name__)


class AttributeMap:
    """
    Ordered collection of HTML attributes.

    Names are unique and keep the position of their first insertion. Values
    are either stripped strings or boolean flags. Every mutator returns the
    map itself so calls can be chained::

        AttributeMap.make('id="app"').set('disabled').append('class', 'btn')
    """

    def __init__(self, source: Any = None, parser: Optional[AttributeParser] = None):
        """
        Initialize a new attribute map.

        Args:
            source: A mapping, an attribute string, another AttributeMap, or None
            parser: Parser used for string sources (defaults to the module parser)
        """
        self._attrs: Dict[str, Attr] = {}
        self.parser = parser or default_parser
        self.populate(source)

    @classmethod
    def make(cls, source: Any = None, parser: Optional[AttributeParser] = None) -> 'AttributeMap':
        """Create a new map, for fluent call sites."""
        return cls(source, parser)

    @staticmethod
    def parse(text: str) -> Dict[str, AttrValue]:
        """
        Parse an attribute string with the default parser.

        Args:
            text: A string of HTML attributes

        Returns:
            Dict[str, AttrValue]: Ordered attribute names and values
        """
        return default_parser.parse(text)

    def normalize(self, source: Any) -> Dict[str, Any]:
        """
        Convert any supported input into an ordered dictionary.

        Args:
            source: A mapping, an attribute string or an AttributeMap

        Returns:
            Dict[str, Any]: The attributes found, empty for unsupported input
        """
        if isinstance(source, AttributeMap):
            return source.to_dict()
        if isinstance(source, Mapping):
            return dict(source)
        if isinstance(source, str):
            return self.parser.parse(source)
        if source is not None:
            logger.debug(f"Ignoring unsupported attribute source of type {type(source).__name__}")
        return {}

    # Queries

    def has(self, name: str) -> bool:
        return name in self._attrs

    def get(self, name: str, default: Any = None) -> Any:
        """
        Get an attribute value.

        Args:
            name: The attribute name
            default: Returned when the attribute doesn't exist

        Returns:
            The stored string or bool, or ``default``
        """
        attr = self._attrs.get(name)
        return attr.value if attr is not None else default

    def get_as_array(self, name: str, delimiter: str = ' ') -> List[str]:
        """
        Get a text attribute split on ``delimiter``.

        Args:
            name: The attribute name
            delimiter: The boundary string

        Returns:
            List[str]: The parts, or an empty list for missing and flag attributes
        """
        attr = self._attrs.get(name)
        if attr is None or attr.is_flag:
            return []
        return attr.value.split(delimiter)

    def has_value(self, name: str, value: Any) -> bool:
        """Check that an attribute exists and holds exactly ``value``."""
        attr = self._attrs.get(name)
        return attr is not None and attr.matches(value)

    def contains(self, name: str, substring: str) -> bool:
        """Check that a text attribute contains ``substring``."""
        attr = self._attrs.get(name)
        if attr is None or attr.is_flag:
            return False
        return substring in attr.value

    def count(self) -> int:
        return len(self._attrs)

    def to_dict(self) -> Dict[str, AttrValue]:
        """
        Export the attributes.

        Returns:
            Dict[str, AttrValue]: A copy of the attributes in insertion order
        """
        return {name: attr.value for name, attr in self._attrs.items()}

    all = to_dict

    def items(self) -> List[Tuple[str, AttrValue]]:
        return list(self.to_dict().items())

    def names(self) -> List[str]:
        return list(self._attrs)

    # Mutators

    def set(self, name: str, value: Any = True) -> 'AttributeMap':
        """
        Set an attribute.

        Args:
            name: The attribute name
            value: A bool for flag attributes (default True), anything else is
                stored as stripped text

        Returns:
            AttributeMap: This map
        """
        # Reassigning an existing key keeps its position
        self._attrs[name] = Attr(name, value)
        return self

    def delete(self, name: str) -> 'AttributeMap':
        self._attrs.pop(name, None)
        return self

    def append(self, name: str, value: Any) -> 'AttributeMap':
        """
        Append to a text attribute.

        Args:
            name: The attribute name
            value: Text to add after the existing value

        Returns:
            AttributeMap: This map
        """
        attr = self._attrs.get(name)
        if attr is not None and attr.is_text:
            return self.set(name, f"{attr.value}{value}")
        return self.set(name, value)

    def prepend(self, name: str, value: Any) -> 'AttributeMap':
        """
        Prepend to a text attribute.

        Args:
            name: The attribute name
            value: Text to add before the existing value

        Returns:
            AttributeMap: This map
        """
        attr = self._attrs.get(name)
        if attr is not None and attr.is_text:
            return self.set(name, f"{value}{attr.value}")
        return self.set(name, value)

    def populate(self, source: Any) -> 'AttributeMap':
        """
        Set every attribute found in ``source``.

        Attributes not mentioned in ``source`` are left untouched.

        Args:
            source: A mapping, an attribute string or another AttributeMap

        Returns:
            AttributeMap: This map
        """
        for name, value in self.normalize(source).items():
            self.set(name, value)
        return self

    merge = populate

    # Serialization

    def serialize(self) -> str:
        """
        Render the attributes as an HTML attribute string.

        Returns:
            str: Space separated tokens, empty for an empty map
        """
        return " ".join(token for token in (attr.to_html() for attr in self._attrs.values()) if token)

    to_string = serialize

    def copy(self) -> 'AttributeMap':
        """Return an independent map with cloned attributes and the same parser."""
        duplicate = type(self)(parser=self.parser)
        duplicate._attrs = {name: attr.clone() for name, attr in self._attrs.items()}
        return duplicate

    # JavaScript-style aliases
    getAsArray = get_as_array
    hasValue = has_value
    toArray = to_dict
    toString = serialize

    def __len__(self) -> int:
        return len(self._attrs)

    def __contains__(self, name: object) -> bool:
        return name in self._attrs

    def __iter__(self) -> Iterator[Tuple[str, AttrValue]]:
        return iter(self.items())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AttributeMap):
            return self.to_dict() == other.to_dict()
        if isinstance(other, Mapping):
            return self.to_dict() == dict(other)
        return NotImplemented

    __hash__ = None

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"AttributeMap({self.serialize()!r})"


def make(source: Any = None, parser: Optional[AttributeParser] = None) -> AttributeMap:
    """Create a new AttributeMap."""
    return AttributeMap.make(source, parser)
