"""
Attribute DOM types.
This package provides the Attr node and the ordered AttributeMap built from it.
"""

from .attr import Attr, AttrKind
from .attribute_map import AttributeMap, make

__all__ = ['Attr', 'AttrKind', 'AttributeMap', 'make']
