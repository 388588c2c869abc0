"""
Attribute Comparator Module
Compares the attribute sets of two elements, ignoring bookkeeping attributes.
"""

from typing import Any, Dict, Iterable
import logging

logger = logging.getLogger(__name__)


class AttributeComparator:
    def __init__(self, ignored_attributes: Iterable[str] = ()):
        self.ignored_attributes = frozenset(ignored_attributes)

    def normalize(self, node) -> Dict[str, Any]:
        """Map attribute names to values, leaving out ignored attributes."""
        return {
            name: value
            for name, value in node.attrs.items()
            if name not in self.ignored_attributes
        }

    def equals(self, node_a, node_b) -> bool:
        """Exact comparison of the non-ignored attributes, regardless of order."""
        attrs_a = self.normalize(node_a)
        attrs_b = self.normalize(node_b)

        if len(attrs_a) != len(attrs_b):
            return False

        for name_a, name_b in zip(sorted(attrs_a), sorted(attrs_b)):
            if name_a != name_b or attrs_a[name_a] != attrs_b[name_b]:
                return False

        return True

    def differences(self, node_a, node_b) -> Dict[str, tuple]:
        """Attributes whose values differ, as name -> (value_a, value_b).

        Missing attributes show up as None on their side. Only used for
        trace output.
        """
        attrs_a = self.normalize(node_a)
        attrs_b = self.normalize(node_b)
        result = {}
        for name in sorted(set(attrs_a) | set(attrs_b)):
            value_a = attrs_a.get(name)
            value_b = attrs_b.get(name)
            if value_a != value_b:
                result[name] = (value_a, value_b)
        return result
