"""
Node Equality Module
Shallow and deep equality of BeautifulSoup nodes.
"""

import logging

from .attribute_comparator import AttributeComparator
from .errors import PayloadTypeError
from .node_classifier import NodeKind, node_kind

logger = logging.getLogger(__name__)


def text_payload(node) -> str:
    """The string value of a text or comment node."""
    # Bugs upstream have let non-string values leak into trees before.
    if not isinstance(node, str):
        logger.error(f"Non-string payload on {type(node).__name__} node")
        raise PayloadTypeError(f"Expected a string payload, got {type(node).__name__}")
    return str(node)


class NodeEquality:
    def __init__(self, attribute_comparator: AttributeComparator):
        self.attribute_comparator = attribute_comparator

    def tree_equals(self, node_a, node_b, deep: bool = False) -> bool:
        """Compare two nodes.

        Shallow comparison looks at the node kind, the tag name and the
        attributes (or the string value of text and comment nodes). Deep
        comparison additionally requires the full ordered child lists to be
        equal.
        """
        kind = node_kind(node_a)
        if kind is not node_kind(node_b):
            return False

        if kind is not NodeKind.ELEMENT:
            return text_payload(node_a) == text_payload(node_b)

        if node_a.name != node_b.name or not self.attribute_comparator.equals(node_a, node_b):
            return False

        if deep:
            if len(node_a.contents) != len(node_b.contents):
                return False
            for child_a, child_b in zip(node_a.contents, node_b.contents):
                if not self.tree_equals(child_a, child_b, deep):
                    return False

        return True
