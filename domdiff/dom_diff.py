"""
DOM Diff Module
Compares a base and a new document tree and returns an annotated copy of the
new tree for the selective serializer.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple
import copy
import logging

from bs4 import BeautifulSoup

from .attribute_comparator import AttributeComparator
from .change_marker import ChangeKind, ChangeMarker
from .config import DiffConfig
from .html_parser import HTMLParser
from .node_classifier import NodeKind, node_kind, outer_html
from .node_equality import NodeEquality
from .sibling_aligner import SiblingAligner

logger = logging.getLogger(__name__)


def clone_tree(node):
    """Deep copy a tree without touching the original."""
    if isinstance(node, BeautifulSoup):
        # copy.copy() of a BeautifulSoup object re-parses its markup, which
        # can merge text nodes; copy the children one by one instead.
        clone = BeautifulSoup('', 'html.parser')
        for child in node.contents:
            clone.append(copy.copy(child))
        return clone
    return copy.copy(node)


@dataclass
class DiffResult:
    is_changed: bool
    annotated_tree: Any
    marker: ChangeMarker

    @property
    def is_empty(self) -> bool:
        return not self.is_changed

    def changes(self) -> List[Tuple[Any, ChangeKind]]:
        """Marked elements in document order, placeholders reported as deletions."""
        root = self.annotated_tree
        if node_kind(root) is not NodeKind.ELEMENT:
            return []
        result = []
        for element in [root] + root.find_all(True):
            if self.marker.is_placeholder(element):
                result.append((element, ChangeKind.DELETED))
                continue
            change = self.marker.get_mark(element)
            if change is not None:
                result.append((element, change))
        return result

    def summary(self) -> Dict[str, int]:
        counts = Counter(change.value for _, change in self.changes())
        return {kind.value: counts.get(kind.value, 0) for kind in ChangeKind}

    def to_dict(self) -> Dict:
        return {
            'is_changed': self.is_changed,
            'changes': self.summary(),
        }

    def to_html(self) -> str:
        return str(self.annotated_tree)


class DOMDiff:
    """Diff two DOMs and mark the changes on a copy of the new one."""

    def __init__(self, config: Optional[DiffConfig] = None):
        self.config = config or DiffConfig()
        self.marker = ChangeMarker(self.config)
        self.equality = NodeEquality(AttributeComparator(self.config.ignored_attributes))
        self.aligner = SiblingAligner(
            self.equality,
            self.marker,
            self.config.is_content_node,
            self.config.is_template_node,
        )

    def diff(self, base_root, new_root) -> DiffResult:
        """Diff new_root against base_root.

        Neither input is modified. The result holds an annotated copy of
        new_root and whether any change was found.
        """
        logger.info("Starting DOM diff")
        work_root = clone_tree(new_root)
        # Marks from an earlier cycle have been consumed already
        self.marker.clear(work_root)

        # Quick check on the roots themselves
        if not self.equality.tree_equals(base_root, work_root, False):
            logger.debug("Root nodes differ")
            if node_kind(work_root) is NodeKind.ELEMENT:
                self.marker.mark(work_root, ChangeKind.MODIFIED)
            return DiffResult(True, work_root, self.marker)

        found_change = self.aligner.align(base_root, work_root)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"ORIG:\n{outer_html(base_root)}")
            logger.debug(f"NEW :\n{outer_html(work_root)}")
        logger.info(f"DOM diff complete, changes found: {found_change}")
        return DiffResult(found_change, work_root, self.marker)

    def diff_html(self, base_html: str, new_html: str) -> DiffResult:
        """Parse two HTML strings and diff their roots."""
        parser = HTMLParser()
        base_root = parser.get_root(parser.parse(base_html))
        new_root = parser.get_root(parser.parse(new_html))
        return self.diff(base_root, new_root)
