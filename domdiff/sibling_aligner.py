"""
Sibling Aligner Module
Walks two sibling lists in lock-step and marks the differences on the new one.
"""

from typing import Any, Callable
import logging

from .change_marker import ChangeKind, ChangeMarker
from .node_classifier import NodeKind, first_child, node_kind, node_name, outer_html
from .node_equality import NodeEquality

logger = logging.getLogger(__name__)


class SiblingAligner:
    """Relaxed recursive tree comparison.

    Sibling lists are compared pair by pair. When a pair differs, a single
    level of look-ahead on the siblings decides between an insertion in the
    new tree, a deletion from the base tree, a modified wrapper (same tag,
    recurse) or a replaced subtree (different tag, no recursion). The
    look-ahead never descends into the siblings' children.

    Insertions are looked for before deletions, so an ambiguous mismatch is
    reported as an insertion.
    """

    def __init__(self, equality: NodeEquality, marker: ChangeMarker,
                 is_content_node: Callable[[Any], bool],
                 is_template_node: Callable[[Any], bool]):
        self.equality = equality
        self.marker = marker
        self.is_content_node = is_content_node
        self.is_template_node = is_template_node

    def _trace(self, node_a, node_b, prefix: str = '') -> None:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"--> A{prefix}: {outer_html(node_a)}")
            logger.debug(f"--> B{prefix}: {outer_html(node_b)}")

    def _mark(self, node, change: ChangeKind) -> None:
        # Text and comment changes are reported to the enclosing element
        # through the return value of align().
        if change is not ChangeKind.DELETED and node_kind(node) is not NodeKind.ELEMENT:
            logger.debug(f"--{change.value} {node_name(node)} reported on parent--")
            return
        self.marker.mark(node, change)

    def _lookahead_new(self, base_node, new_node):
        """Find base_node further along the new siblings; the match or None."""
        logger.debug("--lookahead in new dom--")
        lookahead = new_node.next_sibling
        while lookahead is not None:
            self._trace(base_node, lookahead, 'new')
            if self.is_content_node(lookahead) and self.equality.tree_equals(base_node, lookahead, True):
                return lookahead
            lookahead = lookahead.next_sibling
        return None

    def _lookahead_base(self, base_node, new_node):
        """Find new_node further along the base siblings; the match or None."""
        logger.debug("--lookahead in old dom--")
        lookahead = base_node.next_sibling
        while lookahead is not None:
            self._trace(lookahead, new_node, 'old')
            if self.is_content_node(lookahead) and self.equality.tree_equals(lookahead, new_node, True):
                return lookahead
            lookahead = lookahead.next_sibling
        return None

    def align(self, base_parent, new_parent) -> bool:
        """Diff the children of two nodes, marking changes below new_parent.

        Returns True if any difference was found in the subtree.
        """
        base_node = first_child(base_parent)
        new_node = first_child(new_parent)
        found_diff_overall = False

        while base_node is not None and new_node is not None:
            self._trace(base_node, new_node)

            if not self.equality.tree_equals(base_node, new_node, False):
                logger.debug("-- not equal --")
                orig_node = new_node
                found_diff = False

                if self.is_content_node(base_node):
                    match = self._lookahead_new(base_node, new_node)
                    if match is not None:
                        mark_node = new_node
                        while mark_node is not match:
                            logger.debug("--found diff: inserted--")
                            self._mark(mark_node, ChangeKind.INSERTED)
                            mark_node = mark_node.next_sibling
                        new_node = match
                        found_diff = True

                if not found_diff and self.is_content_node(new_node):
                    match = self._lookahead_base(base_node, new_node)
                    if match is not None:
                        logger.debug("--found diff: deleted--")
                        self._mark(new_node, ChangeKind.DELETED)
                        base_node = match
                        found_diff = True

                if not found_diff:
                    if node_name(orig_node) == node_name(base_node):
                        logger.debug("--found diff: modified-wrapper--")
                        self._mark(orig_node, ChangeKind.MODIFIED_WRAPPER)
                        self.align(base_node, orig_node)
                    else:
                        logger.debug("--found diff: modified--")
                        self._mark(orig_node, ChangeKind.MODIFIED)

                found_diff_overall = True

            elif not self.is_template_node(new_node):
                subtree_differs = self.align(base_node, new_node)
                if subtree_differs:
                    self._mark(new_node, ChangeKind.SUBTREE_CHANGED)
                found_diff_overall = subtree_differs or found_diff_overall

            base_node = base_node.next_sibling
            new_node = new_node.next_sibling

        while new_node is not None:
            logger.debug("--found trailing new node: inserted--")
            self._mark(new_node, ChangeKind.INSERTED)
            found_diff_overall = True
            new_node = new_node.next_sibling

        if base_node is not None:
            logger.debug("--found trailing base nodes: deleted--")
            self._mark(new_parent, ChangeKind.DELETED_CHILD)
            found_diff_overall = True

        return found_diff_overall
