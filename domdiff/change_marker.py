"""
Change Marker Module
Annotates elements with change information for the selective serializer.
"""

from enum import Enum
from typing import Optional
import json
import logging

from .config import DiffConfig
from .errors import MalformedNodeError, MarkerError
from .node_classifier import NodeKind, is_diff_marker, node_kind, owner_document

logger = logging.getLogger(__name__)


class ChangeKind(str, Enum):
    INSERTED = 'inserted'
    DELETED = 'deleted'
    MODIFIED = 'modified'
    MODIFIED_WRAPPER = 'modified-wrapper'
    SUBTREE_CHANGED = 'subtree-changed'
    DELETED_CHILD = 'deleted-child'


class ChangeMarker:
    def __init__(self, config: Optional[DiffConfig] = None):
        self.config = config or DiffConfig()

    def mark(self, node, change: ChangeKind) -> None:
        """Record a change on a node.

        Deletions leave the node alone and insert a placeholder marker right
        before it. Every other change is written to the diff attribute of the
        element, replacing an earlier mark. Text and comment nodes have no
        attributes to carry a mark and are rejected.
        """
        change = ChangeKind(change)
        if change is ChangeKind.DELETED:
            self.insert_placeholder(node)
            return

        kind = node_kind(node)
        if kind is not NodeKind.ELEMENT:
            logger.error(f"Cannot mark {kind.value} node as {change.value}")
            raise MalformedNodeError(f"Cannot mark {kind.value} node as {change.value}")

        mark = {'diff': [change.value]}
        if self.config.page_id is not None:
            mark['id'] = self.config.page_id
        node[self.config.diff_attribute] = json.dumps(mark, sort_keys=True, separators=(',', ':'))

    def insert_placeholder(self, node):
        """Insert an empty marker element as the previous sibling of node."""
        if node.parent is None:
            logger.error(f"Cannot insert deletion marker before a detached {type(node).__name__}")
            raise MarkerError("Deletion marker needs a node with a parent")

        placeholder = owner_document(node).new_tag(
            self.config.marker_tag,
            attrs={'typeof': self.config.marker_type},
        )
        node.insert_before(placeholder)
        return placeholder

    def get_mark(self, node) -> Optional[ChangeKind]:
        """Read back the change recorded on an element, None if unmarked."""
        if node_kind(node) is not NodeKind.ELEMENT:
            return None
        raw = node.get(self.config.diff_attribute)
        if raw is None:
            return None
        try:
            mark = json.loads(raw)
            return ChangeKind(mark['diff'][-1])
        except (TypeError, ValueError, KeyError, IndexError) as e:
            logger.error(f"Unreadable diff mark {raw!r}: {str(e)}", exc_info=True)
            raise MalformedNodeError(f"Unreadable diff mark {raw!r}") from e

    def is_placeholder(self, node) -> bool:
        return is_diff_marker(node, self.config.marker_tag, self.config.marker_type)

    def clear(self, node) -> None:
        """Remove marks and placeholders left in a tree by an earlier diff.

        Elements matching the placeholder tag and type are reserved for the
        differ: any such element in the tree is dropped, even one that was
        added on purpose, so it never shows up as an insertion.
        """
        if node_kind(node) is not NodeKind.ELEMENT:
            return
        for element in [node] + node.find_all(True):
            if element is not node and self.is_placeholder(element):
                element.decompose()
            elif self.config.diff_attribute in element.attrs:
                del element[self.config.diff_attribute]
