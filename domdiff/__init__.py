"""
DOM Diff
Structural diff of two document trees with change markers for selective
serialization.
"""

from .attribute_comparator import AttributeComparator
from .change_marker import ChangeKind, ChangeMarker
from .config import DEFAULT_IGNORED_ATTRIBUTES, DiffConfig, load_config
from .dom_diff import DiffResult, DOMDiff, clone_tree
from .errors import (
    ConfigError,
    DOMDiffError,
    MalformedNodeError,
    MarkerError,
    PayloadTypeError,
)
from .html_parser import HTMLParser
from .node_classifier import NodeKind, is_content_node, is_template_node, node_kind
from .node_equality import NodeEquality
from .sibling_aligner import SiblingAligner

__all__ = [
    'AttributeComparator',
    'ChangeKind',
    'ChangeMarker',
    'ConfigError',
    'DEFAULT_IGNORED_ATTRIBUTES',
    'DiffConfig',
    'DiffResult',
    'DOMDiff',
    'DOMDiffError',
    'HTMLParser',
    'MalformedNodeError',
    'MarkerError',
    'NodeEquality',
    'NodeKind',
    'PayloadTypeError',
    'SiblingAligner',
    'clone_tree',
    'diff',
    'is_content_node',
    'is_template_node',
    'load_config',
    'node_kind',
]


def diff(base_root, new_root, config=None) -> DiffResult:
    """Diff two trees with a one-off DOMDiff."""
    return DOMDiff(config).diff(base_root, new_root)
