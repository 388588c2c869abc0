"""
Node Classifier Module
Classifies BeautifulSoup nodes for the DOM differ.
"""

from enum import Enum
import logging
import re

from bs4 import BeautifulSoup
from bs4.element import Comment, NavigableString, PreformattedString, Tag

from .errors import MalformedNodeError

logger = logging.getLogger(__name__)

# Ids handed out to generated (transcluded) content, e.g. about="#mwt12"
TEMPLATE_ABOUT_RE = re.compile(r'^#mwt\d+$')

# Inter-element whitespace
WHITESPACE_RE = re.compile(r'^[ \t\r\n]*$')

DIFF_MARKER_TAG = 'meta'
DIFF_MARKER_TYPE = 'mw:DiffMarker'


class NodeKind(Enum):
    ELEMENT = 'element'
    TEXT = 'text'
    COMMENT = 'comment'


def node_kind(node) -> NodeKind:
    """Return the kind of a node, rejecting anything the differ cannot handle."""
    if isinstance(node, Tag):
        return NodeKind.ELEMENT
    if isinstance(node, Comment):
        return NodeKind.COMMENT
    # Doctype, CData, Declaration and ProcessingInstruction are all
    # preformatted strings; only comments are allowed through.
    if isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
        return NodeKind.TEXT
    logger.error(f"Unhandled node type {type(node).__name__}")
    raise MalformedNodeError(f"Unhandled node type {type(node).__name__}")


def node_name(node) -> str:
    kind = node_kind(node)
    if kind is NodeKind.ELEMENT:
        return node.name
    return '#' + kind.value


def first_child(node):
    """First child of an element, None for text and comment nodes."""
    if isinstance(node, Tag) and node.contents:
        return node.contents[0]
    return None


def outer_html(node) -> str:
    """Render a node for trace output."""
    if isinstance(node, Tag):
        return str(node)
    return repr(str(node))


def owner_document(node) -> BeautifulSoup:
    """Find the document a node belongs to, or a fresh one to create tags with."""
    if isinstance(node, BeautifulSoup):
        return node
    for parent in node.parents:
        if isinstance(parent, BeautifulSoup):
            return parent
    return BeautifulSoup('', 'html.parser')


def is_diff_marker(node, marker_tag: str = DIFF_MARKER_TAG,
                   marker_type: str = DIFF_MARKER_TYPE) -> bool:
    """Check whether a node is a deletion placeholder inserted by the differ."""
    if not isinstance(node, Tag) or node.name != marker_tag:
        return False
    typeof = node.get('typeof') or ''
    if isinstance(typeof, list):
        typeof = ' '.join(typeof)
    return marker_type in typeof.split()


def is_inter_element_whitespace(node) -> bool:
    return node_kind(node) is NodeKind.TEXT and WHITESPACE_RE.match(str(node)) is not None


def is_content_node(node) -> bool:
    """Nodes whose presence matters when looking ahead for insertions/deletions."""
    kind = node_kind(node)
    if kind is NodeKind.COMMENT:
        return False
    if kind is NodeKind.TEXT:
        return not is_inter_element_whitespace(node)
    return not is_diff_marker(node)


def is_template_node(node) -> bool:
    """Roots of generated content, recognised by their about="#mwtN" id."""
    if not isinstance(node, Tag):
        return False
    about = node.get('about')
    return isinstance(about, str) and TEMPLATE_ABOUT_RE.match(about) is not None
