"""
Node implementation for the semantic DOM.
This module defines the closed set of node kinds produced by the converter
and the base Node class shared by every output node.
"""

from enum import Enum, IntEnum
from typing import Optional


class NodeType(IntEnum):
    """Node types, numbered as in the HTML DOM."""
    ELEMENT_NODE = 1
    TEXT_NODE = 3
    CDATA_SECTION_NODE = 4
    COMMENT_NODE = 8


class NodeKind(Enum):
    """
    The closed set of output variants.

    Every concrete node class fixes exactly one kind, so callers can
    dispatch on ``node.kind`` and cover every case.
    """
    BLOCK_CONTAINER = "block_container"
    INLINE_CONTAINER = "inline_container"
    BLOCK_VOID = "block_void"
    INLINE_VOID = "inline_void"
    CUSTOM_CONTAINER = "custom_container"
    CUSTOM_VOID = "custom_void"
    TEXT = "text"
    COMMENT = "comment"
    RAW_DATA = "raw_data"


class Node:
    """
    Base Node implementation for the semantic DOM.

    Subclasses set ``kind`` and ``node_type`` as class attributes; neither
    changes after construction.
    """

    kind: NodeKind
    node_type: NodeType

    # Only container elements can own children
    is_container = False

    def __init__(self):
        """Initialize a new, detached Node."""
        self.parent_node: Optional['Node'] = None
        self.node_name: str = "#node"

    @property
    def text_content(self) -> str:
        """Get the text carried by this node and its descendants."""
        return ""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.node_name}>"
