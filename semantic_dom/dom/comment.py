"""
Comment node implementation for the semantic DOM.
"""

from ..catalog import LayoutKind
from .node import Node, NodeKind, NodeType


class Comment(Node):
    """
    Comment node implementation for the semantic DOM.

    Markup gives no way to tell an inline comment from a block one, so every
    comment is laid out as a block.
    """

    kind = NodeKind.COMMENT
    node_type = NodeType.COMMENT_NODE
    display = LayoutKind.BLOCK

    def __init__(self, data: str):
        """
        Initialize a comment node.

        Args:
            data: The comment text
        """
        super().__init__()

        if data is None:
            data = ""

        self.node_name = "#comment"
        self.data = data

    @property
    def length(self) -> int:
        return len(self.data)

    def __repr__(self) -> str:
        return f"<Comment {self.data!r}>"
