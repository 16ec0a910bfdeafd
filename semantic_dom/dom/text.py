"""
Text node implementation for the semantic DOM.
"""

from .node import Node, NodeKind, NodeType


class Text(Node):
    """
    Text node implementation for the semantic DOM.

    The converter only creates text nodes for non-blank, trimmed text.
    """

    kind = NodeKind.TEXT
    node_type = NodeType.TEXT_NODE

    def __init__(self, data: str):
        """
        Initialize a text node.

        Args:
            data: The text content
        """
        super().__init__()

        # Ensure data is not None
        if data is None:
            data = ""

        self.node_name = "#text"
        self.data = data

    @property
    def length(self) -> int:
        return len(self.data)

    @property
    def text_content(self) -> str:
        return self.data

    def __repr__(self) -> str:
        return f"<Text {self.data!r}>"
