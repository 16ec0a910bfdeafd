"""
Raw data node implementation for the semantic DOM.
"""

from ..catalog import LayoutKind
from .node import Node, NodeKind, NodeType


class RawData(Node):
    """
    Unparsed character data: CDATA sections and the bodies of raw text
    elements such as <script> and <style>.

    Always laid out as a block; the data is kept verbatim and is not part
    of the element's text content.
    """

    kind = NodeKind.RAW_DATA
    node_type = NodeType.CDATA_SECTION_NODE
    display = LayoutKind.BLOCK

    def __init__(self, data: str):
        super().__init__()
        self.node_name = "#data"
        self.data = data or ""

    @property
    def length(self) -> int:
        return len(self.data)

    def __repr__(self) -> str:
        return f"<RawData {self.data[:40]!r}>"
