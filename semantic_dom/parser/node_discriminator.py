"""
Classification of BeautifulSoup nodes.
"""

from enum import Enum

from bs4.element import (
    CData,
    Comment,
    NavigableString,
    PreformattedString,
    Script,
    Stylesheet,
    Tag,
)

from ..catalog import StandardElementCatalog, StructuralKind


class NodeCategory(Enum):
    """What an input node turns into."""
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"
    RAW_DATA = "raw_data"
    UNKNOWN = "unknown"


class NodeDiscriminator:
    """
    Sorts input nodes into the categories the converter handles.

    Doctypes, processing instructions, declarations and anything that is
    not a bs4 node come back as UNKNOWN; the caller decides how loudly to
    drop them.
    """

    @classmethod
    def discriminate(cls, node) -> NodeCategory:
        """
        Classify a node.

        Args:
            node: A bs4 Tag or NavigableString (or anything else)

        Returns:
            The node's category
        """
        if isinstance(node, Tag):
            return NodeCategory.ELEMENT

        # Comment, CData, Doctype etc. are all NavigableString subclasses
        if isinstance(node, Comment):
            return NodeCategory.COMMENT
        if isinstance(node, (CData, Script, Stylesheet)):
            return NodeCategory.RAW_DATA
        if isinstance(node, PreformattedString):
            return NodeCategory.UNKNOWN

        if isinstance(node, NavigableString):
            if cls._in_raw_text_element(node):
                return NodeCategory.RAW_DATA
            return NodeCategory.TEXT

        return NodeCategory.UNKNOWN

    @staticmethod
    def _in_raw_text_element(node: NavigableString) -> bool:
        """Check whether a string is the body of e.g. <script> or <style>."""
        parent = node.parent
        if parent is None or not parent.name:
            return False
        info = StandardElementCatalog.classify(parent.name)
        return info is not None and info.structural == StructuralKind.RAW_TEXT
