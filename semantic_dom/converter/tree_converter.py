"""
Recursive conversion of BeautifulSoup trees into semantic DOM trees.

Architecture:
- Registered semantic elements win over the standard catalog
- StandardElementCatalog decides container vs void and block vs inline
- Tag -> one of BlockContainer, InlineContainer, BlockVoid, InlineVoid
- NavigableString -> Text (trimmed, blank dropped), Comment, RawData
- Anything else is dropped with a warning
"""

import logging
from typing import Optional

from bs4 import Tag

from ..catalog import StandardElementCatalog
from ..dom.element import ContainerElement, Element
from ..dom.element_factory import ElementFactory
from ..dom.node import Node
from ..parser.node_discriminator import NodeCategory, NodeDiscriminator
from ..registry import ElementDefinition, SemanticElementRegistry
from ..utils.config import Config

logger = logging.getLogger(__name__)


class TreeConverter:
    """
    Converts parsed input nodes to semantic DOM nodes.

    The converter only reads its registry; several converters may share one
    registry once it is fully populated.
    """

    def __init__(self,
                 registry: Optional[SemanticElementRegistry] = None,
                 config: Optional[Config] = None,
                 diagnostics: Optional[logging.Logger] = None):
        """
        Initialize the converter.

        Args:
            registry: Semantic elements to build in place of standard ones;
                an empty registry when omitted
            config: Configuration; reads converter.report_unknown_nodes
            diagnostics: Logger receiving warnings about dropped input nodes;
                the module logger when omitted
        """
        self.registry = registry if registry is not None else SemanticElementRegistry()
        self.config = config or Config()
        self.diagnostics = diagnostics or logger
        self.report_unknown_nodes = bool(self.config.get("converter.report_unknown_nodes", True))

    def convert_element(self, element: Optional[Tag]) -> Optional[Element]:
        """
        Convert an input element and its subtree.

        Args:
            element: A bs4 Tag, or None

        Returns:
            The converted element, or None when there is no input
        """
        if element is None:
            return None

        tag_name = (element.name or "").lower()

        definition = self.registry.lookup(tag_name)
        if definition is not None:
            return self._create_from_registry(element, definition)

        info = StandardElementCatalog.resolve(tag_name)
        converted = ElementFactory.create_element(tag_name, info)
        self._copy_attributes(element, converted)
        if isinstance(converted, ContainerElement):
            self._convert_child_nodes(element, converted)
        return converted

    def convert_node(self, node) -> Optional[Node]:
        """
        Convert any input node.

        Args:
            node: A bs4 Tag or NavigableString

        Returns:
            The converted node, or None if the node converts to nothing
        """
        if node is None:
            return None

        category = NodeDiscriminator.discriminate(node)

        if category == NodeCategory.ELEMENT:
            return self.convert_element(node)

        elif category == NodeCategory.TEXT:
            text = str(node).strip()
            return ElementFactory.create_text(text) if text else None

        elif category == NodeCategory.COMMENT:
            return ElementFactory.create_comment(str(node))

        elif category == NodeCategory.RAW_DATA:
            data = str(node)
            return ElementFactory.create_raw_data(data) if data else None

        self._report_unknown(node)
        return None

    def _create_from_registry(self, element: Tag, definition: ElementDefinition) -> Element:
        """Build a registered semantic element."""
        converted = definition.create()

        # whether container or void, attributes are always copied
        self._copy_attributes(element, converted)

        if isinstance(converted, ContainerElement):
            self._convert_child_nodes(element, converted)

        return converted

    def _convert_child_nodes(self, element: Tag, container: ContainerElement) -> None:
        for child in element.contents:
            converted = self.convert_node(child)
            if converted is not None:
                container.append_child(converted)

    @staticmethod
    def _copy_attributes(element: Tag, converted: Element) -> None:
        for name, value in element.attrs.items():
            # Multi-valued attributes such as class arrive as lists
            if isinstance(value, (list, tuple)):
                value = " ".join(value)
            converted.set_attribute(name, value)

    def _report_unknown(self, node) -> None:
        if not self.report_unknown_nodes:
            return
        node_type = type(node).__name__
        self.diagnostics.warning(
            f"Unknown input node type {node_type}, skipped",
            extra={"node_type": node_type},
        )
