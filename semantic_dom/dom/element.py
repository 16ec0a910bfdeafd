"""
Element implementation for the semantic DOM.
This module implements element nodes in their four standard shapes:
block or inline, container or void.
"""

from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Set, Tuple, Union

from ..catalog import LayoutKind
from .attr import Attr
from .node import Node, NodeKind, NodeType

AttributeSource = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


class Element(Node):
    """
    Element node implementation for the semantic DOM.

    Holds a lowercase tag name and an ordered attribute map. Whether the
    element can own children is decided by the subclass.
    """

    node_type = NodeType.ELEMENT_NODE
    display = LayoutKind.BLOCK

    def __init__(self, tag_name: str):
        """
        Initialize a new Element.

        Args:
            tag_name: Name of the element tag (e.g., "div", "span")
        """
        super().__init__()
        self.tag_name = tag_name.lower()
        self.node_name = self.tag_name.upper()

        # Insertion ordered, one entry per name
        self.attributes: Dict[str, Attr] = {}

    @property
    def id(self) -> str:
        """Get or set the ID of the element."""
        return self.get_attribute('id') or ""

    @id.setter
    def id(self, value: str) -> None:
        self.set_attribute('id', value)

    @property
    def class_name(self) -> str:
        """Get or set the class attribute of the element."""
        return self.get_attribute('class') or ""

    @class_name.setter
    def class_name(self, value: str) -> None:
        self.set_attribute('class', value)

    @property
    def class_list(self) -> Set[str]:
        """Get the set of classes applied to this element."""
        return {cls for cls in self.class_name.split() if cls}

    @property
    def attribute_map(self) -> Dict[str, str]:
        """Get the attributes as a plain name -> value dict, in order."""
        return {name: attr.value for name, attr in self.attributes.items()}

    def has_attribute(self, name: str) -> bool:
        """
        Check if the element has the specified attribute.

        Args:
            name: The attribute name, matched case-insensitively

        Returns:
            True if the attribute exists, False otherwise
        """
        return self._find_attribute(name) is not None

    def get_attribute(self, name: str) -> Optional[str]:
        """
        Get the value of an attribute.

        An exact name match wins over a case-insensitive one.

        Args:
            name: The attribute name

        Returns:
            The attribute value, or None if the attribute doesn't exist
        """
        attr = self._find_attribute(name)
        return attr.value if attr is not None else None

    def set_attribute(self, name: str, value: str) -> None:
        """
        Set an attribute value.

        The name is stored as given. An existing attribute with exactly the
        same name keeps its position and takes the new value.

        Args:
            name: The attribute name
            value: The attribute value
        """
        attr = Attr(name, value, self)
        if attr.name in self.attributes:
            self.attributes[attr.name].value = attr.value
        else:
            self.attributes[attr.name] = attr

    def add_attributes(self, attributes: AttributeSource) -> None:
        """
        Set several attributes at once.

        Args:
            attributes: A mapping or an iterable of (name, value) pairs;
                later duplicates overwrite earlier ones
        """
        items = attributes.items() if isinstance(attributes, Mapping) else attributes
        for name, value in items:
            self.set_attribute(name, value)

    def remove_attribute(self, name: str) -> None:
        """
        Remove an attribute.

        Args:
            name: The attribute name, matched like get_attribute
        """
        attr = self._find_attribute(name)
        if attr is not None:
            del self.attributes[attr.name]
            attr.owner_element = None

    def has_attributes(self) -> bool:
        """Check if the element has any attributes."""
        return bool(self.attributes)

    def _find_attribute(self, name: str) -> Optional[Attr]:
        attr = self.attributes.get(name)
        if attr is not None:
            return attr
        name_lower = name.lower()
        for candidate in self.attributes.values():
            if candidate.name.lower() == name_lower:
                return candidate
        return None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.tag_name} {self.attribute_map}>"


class ContainerElement(Element):
    """
    Element that owns an ordered list of child nodes.
    """

    is_container = True

    def __init__(self, tag_name: str):
        super().__init__(tag_name)
        self.child_nodes: List[Node] = []

    @property
    def children(self) -> List[Element]:
        """Get a list of child elements."""
        return [child for child in self.child_nodes if isinstance(child, Element)]

    @property
    def first_child(self) -> Optional[Node]:
        return self.child_nodes[0] if self.child_nodes else None

    @property
    def last_child(self) -> Optional[Node]:
        return self.child_nodes[-1] if self.child_nodes else None

    def append_child(self, child: Node) -> Node:
        """
        Append a child node to this node.

        Args:
            child: The node to append

        Returns:
            The appended node
        """
        # If child already has a parent, remove it first
        if child.parent_node is not None:
            child.parent_node.remove_child(child)

        child.parent_node = self
        self.child_nodes.append(child)
        return child

    def add_content(self, *children: Optional[Node]) -> None:
        """Append each non-None node in order."""
        for child in children:
            if child is not None:
                self.append_child(child)

    def insert_before(self, new_child: Node, reference_child: Optional[Node] = None) -> Node:
        """
        Insert a node before a reference node.

        Args:
            new_child: The node to insert
            reference_child: The reference node to insert before, or None to append

        Returns:
            The inserted node
        """
        if reference_child is None:
            return self.append_child(new_child)

        if reference_child not in self.child_nodes:
            raise ValueError("Reference child not found in child nodes")

        if new_child.parent_node is not None:
            new_child.parent_node.remove_child(new_child)

        new_child.parent_node = self
        self.child_nodes.insert(self.child_nodes.index(reference_child), new_child)
        return new_child

    def remove_child(self, child: Node) -> Node:
        """
        Remove a child node from this node.

        Args:
            child: The node to remove

        Returns:
            The removed node
        """
        for index, existing in enumerate(self.child_nodes):
            if existing is child:
                del self.child_nodes[index]
                child.parent_node = None
                return child
        raise ValueError("Child not found in child nodes")

    def has_child_nodes(self) -> bool:
        """Check if this node has any child nodes."""
        return len(self.child_nodes) > 0

    def iter_descendants(self) -> Iterator[Node]:
        """Yield every descendant node in document order."""
        for child in self.child_nodes:
            yield child
            if isinstance(child, ContainerElement):
                yield from child.iter_descendants()

    def get_elements_by_tag_name(self, tag_name: str) -> List[Element]:
        """
        Get all descendant elements with the given tag name.

        Args:
            tag_name: The tag name to match (case-insensitive), or "*"

        Returns:
            List of matching elements in document order
        """
        tag_name_lower = tag_name.lower()
        match_all = tag_name == "*"
        return [
            node for node in self.iter_descendants()
            if isinstance(node, Element) and (match_all or node.tag_name == tag_name_lower)
        ]

    @property
    def text_content(self) -> str:
        """
        Get the text content of this element and its descendants.

        Text nodes are trimmed on conversion, so pieces are joined with a
        single space.
        """
        parts = (child.text_content for child in self.child_nodes)
        return " ".join(part for part in parts if part)


class VoidElement(Element):
    """
    Element that never owns children.
    """


class BlockContainerElement(ContainerElement):
    """Block-level element with children, e.g. <div> or <p>."""
    kind = NodeKind.BLOCK_CONTAINER
    display = LayoutKind.BLOCK


class InlineContainerElement(ContainerElement):
    """Inline element with children, e.g. <span> or <a>."""
    kind = NodeKind.INLINE_CONTAINER
    display = LayoutKind.INLINE


class BlockVoidElement(VoidElement):
    """Block-level void element, e.g. <hr> or <meta>."""
    kind = NodeKind.BLOCK_VOID
    display = LayoutKind.BLOCK


class InlineVoidElement(VoidElement):
    """Inline void element, e.g. <img> or <br>."""
    kind = NodeKind.INLINE_VOID
    display = LayoutKind.INLINE
