"""
Base classes for caller-defined semantic elements.

A semantic element declares its tag through the ``tag`` class attribute and
is constructed without arguments:

    class Callout(SemanticContainerElement):
        tag = "x-callout"

Registering ``Callout`` with a SemanticElementRegistry makes the converter
build a Callout for every <x-callout> it meets, in place of the standard
mapping.
"""

from .element import ContainerElement, Element, VoidElement
from .node import NodeKind


class SemanticElement(Element):
    """Element whose tag name is fixed by its class."""

    tag = ""

    def __init__(self):
        if not self.tag:
            raise TypeError(f"{type(self).__name__} does not declare a tag")
        super().__init__(self.tag)


class SemanticContainerElement(SemanticElement, ContainerElement):
    """Semantic element that owns children."""
    kind = NodeKind.CUSTOM_CONTAINER


class SemanticVoidElement(SemanticElement, VoidElement):
    """Semantic element that never owns children."""
    kind = NodeKind.CUSTOM_VOID
