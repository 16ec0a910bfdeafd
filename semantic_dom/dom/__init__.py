"""
Semantic DOM.
This package provides the strongly-typed output tree built by the converter.
"""

from .node import Node, NodeKind, NodeType
from .attr import Attr
from .element import (
    Element,
    ContainerElement,
    VoidElement,
    BlockContainerElement,
    InlineContainerElement,
    BlockVoidElement,
    InlineVoidElement,
)
from .semantic import SemanticElement, SemanticContainerElement, SemanticVoidElement
from .text import Text
from .comment import Comment
from .raw_data import RawData
from .element_factory import ElementFactory

__all__ = [
    'Node', 'NodeKind', 'NodeType', 'Attr',
    'Element', 'ContainerElement', 'VoidElement',
    'BlockContainerElement', 'InlineContainerElement', 'BlockVoidElement', 'InlineVoidElement',
    'SemanticElement', 'SemanticContainerElement', 'SemanticVoidElement',
    'Text', 'Comment', 'RawData', 'ElementFactory',
]
