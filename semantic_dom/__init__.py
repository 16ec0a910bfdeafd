"""
semantic-dom - converts parsed HTML into a strongly-typed semantic DOM.
"""

import logging

from semantic_dom.catalog import ElementInfo, LayoutKind, StandardElementCatalog, StructuralKind
from semantic_dom.converter import FragmentConverter, TreeConverter, semantic_element_converter
from semantic_dom.dom import (
    BlockContainerElement,
    BlockVoidElement,
    Comment,
    ContainerElement,
    Element,
    InlineContainerElement,
    InlineVoidElement,
    Node,
    NodeKind,
    RawData,
    SemanticContainerElement,
    SemanticElement,
    SemanticVoidElement,
    Text,
    VoidElement,
)
from semantic_dom.errors import (
    ConfigurationError,
    InvalidElementDefinitionError,
    SemanticDomError,
    UnregisteredElementError,
)
from semantic_dom.registry import ElementDefinition, SemanticElementRegistry, define

# Library logging stays silent unless the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Package information
__version__ = "1.0.0"
__description__ = "Converts parsed HTML into a strongly-typed semantic DOM"

__all__ = [
    'ElementInfo', 'LayoutKind', 'StandardElementCatalog', 'StructuralKind',
    'FragmentConverter', 'TreeConverter', 'semantic_element_converter',
    'BlockContainerElement', 'BlockVoidElement', 'Comment', 'ContainerElement', 'Element',
    'InlineContainerElement', 'InlineVoidElement', 'Node', 'NodeKind', 'RawData',
    'SemanticContainerElement', 'SemanticElement', 'SemanticVoidElement', 'Text', 'VoidElement',
    'ConfigurationError', 'InvalidElementDefinitionError', 'SemanticDomError',
    'UnregisteredElementError',
    'ElementDefinition', 'SemanticElementRegistry', 'define',
]
