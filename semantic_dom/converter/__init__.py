"""
Conversion of parsed HTML into the semantic DOM.
"""

from .tree_converter import TreeConverter
from .fragment_converter import FragmentConverter, semantic_element_converter

__all__ = ['TreeConverter', 'FragmentConverter', 'semantic_element_converter']
