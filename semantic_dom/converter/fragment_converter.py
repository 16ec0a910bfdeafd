"""
Entry point for converting markup into semantic DOM nodes.

Usage:
    converter = FragmentConverter()
    converter.register(Callout)
    nodes = converter.convert_fragment('<p>Intro</p><x-callout>Note</x-callout>')
    callouts = converter.all_of_type(page_html, Callout)
"""

import logging
from typing import Iterable, List, Optional, Type, TypeVar, Union

from bs4 import BeautifulSoup, Tag

from ..dom.element import Element
from ..dom.node import Node
from ..dom.semantic import SemanticElement
from ..parser.html_parser import HTMLParser, Markup
from ..registry import ElementConstructor, ElementDefinition, SemanticElementRegistry
from ..utils.config import Config
from ..utils.logging import PerformanceLogger
from .tree_converter import TreeConverter

logger = logging.getLogger(__name__)

E = TypeVar('E', bound=SemanticElement)


class FragmentConverter:
    """
    Parses markup and converts it with a TreeConverter.

    Owns (or shares) a SemanticElementRegistry; register every semantic
    element before the first conversion.
    """

    def __init__(self,
                 registry: Optional[SemanticElementRegistry] = None,
                 config: Optional[Config] = None,
                 parser: Optional[HTMLParser] = None,
                 diagnostics: Optional[logging.Logger] = None):
        """
        Initialize the converter.

        Args:
            registry: Registry to read; a fresh empty one when omitted
            config: Configuration shared with the parser and tree converter
            parser: HTML parser; built from config when omitted
            diagnostics: Logger for dropped-node warnings
        """
        self.config = config or Config()
        self.registry = registry if registry is not None else SemanticElementRegistry()
        self.parser = parser or HTMLParser(self.config)
        self.tree_converter = TreeConverter(self.registry, self.config, diagnostics)
        self._perf = PerformanceLogger(logger, type(self).__name__)

    def register(self, constructor: ElementConstructor,
                 element_class: Optional[Type[SemanticElement]] = None) -> ElementDefinition:
        """Register a semantic element with this converter's registry."""
        return self.registry.register(constructor, element_class)

    def convert_fragment(self, html_fragment: Optional[Markup]) -> List[Node]:
        """
        Convert a body fragment.

        Only the fragment's top-level elements are converted, in document
        order; top-level text and comments are not part of the result.

        Args:
            html_fragment: HTML fragment string

        Returns:
            The converted top-level elements
        """
        with self._perf.measure("convert_fragment"):
            body = self.parser.parse_fragment(html_fragment)
            return self.convert_elements(child for child in body.children if isinstance(child, Tag))

    def convert_element(self, element: Optional[Tag]) -> Optional[Element]:
        """Convert a single parsed element."""
        return self.tree_converter.convert_element(element)

    def convert_elements(self, elements: Iterable[Tag]) -> List[Node]:
        """
        Convert several parsed elements.

        Args:
            elements: bs4 Tags

        Returns:
            Converted elements in input order, None results left out
        """
        fragments = []
        for element in elements:
            converted = self.tree_converter.convert_element(element)
            if converted is not None:
                fragments.append(converted)
        return fragments

    def convert_document(self, document: Union[Markup, BeautifulSoup]) -> Optional[Element]:
        """
        Convert the <body> of a full document.

        Args:
            document: Markup or an already parsed document

        Returns:
            The converted body, normally a block container
        """
        with self._perf.measure("convert_document"):
            soup = self._as_document(document)
            body = soup.body
            if body is None:
                logger.debug("Document has no <body>, converting nothing")
                return None
            return self.tree_converter.convert_element(body)

    def all_of_type(self, document: Union[Markup, BeautifulSoup], element_class: Type[E]) -> List[E]:
        """
        Find and convert every instance of a semantic element.

        Args:
            document: Markup or an already parsed document
            element_class: A registered semantic element class

        Returns:
            Converted instances in document order, nested ones included

        Raises:
            UnregisteredElementError: If element_class was never registered
        """
        tag_name = self.registry.tag_name_for_type(element_class)
        soup = self._as_document(document)

        results = []
        for element in soup.find_all(tag_name):
            converted = self.tree_converter.convert_element(element)
            if isinstance(converted, element_class):
                results.append(converted)

        logger.debug(f"Found {len(results)} <{tag_name}> elements")
        return results

    def _as_document(self, document: Union[Markup, BeautifulSoup, None]) -> BeautifulSoup:
        if isinstance(document, BeautifulSoup):
            return document
        return self.parser.parse_document(document)


def semantic_element_converter(*definitions: ElementDefinition, **kwargs) -> FragmentConverter:
    """
    Build a converter over a fresh registry holding the given definitions.

    Args:
        *definitions: Definitions from ``define(...)``
        **kwargs: Passed to FragmentConverter (config, parser, diagnostics)

    Returns:
        The converter
    """
    return FragmentConverter(SemanticElementRegistry(*definitions), **kwargs)
