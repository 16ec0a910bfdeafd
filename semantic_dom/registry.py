"""
Registry of caller-defined semantic elements.

Usage:
    registry = SemanticElementRegistry()
    registry.register(Callout)
    registry.lookup("x-callout").constructor()
"""

import logging
from typing import Callable, Dict, Iterator, List, Optional, Type

from .dom.element import VoidElement
from .dom.semantic import SemanticContainerElement, SemanticElement, SemanticVoidElement
from .errors import InvalidElementDefinitionError, UnregisteredElementError

logger = logging.getLogger(__name__)

ElementConstructor = Callable[[], SemanticElement]


class ElementDefinition:
    """
    A registered semantic element: how to build it and what it builds.

    The tag name and voidness are read once, from a throwaway instance,
    when the definition is created.
    """

    __slots__ = ('_constructor', '_element_class', '_tag_name', '_void_type')

    def __init__(self, constructor: ElementConstructor,
                 element_class: Optional[Type[SemanticElement]] = None):
        """
        Build a definition by constructing one sample instance.

        Args:
            constructor: Zero-argument factory for the element
            element_class: Class used for reverse lookups; defaults to the
                type of the sample instance

        Raises:
            InvalidElementDefinitionError: If the constructor does not
                produce a semantic container or void element
        """
        sample = constructor()
        if not isinstance(sample, (SemanticContainerElement, SemanticVoidElement)):
            raise InvalidElementDefinitionError(constructor, sample)

        self._constructor = constructor
        self._element_class = element_class or type(sample)
        self._tag_name = sample.tag_name
        self._void_type = isinstance(sample, VoidElement)

    @property
    def constructor(self) -> ElementConstructor:
        return self._constructor

    @property
    def element_class(self) -> Type[SemanticElement]:
        return self._element_class

    @property
    def tag_name(self) -> str:
        return self._tag_name

    @property
    def is_void_type(self) -> bool:
        return self._void_type

    def create(self) -> SemanticElement:
        """Construct a fresh element."""
        return self._constructor()

    def __repr__(self) -> str:
        shape = "void" if self._void_type else "container"
        return f"ElementDefinition({self._tag_name!r}, {self._element_class.__name__}, {shape})"


def define(constructor: ElementConstructor,
           element_class: Optional[Type[SemanticElement]] = None) -> ElementDefinition:
    """Build a standalone ElementDefinition, e.g. to seed a registry."""
    return ElementDefinition(constructor, element_class)


class SemanticElementRegistry:
    """
    Mapping of tag name to ElementDefinition.

    Registries are plain objects owned by the caller; populate one before
    converting and do not mutate it while conversions read from it. Tag names
    are lowercased on both registration and lookup.
    """

    def __init__(self, *definitions: ElementDefinition):
        """
        Initialize the registry.

        Args:
            *definitions: Definitions to add, in order
        """
        self._definitions: Dict[str, ElementDefinition] = {}
        for definition in definitions:
            self.add(definition)

    def register(self, constructor: ElementConstructor,
                 element_class: Optional[Type[SemanticElement]] = None) -> ElementDefinition:
        """
        Register a semantic element constructor.

        The constructor is called once to read the tag name. A later
        registration for the same tag replaces the earlier one.

        Args:
            constructor: Zero-argument factory, usually the element class
            element_class: Class used for reverse lookups

        Returns:
            The stored definition
        """
        return self.add(ElementDefinition(constructor, element_class))

    def add(self, definition: ElementDefinition) -> ElementDefinition:
        """Store a prebuilt definition under its tag name."""
        key = definition.tag_name.lower()
        previous = self._definitions.get(key)
        if previous is not None:
            logger.debug(f"Replacing definition for <{key}>: {previous!r} -> {definition!r}")
        self._definitions[key] = definition
        return definition

    def lookup(self, tag_name: str) -> Optional[ElementDefinition]:
        """
        Get the definition registered for a tag.

        Args:
            tag_name: Tag name, any case

        Returns:
            The definition, or None if the tag is not registered
        """
        if not tag_name:
            return None
        return self._definitions.get(tag_name.lower())

    def tag_name_for_type(self, element_class: Type[SemanticElement]) -> str:
        """
        Find the tag name registered for an element class.

        Args:
            element_class: A registered semantic element class

        Returns:
            The tag name

        Raises:
            UnregisteredElementError: If no definition uses the class
        """
        for definition in self._definitions.values():
            if definition.element_class is element_class:
                return definition.tag_name
        raise UnregisteredElementError(element_class)

    def tag_names(self) -> List[str]:
        return list(self._definitions)

    def __contains__(self, tag_name) -> bool:
        return isinstance(tag_name, str) and tag_name.lower() in self._definitions

    def __iter__(self) -> Iterator[ElementDefinition]:
        return iter(list(self._definitions.values()))

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        return f"SemanticElementRegistry({self.tag_names()})"
