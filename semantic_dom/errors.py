"""Exception hierarchy for semantic-dom.

Conversion itself never raises for odd input; these errors report caller
misconfiguration such as querying an element class that was never
registered.
"""


class SemanticDomError(Exception):
    """Base exception for all semantic-dom errors."""
    pass


class ConfigurationError(SemanticDomError, ValueError):
    """Raised when the converter or registry is used with a bad setup."""
    pass


class UnregisteredElementError(ConfigurationError):
    """Raised when an element class has no registered tag name."""

    def __init__(self, element_class: type):
        super().__init__(
            f"Element class {element_class.__name__} is not registered, register it first"
        )
        self.element_class = element_class


class InvalidElementDefinitionError(ConfigurationError):
    """Raised when a constructor does not produce a semantic element."""

    def __init__(self, constructor, produced):
        name = getattr(constructor, '__name__', repr(constructor))
        super().__init__(
            f"Constructor {name} produced {type(produced).__name__}, "
            f"expected a SemanticContainerElement or SemanticVoidElement subclass"
        )
        self.constructor = constructor
        self.produced = produced
