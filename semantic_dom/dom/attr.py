"""
Attr implementation for the semantic DOM.
"""

from typing import Optional


class Attr:
    """
    Attribute of an Element node.

    The name is kept exactly as given, so camelCase SVG and MathML names
    such as viewBox survive; the value is always a string.
    """

    def __init__(self, name: str, value: str, owner_element: Optional['Element'] = None):
        """
        Initialize a new attribute.

        Args:
            name: The attribute name
            value: The attribute value
            owner_element: The element that owns this attribute
        """
        self.name = name
        self.value = "" if value is None else str(value)
        self.owner_element = owner_element

        # Namespaced attributes such as xlink:href
        self.prefix: Optional[str] = None
        self.local_name = self.name
        if ':' in self.name:
            self.prefix, self.local_name = self.name.split(':', 1)

    def clone(self) -> 'Attr':
        """
        Clone this attribute.

        Returns:
            A detached Attr with the same name and value
        """
        return Attr(self.name, self.value)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Attr):
            return NotImplemented
        return self.name == other.name and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.name, self.value))

    def __repr__(self) -> str:
        return f"Attr({self.name!r}, {self.value!r})"
