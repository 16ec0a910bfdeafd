"""
Standard HTML element catalog.
This module maps every standard HTML tag name to its structural kind
(container, void, raw text) and its default layout (block, inline).
"""

from enum import Enum
from typing import Dict, FrozenSet, NamedTuple, Optional


class StructuralKind(Enum):
    """How an element relates to its content."""
    CONTAINER = "container"
    VOID = "void"
    RAW_TEXT = "raw_text"
    ESCAPABLE_RAW_TEXT = "escapable_raw_text"


class LayoutKind(Enum):
    """Default layout intent of an element."""
    BLOCK = "block"
    INLINE = "inline"
    INLINE_BLOCK = "inline_block"


class ElementInfo(NamedTuple):
    """Classification of a single tag."""
    structural: StructuralKind
    layout: LayoutKind


# Container-like kinds hold children in the output tree
CONTAINER_LIKE_KINDS: FrozenSet[StructuralKind] = frozenset({
    StructuralKind.CONTAINER,
    StructuralKind.RAW_TEXT,
    StructuralKind.ESCAPABLE_RAW_TEXT,
})

_C = StructuralKind.CONTAINER
_V = StructuralKind.VOID
_R = StructuralKind.RAW_TEXT
_E = StructuralKind.ESCAPABLE_RAW_TEXT

_B = LayoutKind.BLOCK
_I = LayoutKind.INLINE
_IB = LayoutKind.INLINE_BLOCK

STANDARD_ELEMENTS: Dict[str, ElementInfo] = {
    # Document and metadata
    'html': ElementInfo(_C, _B),
    'head': ElementInfo(_C, _B),
    'body': ElementInfo(_C, _B),
    'title': ElementInfo(_E, _B),
    'base': ElementInfo(_V, _B),
    'link': ElementInfo(_V, _B),
    'meta': ElementInfo(_V, _B),
    'style': ElementInfo(_R, _B),
    'script': ElementInfo(_R, _B),
    'noscript': ElementInfo(_C, _B),
    'template': ElementInfo(_C, _B),

    # Sections
    'address': ElementInfo(_C, _B),
    'article': ElementInfo(_C, _B),
    'aside': ElementInfo(_C, _B),
    'footer': ElementInfo(_C, _B),
    'header': ElementInfo(_C, _B),
    'h1': ElementInfo(_C, _B),
    'h2': ElementInfo(_C, _B),
    'h3': ElementInfo(_C, _B),
    'h4': ElementInfo(_C, _B),
    'h5': ElementInfo(_C, _B),
    'h6': ElementInfo(_C, _B),
    'hgroup': ElementInfo(_C, _B),
    'main': ElementInfo(_C, _B),
    'nav': ElementInfo(_C, _B),
    'section': ElementInfo(_C, _B),
    'search': ElementInfo(_C, _B),

    # Grouping content
    'blockquote': ElementInfo(_C, _B),
    'dd': ElementInfo(_C, _B),
    'div': ElementInfo(_C, _B),
    'dl': ElementInfo(_C, _B),
    'dt': ElementInfo(_C, _B),
    'figcaption': ElementInfo(_C, _B),
    'figure': ElementInfo(_C, _B),
    'hr': ElementInfo(_V, _B),
    'li': ElementInfo(_C, _B),
    'menu': ElementInfo(_C, _B),
    'ol': ElementInfo(_C, _B),
    'p': ElementInfo(_C, _B),
    'pre': ElementInfo(_C, _B),
    'ul': ElementInfo(_C, _B),

    # Text-level semantics
    'a': ElementInfo(_C, _I),
    'abbr': ElementInfo(_C, _I),
    'b': ElementInfo(_C, _I),
    'bdi': ElementInfo(_C, _I),
    'bdo': ElementInfo(_C, _I),
    'br': ElementInfo(_V, _I),
    'cite': ElementInfo(_C, _I),
    'code': ElementInfo(_C, _I),
    'data': ElementInfo(_C, _I),
    'dfn': ElementInfo(_C, _I),
    'em': ElementInfo(_C, _I),
    'i': ElementInfo(_C, _I),
    'kbd': ElementInfo(_C, _I),
    'mark': ElementInfo(_C, _I),
    'q': ElementInfo(_C, _I),
    'rp': ElementInfo(_C, _I),
    'rt': ElementInfo(_C, _I),
    'ruby': ElementInfo(_C, _I),
    's': ElementInfo(_C, _I),
    'samp': ElementInfo(_C, _I),
    'small': ElementInfo(_C, _I),
    'span': ElementInfo(_C, _I),
    'strong': ElementInfo(_C, _I),
    'sub': ElementInfo(_C, _I),
    'sup': ElementInfo(_C, _I),
    'time': ElementInfo(_C, _I),
    'u': ElementInfo(_C, _I),
    'var': ElementInfo(_C, _I),
    'wbr': ElementInfo(_V, _I),

    # Edits
    'del': ElementInfo(_C, _I),
    'ins': ElementInfo(_C, _I),

    # Embedded content
    'area': ElementInfo(_V, _I),
    'audio': ElementInfo(_C, _IB),
    'canvas': ElementInfo(_C, _IB),
    'embed': ElementInfo(_V, _IB),
    'iframe': ElementInfo(_C, _IB),
    'img': ElementInfo(_V, _I),
    'map': ElementInfo(_C, _I),
    'math': ElementInfo(_C, _I),
    'object': ElementInfo(_C, _IB),
    'param': ElementInfo(_V, _B),
    'picture': ElementInfo(_C, _I),
    'source': ElementInfo(_V, _B),
    'svg': ElementInfo(_C, _I),
    'track': ElementInfo(_V, _B),
    'video': ElementInfo(_C, _IB),

    # Tables
    'caption': ElementInfo(_C, _B),
    'col': ElementInfo(_V, _B),
    'colgroup': ElementInfo(_C, _B),
    'table': ElementInfo(_C, _B),
    'tbody': ElementInfo(_C, _B),
    'td': ElementInfo(_C, _B),
    'tfoot': ElementInfo(_C, _B),
    'th': ElementInfo(_C, _B),
    'thead': ElementInfo(_C, _B),
    'tr': ElementInfo(_C, _B),

    # Forms
    'button': ElementInfo(_C, _IB),
    'datalist': ElementInfo(_C, _B),
    'fieldset': ElementInfo(_C, _B),
    'form': ElementInfo(_C, _B),
    'input': ElementInfo(_V, _IB),
    'label': ElementInfo(_C, _I),
    'legend': ElementInfo(_C, _B),
    'meter': ElementInfo(_C, _IB),
    'optgroup': ElementInfo(_C, _B),
    'option': ElementInfo(_C, _B),
    'output': ElementInfo(_C, _I),
    'progress': ElementInfo(_C, _IB),
    'select': ElementInfo(_C, _IB),
    'textarea': ElementInfo(_E, _IB),

    # Interactive elements
    'details': ElementInfo(_C, _B),
    'dialog': ElementInfo(_C, _B),
    'summary': ElementInfo(_C, _B),

    # Web components
    'slot': ElementInfo(_C, _I),
}

# Unknown, unregistered tags are most likely custom elements
FALLBACK_ELEMENT = ElementInfo(StructuralKind.CONTAINER, LayoutKind.BLOCK)


class StandardElementCatalog:
    """
    Lookup over the standard HTML element table.

    All methods are pure; the table is never mutated.
    """

    @classmethod
    def classify(cls, tag_name: str) -> Optional[ElementInfo]:
        """
        Classify a standard tag.

        Args:
            tag_name: Tag name, any case

        Returns:
            The tag's ElementInfo, or None for non-standard tags
        """
        if not tag_name:
            return None
        return STANDARD_ELEMENTS.get(tag_name.lower())

    @classmethod
    def resolve(cls, tag_name: str) -> ElementInfo:
        """Classify a tag, treating unknown tags as block containers."""
        info = cls.classify(tag_name)
        return info if info is not None else FALLBACK_ELEMENT

    @classmethod
    def is_standard(cls, tag_name: str) -> bool:
        return cls.classify(tag_name) is not None

    @staticmethod
    def is_container_like(structural: StructuralKind) -> bool:
        return structural in CONTAINER_LIKE_KINDS

    @classmethod
    def tag_names(cls) -> FrozenSet[str]:
        return frozenset(STANDARD_ELEMENTS)
