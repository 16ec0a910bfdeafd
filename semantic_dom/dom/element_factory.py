"""
Factory for the standard node shapes.
"""

import logging
from typing import Optional

from ..catalog import ElementInfo, LayoutKind, StandardElementCatalog, StructuralKind
from .comment import Comment
from .element import (
    BlockContainerElement,
    BlockVoidElement,
    Element,
    InlineContainerElement,
    InlineVoidElement,
)
from .raw_data import RawData
from .text import Text

logger = logging.getLogger(__name__)


class ElementFactory:
    """
    Factory class for creating standard HTML elements and leaf nodes.
    """

    @classmethod
    def create_element(cls, tag_name: str, info: Optional[ElementInfo] = None) -> Element:
        """
        Create an element based on its structural kind and layout.

        Args:
            tag_name: HTML tag name
            info: Classification to use; looked up in the standard catalog
                when omitted, with unknown tags treated as block containers

        Returns:
            One of the four standard element shapes
        """
        if info is None:
            info = StandardElementCatalog.resolve(tag_name)

        structural, layout = info.structural, info.layout

        if StandardElementCatalog.is_container_like(structural):
            if layout == LayoutKind.BLOCK:
                return cls.block_container(tag_name)
            elif layout in (LayoutKind.INLINE, LayoutKind.INLINE_BLOCK):
                return cls.inline_container(tag_name)
            logger.debug(f"Unexpected layout {layout!r} for <{tag_name}>, using block container")
            return cls.block_container(tag_name)

        elif structural == StructuralKind.VOID:
            if layout == LayoutKind.BLOCK:
                return cls.block_void(tag_name)
            elif layout in (LayoutKind.INLINE, LayoutKind.INLINE_BLOCK):
                return cls.inline_void(tag_name)
            logger.debug(f"Unexpected layout {layout!r} for void <{tag_name}>, using inline void")
            return cls.inline_void(tag_name)

        # Default
        logger.debug(f"Unexpected structural kind {structural!r} for <{tag_name}>, using block container")
        return cls.block_container(tag_name)

    @staticmethod
    def block_container(tag_name: str) -> BlockContainerElement:
        return BlockContainerElement(tag_name)

    @staticmethod
    def inline_container(tag_name: str) -> InlineContainerElement:
        return InlineContainerElement(tag_name)

    @staticmethod
    def block_void(tag_name: str) -> BlockVoidElement:
        return BlockVoidElement(tag_name)

    @staticmethod
    def inline_void(tag_name: str) -> InlineVoidElement:
        return InlineVoidElement(tag_name)

    @staticmethod
    def create_text(data: str) -> Text:
        return Text(data)

    @staticmethod
    def create_comment(data: str) -> Comment:
        return Comment(data)

    @staticmethod
    def create_raw_data(data: str) -> RawData:
        return RawData(data)
