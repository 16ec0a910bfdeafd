"""
HTML parser implementation.
This module turns markup into the BeautifulSoup tree the converter reads.
"""

import logging
from typing import Optional, Union

from bs4 import BeautifulSoup, Tag

from ..utils.config import Config

logger = logging.getLogger(__name__)

Markup = Union[str, bytes]


class HTMLParser:
    """HTML parser using BeautifulSoup with html5lib for full HTML5 support."""

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the HTML parser.

        Args:
            config: Configuration; reads parser.features and
                parser.fallback_features
        """
        self.config = config or Config()
        self.features = self.config.get("parser.features", "html5lib")
        self.fallback_features = self.config.get("parser.fallback_features", "html.parser")
        logger.debug(f"HTML parser initialized (features: {self.features}, "
                     f"fallback: {self.fallback_features})")

    def parse_document(self, html_content: Optional[Markup]) -> BeautifulSoup:
        """
        Parse a complete HTML document.

        Args:
            html_content: HTML content to parse, str or UTF-8 bytes

        Returns:
            BeautifulSoup: Parsed document
        """
        return self._parse(self._decode(html_content))

    def parse_fragment(self, html_content: Optional[Markup]) -> Tag:
        """
        Parse a body fragment.

        Everything in the fragment, including tags that would normally be
        moved into <head>, ends up under the returned body.

        Args:
            html_content: HTML fragment to parse

        Returns:
            Tag: The <body> element holding the fragment's top-level nodes
        """
        dom = self._parse("<body>" + self._decode(html_content))
        body = dom.body
        if body is None:
            logger.debug("Parsed fragment has no <body>, using the document root")
            return dom
        return body

    def _parse(self, html_content: str) -> BeautifulSoup:
        """Parse with the configured tree builder, falling back once."""
        try:
            return BeautifulSoup(html_content, self.features)
        except Exception as e:
            if self.fallback_features in (None, self.features):
                raise
            logger.warning(f"{self.features} parser failed: {e}, "
                           f"falling back to '{self.fallback_features}'")
            return BeautifulSoup(html_content, self.fallback_features)

    def _decode(self, html_content: Optional[Markup]) -> str:
        """
        Normalize input to a string.

        Args:
            html_content: str, bytes or None

        Returns:
            str: Markup without a leading byte order mark
        """
        if html_content is None:
            return ""

        if isinstance(html_content, bytes):
            html_content = html_content.decode('utf-8', errors='replace')

        # Unicode BOM appears as \ufeff at the start of content when incorrectly decoded
        if html_content.startswith('\ufeff'):
            logger.debug("Removing BOM marker from the beginning of HTML content")
            html_content = html_content[1:]

        return html_content
