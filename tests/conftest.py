"""Root pytest configuration and shared fixtures."""

import pytest
from bs4 import BeautifulSoup

from semantic_dom import (
    FragmentConverter,
    LayoutKind,
    SemanticContainerElement,
    SemanticElementRegistry,
    SemanticVoidElement,
    TreeConverter,
)


class Callout(SemanticContainerElement):
    tag = "x-callout"


class Badge(SemanticVoidElement):
    tag = "x-badge"
    display = LayoutKind.INLINE


class Custom(SemanticContainerElement):
    tag = "custom"


class Paragraph(SemanticContainerElement):
    """Semantic element claiming a standard tag."""
    tag = "p"


@pytest.fixture
def callout_class():
    return Callout


@pytest.fixture
def badge_class():
    return Badge


@pytest.fixture
def custom_class():
    return Custom


@pytest.fixture
def paragraph_class():
    return Paragraph


@pytest.fixture
def registry():
    """Registry holding Callout and Badge."""
    registry = SemanticElementRegistry()
    registry.register(Callout)
    registry.register(Badge)
    return registry


@pytest.fixture
def tree_converter(registry):
    return TreeConverter(registry)


@pytest.fixture
def converter(registry):
    return FragmentConverter(registry)


@pytest.fixture
def parse_element():
    """Parse markup with html5lib and return the first element of <body>."""
    def _parse(markup):
        body = BeautifulSoup(markup, "html5lib").body
        return body.find(True, recursive=False)
    return _parse
