"""Unit tests for FragmentConverter."""

import logging
from concurrent.futures import ThreadPoolExecutor

import pytest
from bs4 import BeautifulSoup

from semantic_dom import (
    BlockContainerElement,
    BlockVoidElement,
    FragmentConverter,
    InlineContainerElement,
    NodeKind,
    SemanticElementRegistry,
    UnregisteredElementError,
    define,
    semantic_element_converter,
)
from semantic_dom.parser import HTMLParser
from semantic_dom.utils.config import Config


class TestConvertFragment:
    """Test cases for convert_fragment."""

    def test_whitespace_only_paragraph_has_no_children(self, converter):
        nodes = converter.convert_fragment("<p>   </p>")

        assert len(nodes) == 1
        assert type(nodes[0]) is BlockContainerElement
        assert nodes[0].tag_name == 'p'
        assert nodes[0].child_nodes == []

    def test_top_level_elements_in_document_order(self, converter):
        nodes = converter.convert_fragment("<h1>Title</h1><p>Body</p><hr><span>x</span>")

        assert [node.tag_name for node in nodes] == ['h1', 'p', 'hr', 'span']
        assert [node.kind for node in nodes] == [
            NodeKind.BLOCK_CONTAINER, NodeKind.BLOCK_CONTAINER,
            NodeKind.BLOCK_VOID, NodeKind.INLINE_CONTAINER,
        ]

    def test_top_level_text_and_comments_are_not_collected(self, converter):
        nodes = converter.convert_fragment("hello <!-- c --><b>x</b> world")

        assert [node.tag_name for node in nodes] == ['b']

    def test_head_only_tags_stay_in_the_fragment(self, converter):
        nodes = converter.convert_fragment("<title>T</title><meta charset='utf-8'><p>x</p>")

        assert [node.tag_name for node in nodes] == ['title', 'meta', 'p']
        assert type(nodes[1]) is BlockVoidElement

    def test_registered_elements_in_fragment(self, converter, callout_class):
        nodes = converter.convert_fragment(
            '<p>Intro</p><x-callout class="warn">Careful <em>now</em></x-callout>'
        )

        assert isinstance(nodes[1], callout_class)
        assert nodes[1].get_attribute('class') == 'warn'
        assert nodes[1].text_content == 'Careful now'

    def test_svg_attribute_case_is_preserved(self, converter):
        nodes = converter.convert_fragment('<svg viewBox="0 0 10 10" preserveAspectRatio="none"></svg>')

        assert nodes[0].attribute_map == {'viewBox': '0 0 10 10', 'preserveAspectRatio': 'none'}

    def test_mixed_fragment_ordering(self, custom_class):
        converter = FragmentConverter()
        converter.register(custom_class)

        div = converter.convert_fragment("<div>a<custom></custom>b</div>")[0]

        assert [child.kind for child in div.child_nodes] == [
            NodeKind.TEXT, NodeKind.CUSTOM_CONTAINER, NodeKind.TEXT,
        ]

    def test_register_through_converter_uses_its_registry(self, custom_class):
        registry = SemanticElementRegistry()
        converter = FragmentConverter(registry)

        definition = converter.register(custom_class)

        assert registry.lookup('custom') is definition

    @pytest.mark.parametrize("markup", ["", None, "   ", "just text"])
    def test_empty_results(self, converter, markup):
        assert converter.convert_fragment(markup) == []

    def test_bytes_with_bom(self, converter):
        nodes = converter.convert_fragment("\ufeff<p>caf\u00e9</p>".encode("utf-8"))

        assert [node.tag_name for node in nodes] == ['p']
        assert nodes[0].text_content == "caf\u00e9"

    def test_malformed_markup_degrades_without_error(self, converter):
        nodes = converter.convert_fragment("<div><p>unclosed<span>deep</div><img>text</img>")

        assert [node.tag_name for node in nodes] == ['div', 'img']
        assert not hasattr(nodes[1], 'child_nodes')

    def test_unregistered_converter_uses_standard_mapping(self, callout_class):
        registered = FragmentConverter()
        registered.register(callout_class)
        plain = FragmentConverter()

        markup = "<x-callout>a</x-callout>"

        assert isinstance(registered.convert_fragment(markup)[0], callout_class)
        assert type(plain.convert_fragment(markup)[0]) is BlockContainerElement

    def test_html_parser_features(self):
        config = Config(overrides={"parser.features": "html.parser"})
        converter = FragmentConverter(config=config)

        nodes = converter.convert_fragment("<p>a</p><span>b</span>")

        assert [node.tag_name for node in nodes] == ['p', 'span']
        assert type(nodes[1]) is InlineContainerElement

    def test_unavailable_parser_falls_back(self, caplog):
        config = Config(overrides={"parser.features": "no-such-parser"})
        converter = FragmentConverter(config=config)

        with caplog.at_level(logging.WARNING):
            nodes = converter.convert_fragment("<p>a</p>")

        assert [node.tag_name for node in nodes] == ['p']
        assert any("falling back" in record.getMessage() for record in caplog.records)


class TestConvertElements:
    """Test cases for convert_element, convert_elements and convert_document."""

    def test_convert_element_none(self, converter):
        assert converter.convert_element(None) is None

    def test_convert_elements(self, converter):
        body = BeautifulSoup("<p>a</p><div>b</div>", "html5lib").body

        nodes = converter.convert_elements(body.find_all(True, recursive=False))

        assert [node.tag_name for node in nodes] == ['p', 'div']

    def test_convert_document_markup(self, converter):
        body = converter.convert_document(
            "<!DOCTYPE html><html><head><title>T</title></head>"
            "<body class='page'><div>a</div></body></html>"
        )

        assert type(body) is BlockContainerElement
        assert body.tag_name == 'body'
        assert body.get_attribute('class') == 'page'
        assert [child.tag_name for child in body.children] == ['div']

    def test_convert_document_parsed(self, converter):
        soup = BeautifulSoup("<p>x</p>", "html5lib")

        body = converter.convert_document(soup)

        assert body.children[0].tag_name == 'p'


class TestAllOfType:
    """Test cases for all_of_type."""

    def test_finds_every_instance(self, converter, callout_class):
        markup = (
            "<div><x-callout id='a'>One<x-callout id='b'>Two</x-callout></x-callout></div>"
            "<p><x-callout id='c'>Three</x-callout></p>"
        )

        found = converter.all_of_type(markup, callout_class)

        assert [element.id for element in found] == ['a', 'b', 'c']
        assert all(isinstance(element, callout_class) for element in found)
        assert isinstance(found[0].child_nodes[1], callout_class)

    def test_accepts_parsed_document(self, converter, badge_class):
        soup = BeautifulSoup("<p><x-badge id='x'></x-badge></p>", "html5lib")

        found = converter.all_of_type(soup, badge_class)

        assert [element.id for element in found] == ['x']

    def test_no_matches(self, converter, callout_class):
        assert converter.all_of_type("<p>nothing</p>", callout_class) == []

    def test_unregistered_type_raises(self, converter, custom_class):
        parser_calls = []

        class RecordingParser(HTMLParser):
            def parse_document(self, html_content):
                parser_calls.append(html_content)
                return super().parse_document(html_content)

        converter.parser = RecordingParser()

        with pytest.raises(UnregisteredElementError):
            converter.all_of_type("<custom></custom>", custom_class)

        assert parser_calls == []


class TestSemanticElementConverterFactory:
    """Test cases for semantic_element_converter."""

    def test_builds_converter_from_definitions(self, callout_class, badge_class):
        converter = semantic_element_converter(define(callout_class), define(badge_class))

        nodes = converter.convert_fragment("<x-callout><x-badge></x-badge></x-callout>")

        assert isinstance(nodes[0], callout_class)
        assert isinstance(nodes[0].child_nodes[0], badge_class)
        assert converter.registry.tag_names() == ['x-callout', 'x-badge']

    def test_passes_keyword_arguments(self, callout_class):
        config = Config(overrides={"parser.features": "html.parser"})

        converter = semantic_element_converter(define(callout_class), config=config)

        assert converter.parser.features == "html.parser"


class TestSharedConverter:
    """One converter used from several threads once its registry is populated."""

    def test_concurrent_fragments(self, converter, callout_class, caplog):
        markup = "<p>a</p><x-callout id='c'>b</x-callout>"

        def work(_):
            return converter.convert_fragment(markup)

        with caplog.at_level(logging.WARNING):
            with ThreadPoolExecutor(max_workers=8) as pool:
                results = list(pool.map(work, range(160)))

        assert caplog.records == []
        for nodes in results:
            assert [node.tag_name for node in nodes] == ['p', 'x-callout']
            assert isinstance(nodes[1], callout_class)
            assert nodes[1].id == 'c'
