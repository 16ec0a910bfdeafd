"""Unit tests for the HTMLParser adapter."""

from bs4 import BeautifulSoup, Tag

from semantic_dom.parser import HTMLParser
from semantic_dom.utils.config import Config


class TestHTMLParser:
    """Test cases for HTMLParser."""

    def test_defaults_from_config(self):
        parser = HTMLParser()

        assert parser.features == "html5lib"
        assert parser.fallback_features == "html.parser"

    def test_parse_fragment_returns_body(self):
        body = HTMLParser().parse_fragment("<p>a</p><p>b</p>")

        assert isinstance(body, Tag)
        assert body.name == 'body'
        assert [child.name for child in body.find_all(True, recursive=False)] == ['p', 'p']

    def test_parse_fragment_of_nothing(self):
        body = HTMLParser().parse_fragment(None)

        assert body.name == 'body'
        assert body.contents == []

    def test_parse_document(self):
        soup = HTMLParser().parse_document("<html><head><title>T</title></head><body><p>x</p></body></html>")

        assert isinstance(soup, BeautifulSoup)
        assert soup.head.title.string == 'T'
        assert soup.body.p.string == 'x'

    def test_tag_names_are_lowercased(self):
        body = HTMLParser().parse_fragment("<DIV><SPAN>x</SPAN></DIV>")

        assert body.div.span is not None

    def test_bytes_are_decoded_and_bom_removed(self):
        body = HTMLParser().parse_fragment(b"\xef\xbb\xbf<p>x</p>")

        assert body.contents[0].name == 'p'

    def test_configured_features(self):
        parser = HTMLParser(Config(overrides={"parser.features": "html.parser"}))

        body = parser.parse_fragment("<p>x</p>")

        assert parser.features == "html.parser"
        assert body.p.string == 'x'
