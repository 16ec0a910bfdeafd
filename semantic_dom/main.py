#!/usr/bin/env python3
"""
semantic-dom command line tool.

Reads HTML from a file or stdin, converts it and prints an outline of the
resulting semantic tree.
"""

import argparse
import logging
import sys
from typing import Iterable, List, Optional, TextIO

from semantic_dom.converter import FragmentConverter
from semantic_dom.dom import ContainerElement, Element, Node, RawData, Text, Comment
from semantic_dom.utils.config import Config
from semantic_dom.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Convert HTML into a semantic DOM outline")
    parser.add_argument('file', nargs='?', default=None, help='HTML file to read (default: stdin)')
    parser.add_argument('--document', action='store_true',
                        help='Treat input as a full document and convert its <body>')
    parser.add_argument('--config', type=str, default=None, help='Path to a JSON config file')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    return parser.parse_args(argv)


def format_outline(nodes: Iterable[Node], indent: int = 0) -> List[str]:
    """
    Render nodes as indented outline lines.

    Args:
        nodes: Converted nodes
        indent: Starting depth

    Returns:
        One line per node
    """
    lines = []
    pad = "  " * indent
    for node in nodes:
        if isinstance(node, Element):
            attrs = "".join(f' {name}="{value}"' for name, value in node.attribute_map.items())
            lines.append(f"{pad}{node.kind.value} <{node.tag_name}{attrs}>")
            if isinstance(node, ContainerElement):
                lines.extend(format_outline(node.child_nodes, indent + 1))
        elif isinstance(node, Text):
            lines.append(f"{pad}text {node.data!r}")
        elif isinstance(node, Comment):
            lines.append(f"{pad}comment {node.data!r}")
        elif isinstance(node, RawData):
            lines.append(f"{pad}raw_data ({node.length} chars)")
    return lines


def main(argv: Optional[List[str]] = None, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> int:
    """Main entry point for the command line tool."""
    args = parse_arguments(argv)

    config = Config(args.config)
    console_level = "DEBUG" if args.debug else config.get("logging.console_level", "WARNING")
    setup_logging(log_file=config.get("logging.log_file"), console_level=console_level)

    if args.file:
        try:
            with open(args.file, 'rb') as f:
                markup = f.read()
        except OSError as e:
            logger.error(f"Cannot read {args.file}: {e}")
            return 1
    else:
        markup = stdin.read()

    converter = FragmentConverter(config=config)
    if args.document:
        body = converter.convert_document(markup)
        nodes = [body] if body is not None else []
    else:
        nodes = converter.convert_fragment(markup)

    for line in format_outline(nodes):
        stdout.write(line + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
