"""
Input side: parsing markup and classifying parsed nodes.
"""

from .html_parser import HTMLParser
from .node_discriminator import NodeCategory, NodeDiscriminator

__all__ = ['HTMLParser', 'NodeCategory', 'NodeDiscriminator']
