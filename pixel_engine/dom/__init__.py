"""
Document tree for the rendering engine.
This package provides the node types consumed by style resolution and an html5lib front-end.
"""

from .node import Node, NodeType, Element, Text, text, elem
from .parser import HTMLParser, parse_html

__all__ = [
    'Node', 'NodeType', 'Element', 'Text', 'text', 'elem', 'HTMLParser', 'parse_html'
]
