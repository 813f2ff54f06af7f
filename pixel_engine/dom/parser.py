"""
HTML front-end.
This module converts markup into the engine's document tree using html5lib.
"""

import logging
import re
from typing import List

import html5lib

from ..errors import ParseError
from .node import Element, Node, Text

logger = logging.getLogger(__name__)

# Standard DOM node type numbers used by the html5lib "dom" tree builder
_ELEMENT_NODE = 1
_TEXT_NODE = 3

# Markup naming any of these is parsed as a whole document, not a fragment
_DOCUMENT_TAG_RE = re.compile(r'<\s*(!doctype|html|head|body)[\s/>]', re.IGNORECASE)


class HTMLParser:
    """HTML parser built on html5lib document and fragment parsing."""

    def __init__(self):
        self._parser = html5lib.HTMLParser(tree=html5lib.treebuilders.getTreeBuilder("dom"))

    def parse(self, html_content: str) -> Node:
        """
        Parse markup into a document tree.

        Markup containing a doctype or an ``html``, ``head`` or ``body`` tag is
        parsed as a full document and rooted at its ``html`` element. Anything
        else is parsed as a fragment: a single top-level node becomes the root
        and several top-level nodes are wrapped in an ``html`` element.

        Args:
            html_content: The markup to parse

        Returns:
            The root node of the document tree

        Raises:
            ParseError: If the markup contains no nodes
        """
        if html_content is None or not html_content.strip():
            raise ParseError("Cannot parse empty HTML content")

        logger.debug(f"Parsing HTML content (first 100 chars): {html_content[:100]}")

        if _DOCUMENT_TAG_RE.search(html_content):
            document = self._parser.parse(html_content)
            return self._convert_node(document.documentElement)

        fragment = self._parser.parseFragment(html_content)

        nodes = self._convert_children(fragment)
        if not nodes:
            raise ParseError("HTML content produced no nodes")

        if len(nodes) == 1:
            return nodes[0]
        return Element("html", {}, nodes)

    def _convert_children(self, parsed) -> List[Node]:
        nodes = []
        for child in parsed.childNodes:
            node = self._convert_node(child)
            if node is not None:
                nodes.append(node)
        return nodes

    def _convert_node(self, parsed):
        if parsed.nodeType == _TEXT_NODE:
            # Whitespace between tags does not produce text leaves
            if not parsed.nodeValue or not parsed.nodeValue.strip():
                return None
            return Text(parsed.nodeValue)

        if parsed.nodeType == _ELEMENT_NODE:
            attributes = {}
            if parsed.attributes is not None:
                for name, value in parsed.attributes.items():
                    attributes[name] = value
            return Element(parsed.tagName.lower(), attributes, self._convert_children(parsed))

        # Comments, processing instructions, etc.
        return None


def parse_html(html_content: str) -> Node:
    """Parse markup into a document tree."""
    return HTMLParser().parse(html_content)
