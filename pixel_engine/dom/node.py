"""
Document node implementation.
This module implements the read-only document tree consumed by the style resolver.
"""

from enum import IntEnum
from typing import Dict, List, Optional, Set


class NodeType(IntEnum):
    """Node types, numbered as in the W3C DOM."""
    ELEMENT_NODE = 1
    TEXT_NODE = 3


class Node:
    """
    Base node of the document tree.

    A node has a type and an ordered list of child nodes.
    """

    def __init__(self, node_type: NodeType, children: Optional[List['Node']] = None):
        self.node_type = node_type
        self.child_nodes: List[Node] = list(children) if children else []

    def append_child(self, child: 'Node') -> 'Node':
        """
        Append a child node to this node.

        Args:
            child: The node to append

        Returns:
            The appended node
        """
        self.child_nodes.append(child)
        return child

    @property
    def is_element(self) -> bool:
        return self.node_type == NodeType.ELEMENT_NODE


class Element(Node):
    """
    Element node with a tag name, attributes and children.
    """

    def __init__(self,
                 tag_name: str,
                 attributes: Optional[Dict[str, str]] = None,
                 children: Optional[List[Node]] = None):
        """
        Initialize a new Element.

        Args:
            tag_name: Name of the element tag (e.g., "div", "span")
            attributes: Attribute name to value mapping
            children: Ordered child nodes
        """
        super().__init__(NodeType.ELEMENT_NODE, children)
        self.tag_name = tag_name
        self.attributes: Dict[str, str] = dict(attributes) if attributes else {}

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name)

    def set_attribute(self, name: str, value: str) -> None:
        self.attributes[name] = value

    @property
    def id(self) -> Optional[str]:
        """The ``id`` attribute, or None when absent."""
        return self.attributes.get('id')

    @property
    def classes(self) -> Set[str]:
        """The ``class`` attribute split on whitespace."""
        class_attr = self.attributes.get('class')
        if not class_attr:
            return set()
        return set(class_attr.split())

    def __repr__(self):
        return f"Element({self.tag_name!r}, {self.attributes!r}, {len(self.child_nodes)} children)"


class Text(Node):
    """Text leaf node."""

    def __init__(self, data: str):
        super().__init__(NodeType.TEXT_NODE)
        self.data = data if data is not None else ""

    def __repr__(self):
        return f"Text({self.data!r})"


def text(data: str) -> Text:
    """Create a text leaf."""
    return Text(data)


def elem(tag_name: str, attributes: Optional[Dict[str, str]] = None,
         children: Optional[List[Node]] = None) -> Element:
    """Create an element node."""
    return Element(tag_name, attributes, children)
