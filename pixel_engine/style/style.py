"""
Style resolution.
This module matches stylesheet rules against document elements and builds
the styled tree consumed by layout.
"""

import logging
from enum import Enum
from typing import Dict, List, Optional, Tuple

from ..css import Keyword, Rule, SimpleSelector, Specificity, Stylesheet, Value
from ..dom import Element, Node

logger = logging.getLogger(__name__)

PropertyMap = Dict[str, Value]
MatchedRule = Tuple[Specificity, Rule]


class Display(Enum):
    """Resolved values of the ``display`` property."""
    INLINE = "inline"
    BLOCK = "block"
    NONE = "none"


class StyledNode:
    """
    A document node paired with its cascaded property values.

    Children mirror the document node's children one to one.
    """

    def __init__(self, node: Node, specified_values: PropertyMap, children: List['StyledNode']):
        self.node = node
        self.specified_values = specified_values
        self.children = children

    def value(self, name: str) -> Optional[Value]:
        """
        Get the value of a property.

        Args:
            name: Property name

        Returns:
            The cascaded value, or None if the property was never declared
        """
        return self.specified_values.get(name)

    def display(self) -> Display:
        """Resolve ``display``; anything other than ``block`` or ``none`` is inline."""
        value = self.value('display')
        if isinstance(value, Keyword):
            if value.name == 'block':
                return Display.BLOCK
            if value.name == 'none':
                return Display.NONE
        return Display.INLINE

    def lookup(self, name: str, fallback_name: str, default: Value) -> Value:
        """
        Get a property value, falling back to a shorthand property and then a default.

        Args:
            name: Property name, e.g. ``margin-left``
            fallback_name: Shorthand consulted when ``name`` is absent, e.g. ``margin``
            default: Value used when neither is present

        Returns:
            The resolved value
        """
        value = self.value(name)
        if value is None:
            value = self.value(fallback_name)
        if value is None:
            value = default
        return value

    def __repr__(self):
        return f"StyledNode({self.node!r}, {self.specified_values!r})"


def style_tree(root: Node, stylesheet: Stylesheet,
               user_agent: Optional[Stylesheet] = None) -> StyledNode:
    """
    Apply a stylesheet to a document tree.

    Args:
        root: Root document node
        stylesheet: Author stylesheet to cascade
        user_agent: Optional default stylesheet applied beneath the author rules

    Returns:
        Root of the styled tree
    """
    if isinstance(root, Element):
        values = specified_values(root, stylesheet, user_agent)
    else:
        values = {}

    children = [style_tree(child, stylesheet, user_agent) for child in root.child_nodes]
    return StyledNode(root, values, children)


def specified_values(element: Element, stylesheet: Stylesheet,
                     user_agent: Optional[Stylesheet] = None) -> PropertyMap:
    """
    Cascade the declarations of every matching rule for one element.

    Rules are applied in ascending specificity; ``sorted`` is stable, so rules of
    equal specificity apply in stylesheet order and the later one wins. User
    agent rules are applied first, so any author declaration overrides them.
    """
    values: PropertyMap = {}

    if user_agent is not None:
        _cascade(values, matching_rules(element, user_agent))
    _cascade(values, matching_rules(element, stylesheet))

    return values


def _cascade(values: PropertyMap, rules: List[MatchedRule]) -> None:
    for _, rule in sorted(rules, key=lambda matched: matched[0]):
        for declaration in rule.declarations:
            values[declaration.name] = declaration.value


def matching_rules(element: Element, stylesheet: Stylesheet) -> List[MatchedRule]:
    matched = []
    for rule in stylesheet.rules:
        match = match_rule(element, rule)
        if match is not None:
            matched.append(match)
    return matched


def match_rule(element: Element, rule: Rule) -> Optional[MatchedRule]:
    # Selectors are sorted by descending specificity, so the first match is the strongest
    for selector in rule.selectors:
        if matches(element, selector):
            return (selector.specificity(), rule)
    return None


def matches(element: Element, selector: SimpleSelector) -> bool:
    """
    Check whether a simple selector matches an element.

    Args:
        element: The element to check
        selector: The selector to test

    Returns:
        True if tag, id and every class match
    """
    if selector.tag_name is not None and selector.tag_name != element.tag_name:
        return False

    if selector.id is not None and selector.id != element.id:
        return False

    element_classes = element.classes
    if any(name not in element_classes for name in selector.classes):
        return False

    return True
