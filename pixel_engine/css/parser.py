"""
CSS front-end.
This module tokenizes stylesheets with tinycss2 and builds the engine's
selector/declaration structures from the tokens.
"""

import logging
from typing import List

import tinycss2
import tinycss2.color3

from ..errors import ParseError
from .selector import Declaration, Rule, SimpleSelector, Stylesheet, Value
from .values import Color, Keyword, Length, Unit

logger = logging.getLogger(__name__)


class CSSParser:
    """
    CSS parser for simple selectors and single-valued declarations.

    Supported input: rules whose selectors are comma-separated combinations of
    a tag name, ``#id``, ``.class`` and ``*``, with declarations whose value is
    a keyword, a pixel length or a color.
    """

    def parse(self, css_content: str) -> Stylesheet:
        """
        Parse CSS content into a stylesheet.

        Args:
            css_content: CSS content to parse

        Returns:
            Parsed Stylesheet

        Raises:
            ParseError: On syntax the engine does not support
        """
        rules = []
        for node in tinycss2.parse_stylesheet(css_content or "", skip_comments=True, skip_whitespace=True):
            if node.type == 'error':
                raise ParseError(f"Invalid CSS: {node.message}", node.source_line)
            if node.type == 'at-rule':
                raise ParseError(f"Unsupported at-rule @{node.at_keyword}", node.source_line)
            rules.append(self._parse_rule(node))

        logger.debug(f"Parsed stylesheet with {len(rules)} rules")
        return Stylesheet(rules)

    def _parse_rule(self, node) -> Rule:
        selectors = self.parse_selectors(node.prelude)
        declarations = self.parse_declarations(node.content)
        return Rule(selectors, declarations)

    def parse_selectors(self, tokens) -> List[SimpleSelector]:
        """
        Parse a selector list prelude into simple selectors.

        Args:
            tokens: tinycss2 tokens preceding the declaration block

        Returns:
            List of SimpleSelector in source order
        """
        groups = [[]]
        for token in tokens:
            if token.type == 'literal' and token.value == ',':
                groups.append([])
            elif token.type != 'comment':
                groups[-1].append(token)

        selectors = []
        for group in groups:
            selectors.append(self._parse_selector(_strip_whitespace(group)))
        return selectors

    def _parse_selector(self, tokens) -> SimpleSelector:
        if not tokens:
            raise ParseError("Empty selector")

        selector = SimpleSelector()
        position = 0
        while position < len(tokens):
            token = tokens[position]

            if token.type == 'ident':
                selector.tag_name = token.lower_value
            elif token.type == 'hash' and token.is_identifier:
                selector.id = token.value
            elif token.type == 'literal' and token.value == '*':
                pass
            elif token.type == 'literal' and token.value == '.':
                position += 1
                if position >= len(tokens) or tokens[position].type != 'ident':
                    raise ParseError("Expected a class name after '.'", token.source_line)
                selector.classes.append(tokens[position].value)
            elif token.type == 'whitespace':
                raise ParseError("Selector combinators are not supported", token.source_line)
            else:
                raise ParseError(f"Unexpected token {token.serialize()!r} in selector", token.source_line)

            position += 1

        return selector

    def parse_declarations(self, tokens) -> List[Declaration]:
        """
        Parse the contents of a declaration block.

        Args:
            tokens: tinycss2 tokens inside the braces

        Returns:
            List of Declaration in source order
        """
        declarations = []
        for item in tinycss2.parse_blocks_contents(tokens or [], skip_comments=True, skip_whitespace=True):
            if item.type == 'error':
                raise ParseError(f"Invalid declaration: {item.message}", item.source_line)
            if item.type != 'declaration':
                raise ParseError("Invalid declaration or unsupported nested rule", item.source_line)
            declarations.append(Declaration(item.lower_name, self.parse_value(item.value)))
        return declarations

    def parse_value(self, tokens) -> Value:
        """
        Parse a single declaration value.

        Args:
            tokens: tinycss2 tokens of the value

        Returns:
            Keyword, Length or Color
        """
        significant = _strip_whitespace([t for t in tokens if t.type != 'comment'])
        if len(significant) != 1:
            raise ParseError(f"Expected exactly one value, got {tinycss2.serialize(tokens).strip()!r}")

        token = significant[0]
        if token.type == 'dimension':
            if token.lower_unit != Unit.PX.value:
                raise ParseError(f"Unsupported unit {token.unit!r}", token.source_line)
            return Length(float(token.value), Unit.PX)

        if token.type == 'number':
            return Length(float(token.value), Unit.PX)

        if token.type in ('hash', 'ident', 'function'):
            color = tinycss2.color3.parse_color(token)
            if color is not None and not isinstance(color, str):
                return _to_color(color)
            if token.type == 'ident':
                return Keyword(token.lower_value)

        raise ParseError(f"Unsupported value {token.serialize()!r}", token.source_line)


def _strip_whitespace(tokens):
    start = 0
    end = len(tokens)
    while start < end and tokens[start].type == 'whitespace':
        start += 1
    while end > start and tokens[end - 1].type == 'whitespace':
        end -= 1
    return tokens[start:end]


def _to_color(rgba) -> Color:
    # tinycss2 channels are floats nominally in [0, 1]
    return Color(*(min(255, max(0, int(round(channel * 255)))) for channel in rgba))


def parse_css(css_content: str) -> Stylesheet:
    """Parse CSS content into a stylesheet."""
    return CSSParser().parse(css_content)
