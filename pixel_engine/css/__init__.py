"""
CSS implementation for the rendering engine.
This package provides value types, simple selectors and a tinycss2-based parser.
"""

from .values import Unit, Keyword, Length, Color, AUTO, ZERO, WHITE
from .selector import SimpleSelector, Declaration, Rule, Stylesheet, Specificity, Value
from .parser import CSSParser, parse_css

__all__ = [
    'Unit', 'Keyword', 'Length', 'Color', 'AUTO', 'ZERO', 'WHITE',
    'SimpleSelector', 'Declaration', 'Rule', 'Stylesheet', 'Specificity', 'Value',
    'CSSParser', 'parse_css'
]
