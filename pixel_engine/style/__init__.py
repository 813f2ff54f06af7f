"""
Style resolution for the rendering engine.
"""

from .style import Display, StyledNode, style_tree, specified_values, matching_rules, matches
from .user_agent import default_stylesheet

__all__ = [
    'Display', 'StyledNode', 'style_tree', 'specified_values', 'matching_rules', 'matches',
    'default_stylesheet'
]
