"""
Layout implementation for the rendering engine.
This package provides the box model and block layout.
"""

from .box_model import Rect, EdgeSizes, Dimensions
from .layout import BoxType, LayoutBox, build_layout_tree, layout_tree

__all__ = [
    'Rect', 'EdgeSizes', 'Dimensions', 'BoxType', 'LayoutBox', 'build_layout_tree', 'layout_tree'
]
