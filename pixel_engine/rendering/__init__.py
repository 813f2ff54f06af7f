"""
Rendering for the rendering engine.
This package turns layout trees into display lists and rasterizes them.
"""

from .display_list import SolidColor, DisplayCommand, DisplayList, build_display_list
from .canvas import Canvas, paint

__all__ = ['SolidColor', 'DisplayCommand', 'DisplayList', 'build_display_list', 'Canvas', 'paint']
