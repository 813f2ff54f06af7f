"""
Pixel Engine - renders HTML documents styled with CSS to pixel canvases.
"""

import logging

from pixel_engine.core import RenderEngine
from pixel_engine.errors import RenderError, ParseError, RootDisplayError, AnonymousBoxError

# Handlers are configured by the application, see pixel_engine.utils.logging.setup_logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Package information
__version__ = "0.1.0"
__author__ = "Pixel Engine Team"
__description__ = "Renders HTML documents styled with CSS to pixel canvases"

__all__ = ['RenderEngine', 'RenderError', 'ParseError', 'RootDisplayError', 'AnonymousBoxError']
