"""
Rendering engine core.
This module wires style resolution, layout and painting into one render pass.
"""

import logging
from typing import Optional

from .css import Stylesheet, parse_css
from .dom import Node, parse_html
from .layout import Dimensions, layout_tree
from .rendering import Canvas, paint
from .style import default_stylesheet, style_tree
from .utils.config import Config
from .utils.logging import PerformanceLogger

logger = logging.getLogger(__name__)


class RenderEngine:
    """
    Renders a document and a stylesheet to a pixel canvas.

    Every call builds its own timers, styled tree, layout tree, display list
    and canvas; nothing is shared between calls.
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the engine.

        Args:
            config: Configuration supplying the default viewport size and
                whether the default element styles are applied
        """
        self.config = config
        self.user_agent = default_stylesheet() if self._use_user_agent() else None

    def _use_user_agent(self) -> bool:
        if self.config is None:
            return True
        return bool(self.config.get('style.user_agent', True))

    @property
    def default_width(self) -> int:
        if self.config is None:
            return 800
        return int(self.config.get('viewport.width', 800))

    @property
    def default_height(self) -> int:
        if self.config is None:
            return 600
        return int(self.config.get('viewport.height', 600))

    def render(self, document: Node, stylesheet: Stylesheet,
               width: Optional[int] = None, height: Optional[int] = None) -> Canvas:
        """
        Render a parsed document.

        Args:
            document: Root of the document tree
            stylesheet: Parsed stylesheet
            width: Viewport width in pixels, defaults to the configured width
            height: Viewport height in pixels, defaults to the configured height

        Returns:
            The painted canvas

        Raises:
            RootDisplayError: If the root element has display: none
        """
        if width is None:
            width = self.default_width
        if height is None:
            height = self.default_height

        viewport = Dimensions.viewport(width, height)
        perf = PerformanceLogger(logger, "render")

        perf.start("style")
        styled_root = style_tree(document, stylesheet, self.user_agent)
        perf.end("style")

        perf.start("layout")
        layout_root = layout_tree(styled_root, viewport)
        perf.end("layout")

        perf.start("paint")
        canvas = paint(layout_root, viewport.content)
        perf.end("paint")

        logger.info(f"Rendered {width}x{height} canvas")
        return canvas

    def render_source(self, html_content: str, css_content: str,
                      width: Optional[int] = None, height: Optional[int] = None) -> Canvas:
        """
        Parse markup and CSS source and render them.

        Raises:
            ParseError: If either source cannot be parsed
        """
        perf = PerformanceLogger(logger, "render")
        perf.start("parse")
        document = parse_html(html_content)
        stylesheet = parse_css(css_content)
        perf.end("parse")

        return self.render(document, stylesheet, width, height)
