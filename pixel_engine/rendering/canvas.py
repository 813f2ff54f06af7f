"""
Rasterization.
This module paints display lists onto a pixel canvas and encodes the result with Pillow.
"""

import logging
import os
from typing import List

from PIL import Image

from ..css import Color, WHITE
from ..layout import LayoutBox, Rect
from .display_list import DisplayCommand, build_display_list

logger = logging.getLogger(__name__)


class Canvas:
    """
    A width x height grid of RGBA colors stored row-major.

    New canvases are opaque white.
    """

    def __init__(self, width: int, height: int):
        """
        Initialize a blank canvas.

        Args:
            width: Width in pixels
            height: Height in pixels
        """
        if width < 0 or height < 0:
            raise ValueError(f"Canvas size must be non-negative, got {width}x{height}")

        self.width = width
        self.height = height
        self.pixels: List[Color] = [WHITE] * (width * height)

    def paint_item(self, item: DisplayCommand) -> None:
        """
        Paint one display command, clipped to the canvas.

        Later commands overwrite earlier ones; alpha is not composited.
        """
        rect = item.rect
        x0 = int(_clamp(rect.x, 0.0, self.width))
        y0 = int(_clamp(rect.y, 0.0, self.height))
        x1 = int(_clamp(rect.x + rect.width, 0.0, self.width))
        y1 = int(_clamp(rect.y + rect.height, 0.0, self.height))

        if x0 >= x1:
            return

        row = [item.color] * (x1 - x0)
        for y in range(y0, y1):
            start = y * self.width
            self.pixels[start + x0:start + x1] = row

    def pixel(self, x: int, y: int) -> Color:
        """Get the color at a pixel coordinate."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) is outside a {self.width}x{self.height} canvas")
        return self.pixels[y * self.width + x]

    def to_image(self) -> Image.Image:
        """Convert the canvas to a Pillow RGBA image."""
        image = Image.new('RGBA', (self.width, self.height))
        image.putdata([color.as_tuple() for color in self.pixels])
        return image

    def save(self, path: str, format: str = 'PNG') -> None:
        """
        Encode the canvas and write it to disk.

        Args:
            path: Output file path
            format: Pillow image format name
        """
        output_dir = os.path.dirname(path)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)

        self.to_image().save(path, format=format)
        logger.info(f"Saved {self.width}x{self.height} image to {path}")


def _clamp(value: float, lower: float, upper: float) -> float:
    return min(max(value, lower), upper)


def paint(layout_root: LayoutBox, bounds: Rect) -> Canvas:
    """
    Paint a layout tree onto a new canvas.

    Args:
        layout_root: The dimensioned root layout box
        bounds: Canvas area; only its width and height are used

    Returns:
        The painted canvas
    """
    display_list = build_display_list(layout_root)
    canvas = Canvas(int(bounds.width), int(bounds.height))

    for item in display_list:
        canvas.paint_item(item)

    logger.debug(f"Painted {len(display_list)} display commands")
    return canvas
