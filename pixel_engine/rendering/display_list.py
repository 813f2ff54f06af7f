"""
Display list construction.
This module flattens a laid out box tree into solid-color rectangle commands
in painting order.
"""

from dataclasses import dataclass
from typing import List, Optional

from ..css import Color
from ..layout import LayoutBox, Rect


@dataclass(frozen=True)
class SolidColor:
    """Fill a rectangle with one color."""
    color: Color
    rect: Rect


DisplayCommand = SolidColor
DisplayList = List[DisplayCommand]


def build_display_list(layout_root: LayoutBox) -> DisplayList:
    """
    Build the display list for a layout tree.

    Args:
        layout_root: The dimensioned root layout box

    Returns:
        Paint commands, background before borders before descendants
    """
    display_list: DisplayList = []
    render_layout_box(display_list, layout_root)
    return display_list


def render_layout_box(display_list: DisplayList, layout_box: LayoutBox) -> None:
    render_background(display_list, layout_box)
    render_borders(display_list, layout_box)

    for child in layout_box.children:
        render_layout_box(display_list, child)


def render_background(display_list: DisplayList, layout_box: LayoutBox) -> None:
    color = get_color(layout_box, 'background')
    if color is not None:
        display_list.append(SolidColor(color, layout_box.dimensions.border_box()))


def render_borders(display_list: DisplayList, layout_box: LayoutBox) -> None:
    """Emit the left, right, top and bottom border edges, in that order."""
    color = get_color(layout_box, 'border-color')
    if color is None:
        return

    d = layout_box.dimensions
    border_box = d.border_box()

    # Left border
    display_list.append(SolidColor(color, Rect(
        x=border_box.x,
        y=border_box.y,
        width=d.border.left,
        height=border_box.height,
    )))

    # Right border
    display_list.append(SolidColor(color, Rect(
        x=border_box.x + border_box.width - d.border.right,
        y=border_box.y,
        width=d.border.right,
        height=border_box.height,
    )))

    # Top border
    display_list.append(SolidColor(color, Rect(
        x=border_box.x,
        y=border_box.y,
        width=border_box.width,
        height=d.border.top,
    )))

    # Bottom border
    display_list.append(SolidColor(color, Rect(
        x=border_box.x,
        y=border_box.y + border_box.height - d.border.bottom,
        width=border_box.width,
        height=d.border.bottom,
    )))


def get_color(layout_box: LayoutBox, name: str) -> Optional[Color]:
    """
    Get a color property of the box's style.

    Anonymous boxes have no style and therefore no color.
    """
    if layout_box.style_node is None:
        return None

    value = layout_box.get_style_node().value(name)
    if isinstance(value, Color):
        return value
    return None
