"""
Block layout.
This module builds the layout tree from the styled tree and computes the box
model of every block box in a single top-down pass.
"""

import logging
from enum import Enum
from typing import List, Optional

from ..css import AUTO, ZERO, Length, Unit
from ..errors import AnonymousBoxError, RootDisplayError
from ..style import Display, StyledNode
from .box_model import Dimensions

logger = logging.getLogger(__name__)


class BoxType(Enum):
    """Kinds of layout boxes."""
    BLOCK = "block"
    INLINE = "inline"
    ANONYMOUS = "anonymous"


class LayoutBox:
    """
    Layout box for a styled node.

    Block and inline boxes keep a reference to the styled node they were built
    from. Anonymous boxes have none; they only group inline children of a
    block parent.
    """

    def __init__(self, box_type: BoxType, style_node: Optional[StyledNode] = None):
        """
        Initialize a layout box.

        Args:
            box_type: The kind of box
            style_node: The styled node the box was generated for, None for anonymous boxes
        """
        if (box_type == BoxType.ANONYMOUS) != (style_node is None):
            raise ValueError(f"{box_type.name} box requires style_node to be "
                             f"{'None' if box_type == BoxType.ANONYMOUS else 'set'}")

        self.box_type = box_type
        self.style_node = style_node
        self.dimensions = Dimensions()
        self.children: List[LayoutBox] = []

    def get_style_node(self) -> StyledNode:
        """
        Get the styled node this box was generated for.

        Raises:
            AnonymousBoxError: If this is an anonymous box
        """
        if self.style_node is None:
            raise AnonymousBoxError("Anonymous block box has no style node")
        return self.style_node

    def get_inline_container(self) -> 'LayoutBox':
        """
        Get the box that receives inline children of this box.

        Inline and anonymous boxes hold inline children themselves. A block box
        reuses its trailing anonymous child, creating one if the last child is
        not anonymous.
        """
        if self.box_type in (BoxType.INLINE, BoxType.ANONYMOUS):
            return self

        if not self.children or self.children[-1].box_type != BoxType.ANONYMOUS:
            self.children.append(LayoutBox(BoxType.ANONYMOUS))
        return self.children[-1]

    def layout(self, containing_block: Dimensions) -> None:
        """
        Lay out this box and its descendants.

        Inline and anonymous boxes are not laid out.

        Args:
            containing_block: Dimensions of the parent box, or of the viewport
        """
        if self.box_type == BoxType.BLOCK:
            self.layout_block(containing_block)

    def layout_block(self, containing_block: Dimensions) -> None:
        # Width depends on the parent; height depends on the children
        self.calculate_block_width(containing_block)
        self.calculate_block_position(containing_block)
        self.layout_block_children()
        self.calculate_block_height()

    def calculate_block_width(self, containing_block: Dimensions) -> None:
        """
        Resolve width and horizontal margins, border and padding.

        The used values are chosen so that the margin box exactly fills the
        containing block's content width, following the CSS2 rules for
        block-level non-replaced elements in normal flow.
        """
        style = self.get_style_node()

        width = style.value('width') or AUTO

        margin_left = style.lookup('margin-left', 'margin', ZERO)
        margin_right = style.lookup('margin-right', 'margin', ZERO)

        border_left = style.lookup('border-left-width', 'border-width', ZERO)
        border_right = style.lookup('border-right-width', 'border-width', ZERO)

        padding_left = style.lookup('padding-left', 'padding', ZERO)
        padding_right = style.lookup('padding-right', 'padding', ZERO)

        total = sum(value.to_px() for value in (
            margin_left, margin_right, border_left, border_right,
            padding_left, padding_right, width,
        ))

        # An explicit width that overflows turns auto margins into zero
        if width != AUTO and total > containing_block.content.width:
            if margin_left == AUTO:
                margin_left = ZERO
            if margin_right == AUTO:
                margin_right = ZERO

        underflow = containing_block.content.width - total

        width_auto = width == AUTO
        margin_left_auto = margin_left == AUTO
        margin_right_auto = margin_right == AUTO

        if not width_auto and not margin_left_auto and not margin_right_auto:
            # Over-constrained: margin-right takes the difference, possibly going negative
            margin_right = Length(margin_right.to_px() + underflow, Unit.PX)

        elif not width_auto and not margin_left_auto and margin_right_auto:
            margin_right = Length(underflow, Unit.PX)

        elif not width_auto and margin_left_auto and not margin_right_auto:
            margin_left = Length(underflow, Unit.PX)

        elif width_auto:
            if margin_left_auto:
                margin_left = ZERO
            if margin_right_auto:
                margin_right = ZERO

            if underflow >= 0.0:
                width = Length(underflow, Unit.PX)
            else:
                # Width can't be negative
                width = ZERO
                margin_right = Length(margin_right.to_px() + underflow, Unit.PX)

        else:
            # Both margins auto: center the box
            margin_left = Length(underflow / 2.0, Unit.PX)
            margin_right = Length(underflow / 2.0, Unit.PX)

        d = self.dimensions
        d.content.width = width.to_px()

        d.padding.left = padding_left.to_px()
        d.padding.right = padding_right.to_px()

        d.border.left = border_left.to_px()
        d.border.right = border_right.to_px()

        d.margin.left = margin_left.to_px()
        d.margin.right = margin_right.to_px()

    def calculate_block_position(self, containing_block: Dimensions) -> None:
        """Resolve vertical edges and place the content box inside the containing block."""
        style = self.get_style_node()
        d = self.dimensions

        # Vertical auto values resolve to zero through to_px()
        d.margin.top = style.lookup('margin-top', 'margin', ZERO).to_px()
        d.margin.bottom = style.lookup('margin-bottom', 'margin', ZERO).to_px()

        d.border.top = style.lookup('border-top-width', 'border-width', ZERO).to_px()
        d.border.bottom = style.lookup('border-bottom-width', 'border-width', ZERO).to_px()

        d.padding.top = style.lookup('padding-top', 'padding', ZERO).to_px()
        d.padding.bottom = style.lookup('padding-bottom', 'padding', ZERO).to_px()

        d.content.x = containing_block.content.x + d.margin.left + d.border.left + d.padding.left
        d.content.y = containing_block.content.y + d.margin.top + d.border.top + d.padding.top

    def layout_block_children(self) -> None:
        d = self.dimensions
        for child in self.children:
            child.layout(d.copy())
            d.content.height += child.dimensions.margin_box().height

    def calculate_block_height(self) -> None:
        # An explicit pixel height overrides the height of the content
        height = self.get_style_node().value('height')
        if isinstance(height, Length) and height.unit == Unit.PX:
            self.dimensions.content.height = height.value

    def __repr__(self):
        return f"LayoutBox({self.box_type.name}, {len(self.children)} children)"


def build_layout_tree(style_node: StyledNode) -> LayoutBox:
    """
    Build the layout tree for a styled tree without computing any geometry.

    Args:
        style_node: Root of the styled tree

    Returns:
        Root layout box

    Raises:
        RootDisplayError: If the root has ``display: none``
    """
    display = style_node.display()
    if display == Display.BLOCK:
        root = LayoutBox(BoxType.BLOCK, style_node)
    elif display == Display.INLINE:
        root = LayoutBox(BoxType.INLINE, style_node)
    else:
        raise RootDisplayError("Root node has display: none")

    for child in style_node.children:
        child_display = child.display()
        if child_display == Display.BLOCK:
            root.children.append(build_layout_tree(child))
        elif child_display == Display.INLINE:
            root.get_inline_container().children.append(build_layout_tree(child))
        # display: none children generate no boxes

    return root


def layout_tree(style_node: StyledNode, containing_block: Dimensions) -> LayoutBox:
    """
    Build and lay out the layout tree for a styled tree.

    Args:
        style_node: Root of the styled tree
        containing_block: Viewport dimensions; its height is ignored

    Returns:
        The dimensioned root layout box
    """
    # Root height is computed from its content
    containing_block = containing_block.copy()
    containing_block.content.height = 0.0

    root_box = build_layout_tree(style_node)
    root_box.layout(containing_block)

    logger.debug(f"Laid out {root_box!r} at width {containing_block.content.width}")
    return root_box
