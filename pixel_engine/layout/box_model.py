"""
CSS box model geometry.
"""

import copy
from dataclasses import dataclass, field


@dataclass
class Rect:
    """An axis-aligned rectangle in document coordinates."""
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def expanded_by(self, edge: 'EdgeSizes') -> 'Rect':
        """Grow the rectangle outward by the given edge sizes."""
        return Rect(
            x=self.x - edge.left,
            y=self.y - edge.top,
            width=self.width + edge.left + edge.right,
            height=self.height + edge.top + edge.bottom,
        )


@dataclass
class EdgeSizes:
    """Four edge offsets of a padding, border or margin area."""
    left: float = 0.0
    right: float = 0.0
    top: float = 0.0
    bottom: float = 0.0


@dataclass
class Dimensions:
    """
    Container for box model metrics.

    Stores the content rectangle and the padding, border and margin edges
    around it. The outer boxes are derived, never stored.
    """
    content: Rect = field(default_factory=Rect)
    padding: EdgeSizes = field(default_factory=EdgeSizes)
    border: EdgeSizes = field(default_factory=EdgeSizes)
    margin: EdgeSizes = field(default_factory=EdgeSizes)

    def padding_box(self) -> Rect:
        """The area covered by the content area plus its padding."""
        return self.content.expanded_by(self.padding)

    def border_box(self) -> Rect:
        """The area covered by the content area plus padding and borders."""
        return self.padding_box().expanded_by(self.border)

    def margin_box(self) -> Rect:
        """The area covered by the content area plus padding, borders and margin."""
        return self.border_box().expanded_by(self.margin)

    def copy(self) -> 'Dimensions':
        return copy.deepcopy(self)

    @classmethod
    def viewport(cls, width: float, height: float) -> 'Dimensions':
        """Dimensions of a viewport whose content area starts at the origin."""
        return cls(content=Rect(0.0, 0.0, float(width), float(height)))
