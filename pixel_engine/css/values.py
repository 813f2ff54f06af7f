"""
CSS value types.
Declared values are keywords, pixel lengths or RGBA colors.
"""

from dataclasses import dataclass
from enum import Enum


class Unit(Enum):
    """Length units. Only pixels are supported."""
    PX = "px"


@dataclass(frozen=True)
class Keyword:
    """An identifier value such as ``auto`` or ``block``."""
    name: str

    def to_px(self) -> float:
        return 0.0

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Length:
    """A length with a unit."""
    value: float
    unit: Unit = Unit.PX

    def to_px(self) -> float:
        return float(self.value)

    def __str__(self):
        return f"{self.value:g}{self.unit.value}"


@dataclass(frozen=True)
class Color:
    """An RGBA color with one byte per channel."""
    r: int
    g: int
    b: int
    a: int = 255

    def to_px(self) -> float:
        return 0.0

    def as_tuple(self):
        return (self.r, self.g, self.b, self.a)

    def __str__(self):
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}{self.a:02x}"


AUTO = Keyword("auto")
ZERO = Length(0.0, Unit.PX)
WHITE = Color(255, 255, 255, 255)
