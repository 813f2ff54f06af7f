"""
CSS selectors and stylesheet structures.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from .values import Color, Keyword, Length

Value = Union[Keyword, Length, Color]

# (id count, class count, tag count), compared lexicographically
Specificity = Tuple[int, int, int]


@dataclass
class SimpleSelector:
    """
    A conjunction of an optional tag name, an optional id and any number of classes.

    An empty selector is the universal selector ``*``.
    """
    tag_name: Optional[str] = None
    id: Optional[str] = None
    classes: List[str] = field(default_factory=list)

    def specificity(self) -> Specificity:
        return (
            1 if self.id is not None else 0,
            len(self.classes),
            1 if self.tag_name is not None else 0,
        )

    def __str__(self):
        text = self.tag_name or ""
        if self.id is not None:
            text += f"#{self.id}"
        text += "".join(f".{name}" for name in self.classes)
        return text or "*"


@dataclass
class Declaration:
    """A ``name: value`` pair."""
    name: str
    value: Value


@dataclass
class Rule:
    """Selectors sharing one declaration block."""
    selectors: List[SimpleSelector]
    declarations: List[Declaration]

    def __post_init__(self):
        # Highest specificity first; sorted() is stable so source order breaks ties
        self.selectors = sorted(self.selectors, key=lambda s: s.specificity(), reverse=True)


@dataclass
class Stylesheet:
    """An ordered list of rules."""
    rules: List[Rule] = field(default_factory=list)
