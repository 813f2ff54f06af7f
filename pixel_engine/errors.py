"""
Error types raised by the rendering pipeline.
"""

from typing import Optional


class RenderError(Exception):
    """Base error for every failure that aborts a render pass."""


class ParseError(RenderError):
    """Raised when markup or stylesheet source cannot be turned into a tree."""

    def __init__(self, message: str, position: Optional[int] = None):
        self.position = position
        super().__init__(message)


class RootDisplayError(RenderError):
    """Raised when the root node resolves to ``display: none``."""


class AnonymousBoxError(RenderError):
    """Raised when an anonymous box is asked for its style node."""
