"""Shared fixtures for the engine tests."""

import pytest

from pixel_engine.dom import elem, text
from pixel_engine.layout import Dimensions


@pytest.fixture
def viewport():
    return Dimensions.viewport(800, 600)


@pytest.fixture
def sample_document():
    """``<div class="a"><span>x</span></div>``"""
    return elem("div", {"class": "a"}, [elem("span", {}, [text("x")])])
