"""Builders shared by the engine tests."""

from pixel_engine.css import Declaration, Keyword, Length, Rule, SimpleSelector, Stylesheet
from pixel_engine.style import style_tree


def px(value):
    return Length(float(value))


def block_sheet(*rules):
    """A stylesheet that makes every element a block, followed by ``rules``."""
    universal = Rule([SimpleSelector()], [Declaration("display", Keyword("block"))])
    return Stylesheet([universal, *rules])


def rule_for(selector, **declarations):
    """Build a rule from keyword arguments, ``margin_left=px(10)`` -> ``margin-left: 10px``."""
    return Rule(
        [selector],
        [Declaration(name.replace("_", "-"), value) for name, value in declarations.items()],
    )


def styled(document, *rules):
    """Style ``document`` with every element a block plus ``rules``."""
    return style_tree(document, block_sheet(*rules))
