"""Tests for the tinycss2-based stylesheet parser."""

import pytest

from pixel_engine.css import AUTO, Color, Keyword, Length, SimpleSelector, Unit, parse_css
from pixel_engine.errors import ParseError


class TestSelectors:
    def test_compound_selector(self):
        sheet = parse_css("div#main.a.b { display: block; }")
        selector = sheet.rules[0].selectors[0]
        assert selector == SimpleSelector(tag_name="div", id="main", classes=["a", "b"])
        assert selector.specificity() == (1, 2, 1)

    def test_universal_selector(self):
        sheet = parse_css("* { display: block; }")
        assert sheet.rules[0].selectors == [SimpleSelector()]
        assert sheet.rules[0].selectors[0].specificity() == (0, 0, 0)

    def test_selectors_sorted_by_descending_specificity(self):
        sheet = parse_css("p, .note, #top, p.note { color: red; }")
        assert [str(s) for s in sheet.rules[0].selectors] == ["#top", "p.note", ".note", "p"]

    def test_combinators_are_rejected(self):
        with pytest.raises(ParseError):
            parse_css("div p { color: red; }")

    def test_dangling_class_dot(self):
        with pytest.raises(ParseError):
            parse_css("div. { color: red; }")


class TestValues:
    def test_lengths(self):
        sheet = parse_css(".a { width: 100px; margin: 0; padding-left: 2.5px; }")
        values = {d.name: d.value for d in sheet.rules[0].declarations}
        assert values["width"] == Length(100.0, Unit.PX)
        assert values["margin"] == Length(0.0, Unit.PX)
        assert values["padding-left"] == Length(2.5, Unit.PX)

    def test_colors(self):
        sheet = parse_css(".a { background: #ff0000; border-color: blue; color: #0f08; }")
        values = {d.name: d.value for d in sheet.rules[0].declarations}
        assert values["background"] == Color(255, 0, 0, 255)
        assert values["border-color"] == Color(0, 0, 255, 255)
        assert values["color"] == Color(0, 255, 0, 136)

    def test_keywords(self):
        sheet = parse_css(".a { display: block; width: auto; }")
        values = {d.name: d.value for d in sheet.rules[0].declarations}
        assert values["display"] == Keyword("block")
        assert values["width"] == Keyword("auto")

    def test_keywords_are_case_insensitive(self):
        sheet = parse_css(".a { display: BLOCK; width: Auto; }")
        values = {d.name: d.value for d in sheet.rules[0].declarations}
        assert values["display"] == Keyword("block")
        assert values["width"] == AUTO

    def test_declaration_order_is_kept(self):
        sheet = parse_css(".a { width: 1px; height: 2px; width: 3px; }")
        assert [d.name for d in sheet.rules[0].declarations] == ["width", "height", "width"]

    def test_unsupported_unit(self):
        with pytest.raises(ParseError):
            parse_css(".a { width: 2em; }")

    def test_multi_token_value(self):
        with pytest.raises(ParseError):
            parse_css(".a { border: 1px solid red; }")


class TestStylesheet:
    def test_rules_in_source_order(self):
        sheet = parse_css("h1 { display: block; } .x { display: none; }")
        assert [str(rule.selectors[0]) for rule in sheet.rules] == ["h1", ".x"]

    def test_empty_source(self):
        assert parse_css("").rules == []

    def test_comments_ignored(self):
        sheet = parse_css("/* note */ p { /* inner */ width: 1px; }")
        assert len(sheet.rules) == 1
        assert sheet.rules[0].declarations[0].value == Length(1.0)

    def test_at_rules_rejected(self):
        with pytest.raises(ParseError):
            parse_css("@media screen { p { width: 1px; } }")
