"""Tests for display list construction and rasterization."""

import pytest

from pixel_engine.css import Color, Keyword, SimpleSelector, WHITE
from pixel_engine.dom import elem
from pixel_engine.layout import Dimensions, Rect, layout_tree
from pixel_engine.rendering import Canvas, SolidColor, build_display_list, paint

from helpers import px, rule_for, styled

RED = Color(255, 0, 0, 255)
GREEN = Color(0, 128, 0, 255)
BLUE = Color(0, 0, 255, 255)


def laid_out(document, *rules, width=100):
    return layout_tree(styled(document, *rules), Dimensions.viewport(width, 100))


class TestDisplayList:
    def test_background_covers_border_box(self):
        root = laid_out(
            elem("div"),
            rule_for(SimpleSelector(tag_name="div"), background=RED, height=px(10),
                     padding=px(2), border_width=px(3), margin=px(4)),
        )
        commands = build_display_list(root)
        assert commands == [SolidColor(RED, root.dimensions.border_box())]
        assert commands[0].rect == Rect(4, 4, 92, 20)

    def test_borders_follow_background_in_edge_order(self):
        root = laid_out(
            elem("div"),
            rule_for(SimpleSelector(tag_name="div"), background=RED, border_color=BLUE,
                     width=px(20), height=px(10), border_left_width=px(1),
                     border_right_width=px(2), border_top_width=px(3), border_bottom_width=px(4)),
        )
        commands = build_display_list(root)

        assert [command.color for command in commands] == [RED, BLUE, BLUE, BLUE, BLUE]
        assert [command.rect for command in commands[1:]] == [
            Rect(0, 0, 1, 17),
            Rect(21, 0, 2, 17),
            Rect(0, 0, 23, 3),
            Rect(0, 13, 23, 4),
        ]

    def test_border_color_without_width_still_emits_edges(self):
        root = laid_out(elem("div"), rule_for(SimpleSelector(tag_name="div"), border_color=BLUE))
        commands = build_display_list(root)
        assert len(commands) == 4
        assert all(command.rect.width == 0 or command.rect.height == 0 for command in commands)

    def test_no_colors_no_commands(self):
        root = laid_out(elem("div"), rule_for(SimpleSelector(tag_name="div"), width=px(10)))
        assert build_display_list(root) == []

    def test_non_color_background_is_ignored(self):
        root = laid_out(elem("div"), rule_for(SimpleSelector(tag_name="div"), background=px(3)))
        assert build_display_list(root) == []

    def test_parent_before_children_in_tree_order(self):
        document = elem("div", {}, [elem("p", {"class": "one"}), elem("p", {"class": "two"})])
        root = laid_out(
            document,
            rule_for(SimpleSelector(tag_name="div"), background=RED),
            rule_for(SimpleSelector(classes=["one"]), background=GREEN),
            rule_for(SimpleSelector(classes=["two"]), background=BLUE),
        )
        assert [command.color for command in build_display_list(root)] == [RED, GREEN, BLUE]

    def test_anonymous_boxes_paint_only_their_children(self):
        document = elem("div", {}, [elem("span")])
        sheet_rules = [rule_for(SimpleSelector(tag_name="span"), display=Keyword("inline"),
                                background=GREEN)]
        root = laid_out(document, *sheet_rules)

        assert root.children[0].style_node is None
        assert [command.color for command in build_display_list(root)] == [GREEN]


class TestCanvas:
    def test_new_canvas_is_white(self):
        canvas = Canvas(3, 2)
        assert canvas.pixels == [WHITE] * 6

    def test_clipping_to_left_edge(self):
        canvas = Canvas(20, 2)
        canvas.paint_item(SolidColor(RED, Rect(-10, 0, 30, 1)))

        assert [canvas.pixel(x, 0) for x in range(20)] == [RED] * 20
        assert [canvas.pixel(x, 1) for x in range(20)] == [WHITE] * 20

    def test_partial_overlap_on_right_and_bottom(self):
        canvas = Canvas(4, 4)
        canvas.paint_item(SolidColor(RED, Rect(2, 2, 10, 10)))

        painted = {(x, y) for y in range(4) for x in range(4) if canvas.pixel(x, y) == RED}
        assert painted == {(2, 2), (3, 2), (2, 3), (3, 3)}

    def test_rect_outside_bounds_paints_nothing(self):
        canvas = Canvas(5, 5)
        canvas.paint_item(SolidColor(RED, Rect(10, 10, 5, 5)))
        canvas.paint_item(SolidColor(RED, Rect(-10, -10, 5, 5)))
        assert canvas.pixels == [WHITE] * 25

    def test_fractional_edges_are_floored(self):
        canvas = Canvas(4, 1)
        canvas.paint_item(SolidColor(RED, Rect(0.5, 0, 1.9, 1)))
        assert [canvas.pixel(x, 0) for x in range(4)] == [RED, RED, WHITE, WHITE]

    def test_later_commands_win(self):
        canvas = Canvas(2, 1)
        canvas.paint_item(SolidColor(RED, Rect(0, 0, 2, 1)))
        canvas.paint_item(SolidColor(Color(0, 0, 255, 10), Rect(1, 0, 1, 1)))
        assert canvas.pixel(0, 0) == RED
        assert canvas.pixel(1, 0) == Color(0, 0, 255, 10)

    def test_pixel_out_of_range(self):
        with pytest.raises(IndexError):
            Canvas(2, 2).pixel(2, 0)

    def test_negative_size_rejected(self):
        with pytest.raises(ValueError):
            Canvas(-1, 5)

    def test_to_image(self):
        canvas = Canvas(3, 2)
        canvas.paint_item(SolidColor(RED, Rect(1, 1, 1, 1)))
        image = canvas.to_image()

        assert image.mode == "RGBA"
        assert image.size == (3, 2)
        assert image.getpixel((1, 1)) == (255, 0, 0, 255)
        assert image.getpixel((0, 0)) == (255, 255, 255, 255)

    def test_save_png(self, tmp_path):
        path = tmp_path / "out" / "canvas.png"
        Canvas(2, 2).save(str(path))
        assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


class TestPaint:
    def test_paint_uses_bounds_size(self):
        root = laid_out(elem("div"), rule_for(SimpleSelector(tag_name="div"), background=RED,
                                              width=px(5), height=px(5)))
        canvas = paint(root, Rect(0, 0, 10, 8))

        assert (canvas.width, canvas.height) == (10, 8)
        assert canvas.pixel(4, 4) == RED
        assert canvas.pixel(5, 4) == WHITE
