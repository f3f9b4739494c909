"""Tests for styling a selected span of Unicode text."""

import pytest

from glyphsmith_mcp.editing import SelectionEdit, SelectionRangeError
from glyphsmith_mcp.selection import SelectionStyle, apply_selection_style, style_selection
from glyphsmith_mcp.style_maps import to_bold, to_bold_italic, to_italic


class TestApplySelectionStyle:
    def test_bold(self):
        assert apply_selection_style("Hello 42", SelectionStyle.BOLD) == to_bold("Hello 42")

    def test_italic(self):
        assert apply_selection_style("Hello", SelectionStyle.ITALIC) == to_italic("Hello")

    def test_bold_italic(self):
        assert apply_selection_style("Hello", SelectionStyle.BOLD_ITALIC) == to_bold_italic("Hello")

    def test_accepts_style_value(self):
        assert apply_selection_style("a", "bold") == to_bold("a")

    def test_unknown_style(self):
        with pytest.raises(ValueError):
            apply_selection_style("a", "shadow")

    def test_already_styled_is_unchanged(self):
        styled = to_bold("x")
        assert apply_selection_style(styled, SelectionStyle.BOLD) == styled

    def test_styles_do_not_compose(self):
        """Bold then italic leaves bold text; there is no cross-map composition."""
        twice = apply_selection_style(
            apply_selection_style("abc", SelectionStyle.BOLD), SelectionStyle.ITALIC
        )
        assert twice == to_bold("abc")
        assert twice != to_bold_italic("abc")

    def test_underline(self):
        assert apply_selection_style("cat", SelectionStyle.UNDERLINE) == "c\u0332a\u0332t\u0332"

    def test_underline_skips_tab(self):
        result = apply_selection_style("a\tb", SelectionStyle.UNDERLINE)
        assert "\t\u0332" not in result
        assert result == "a\u0332\tb\u0332"

    def test_underline_skips_line_breaks(self):
        assert apply_selection_style("a\r\nb", SelectionStyle.UNDERLINE) == "a\u0332\r\nb\u0332"

    def test_underline_not_idempotent(self):
        once = apply_selection_style("c", SelectionStyle.UNDERLINE)
        twice = apply_selection_style(once, SelectionStyle.UNDERLINE)
        assert len(twice) > len(once)
        assert twice.startswith("c\u0332\u0332")

    def test_astral_character_is_one_unit(self):
        result = apply_selection_style("😹", SelectionStyle.UNDERLINE)
        assert result == "😹\u0332"
        assert len(result) == 2

    @pytest.mark.parametrize("style", list(SelectionStyle))
    def test_empty_fragment(self, style):
        assert apply_selection_style("", style) == ""

    @pytest.mark.parametrize(
        "style", [SelectionStyle.BOLD, SelectionStyle.ITALIC, SelectionStyle.BOLD_ITALIC]
    )
    def test_mapped_styles_preserve_length(self, style):
        text = "Mixed 123 text!"
        assert len(apply_selection_style(text, style)) == len(text)


class TestStyleSelection:
    def test_splices_styled_span(self):
        edit = style_selection("say hi", 4, 6, SelectionStyle.BOLD)
        assert edit == SelectionEdit("say " + to_bold("hi"), 4, 6)

    def test_underline_extends_selection(self):
        edit = style_selection("say hi!", 4, 6, SelectionStyle.UNDERLINE)
        assert edit.text == "say h\u0332i\u0332!"
        assert (edit.start, edit.end) == (4, 8)
        assert edit.text[edit.start:edit.end] == "h\u0332i\u0332"

    def test_only_selection_touched(self):
        edit = style_selection("abc", 1, 2, SelectionStyle.ITALIC)
        assert edit.text == "a" + to_italic("b") + "c"

    def test_empty_selection_is_noop(self):
        assert style_selection("abc", 1, 1, SelectionStyle.BOLD) == SelectionEdit("abc", 1, 1)

    @pytest.mark.parametrize(("start", "end"), [(2, 1), (-1, 2), (0, 99)])
    def test_invalid_bounds(self, start, end):
        with pytest.raises(SelectionRangeError) as info:
            style_selection("abc", start, end, SelectionStyle.BOLD)
        assert info.value.length == 3
