"""Styling applied directly to a selected span of Unicode text.

Unlike the Markdown transcoder, these operations work on text that may
already contain styled characters. Only base ASCII letters and digits are
remapped, so styles never compose: bolding italic text leaves it italic.
"""

from __future__ import annotations

import enum

from glyphsmith_mcp.editing import SelectionEdit, check_selection
from glyphsmith_mcp.style_maps import UNDERLINE, Style, apply_style_map, overlay


class SelectionStyle(str, enum.Enum):
    """Styles a user can apply to a selection."""

    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "bold_italic"
    UNDERLINE = "underline"


_MAPPED_STYLES = {
    SelectionStyle.BOLD: Style.BOLD,
    SelectionStyle.ITALIC: Style.ITALIC,
    SelectionStyle.BOLD_ITALIC: Style.BOLD_ITALIC,
}


def apply_selection_style(fragment: str, style: SelectionStyle) -> str:
    """Style every scalar value of ``fragment``.

    Bold, italic and bold-italic remap base letters and digits. Underline
    appends U+0332 after every character except LF, CR and tab; applying it
    twice stacks two marks.
    """
    style = SelectionStyle(style)
    if style is SelectionStyle.UNDERLINE:
        return overlay(fragment, UNDERLINE)
    return apply_style_map(fragment, _MAPPED_STYLES[style])


def style_selection(text: str, start: int, end: int,
                    style: SelectionStyle) -> SelectionEdit:
    """Apply ``style`` to ``text[start:end]`` and splice the result back.

    The returned selection covers the transformed fragment, which is longer
    than the original when underlining. An empty selection is a no-op.

    Raises:
        SelectionRangeError: If the bounds are outside ``text`` or inverted.
    """
    check_selection(text, start, end)
    if start == end:
        return SelectionEdit(text, start, end)
    styled = apply_selection_style(text[start:end], style)
    return SelectionEdit(text[:start] + styled + text[end:], start, start + len(styled))
