"""Selection-based Markdown authoring helpers.

Pure text edits a toolbar performs on the Markdown source: wrapping the
selected span in inline markers and turning the selected lines into a
list. Offsets are code-point indices into ``text``; every helper returns
the new text together with the selection that should be highlighted
afterwards.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Inline marker pairs understood by the transcoder.
MARKERS: dict[str, tuple[str, str]] = {
    "bold": ("**", "**"),
    "italic": ("*", "*"),
    "bold_italic": ("***", "***"),
    "code": ("`", "`"),
    "strikethrough": ("~~", "~~"),
    "underline": ("<u>", "</u>"),
}

_LEADING_WS_RE = re.compile(r"^(\s*)(.*)$")


class SelectionRangeError(ValueError):
    """Raised when selection bounds fall outside the text or are inverted."""

    def __init__(self, start: int, end: int, length: int):
        self.start = start
        self.end = end
        self.length = length
        super().__init__(
            f"Selection {start}..{end} is invalid for text of length {length}."
        )


@dataclass(frozen=True)
class SelectionEdit:
    """Result of an edit: the new text and the selection to restore."""

    text: str
    start: int
    end: int


def check_selection(text: str, start: int, end: int) -> None:
    """Raise SelectionRangeError unless ``0 <= start <= end <= len(text)``."""
    if not 0 <= start <= end <= len(text):
        raise SelectionRangeError(start, end, len(text))


def wrap_selection(text: str, start: int, end: int,
                   prefix: str, suffix: str) -> SelectionEdit:
    """Insert ``prefix`` before and ``suffix`` after ``text[start:end]``.

    The returned selection still covers the originally selected characters.
    """
    check_selection(text, start, end)
    new_text = text[:start] + prefix + text[start:end] + suffix + text[end:]
    return SelectionEdit(new_text, start + len(prefix), end + len(prefix))


def format_list(text: str, start: int, end: int,
                ordered: bool = False) -> SelectionEdit:
    """Prefix every line touched by the selection with a list marker.

    Unordered lists use ``* ``; ordered lists number from 1. Leading
    whitespace of each line is kept so nesting survives.
    """
    check_selection(text, start, end)
    line_start = text.rfind("\n", 0, start) + 1
    line_end = text.find("\n", end)
    if line_end == -1:
        line_end = len(text)

    lines = []
    for number, line in enumerate(text[line_start:line_end].split("\n"), start=1):
        indent, content = _LEADING_WS_RE.match(line).groups()
        marker = f"{number}." if ordered else "*"
        lines.append(f"{indent}{marker} {content}")

    block = "\n".join(lines)
    return SelectionEdit(
        text[:line_start] + block + text[line_end:],
        line_start,
        line_start + len(block),
    )
