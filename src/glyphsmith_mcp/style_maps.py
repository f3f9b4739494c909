"""Styled Unicode alphabets and combining-mark overlays.

Each style maps ASCII A-Z, a-z and (where Unicode has them) 0-9 onto a
block of Mathematical Alphanumeric Symbols. Anything outside that domain,
including characters that are already styled, passes through unchanged.

    Style.BOLD         → Math Sans-Serif Bold        (U+1D5D4 block)
    Style.ITALIC       → Math Sans-Serif Italic      (U+1D608 block)
    Style.BOLD_ITALIC  → Math Sans-Serif Bold Italic (U+1D63C block)
    Style.MONOSPACE    → Math Monospace              (U+1D670 block)
"""

from __future__ import annotations

import enum
import string
from types import MappingProxyType
from typing import Mapping


class Style(str, enum.Enum):
    """Styled alphabets available for table lookup."""

    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "bold_italic"
    MONOSPACE = "monospace"


# ---------------------------------------------------------------------------
# Unicode Mathematical Alphanumeric Symbols offset tables
# (upper A, lower a, digit 0). Italic blocks have no digits.
# ---------------------------------------------------------------------------

_BLOCK_STARTS: dict[Style, tuple[int, int, int | None]] = {
    Style.BOLD: (0x1D5D4, 0x1D5EE, 0x1D7EC),  # 𝗔 𝗮 𝟬
    Style.ITALIC: (0x1D608, 0x1D622, None),  # 𝘈 𝘢
    Style.BOLD_ITALIC: (0x1D63C, 0x1D656, None),  # 𝘼 𝙖
    Style.MONOSPACE: (0x1D670, 0x1D68A, 0x1D7F6),  # 𝙰 𝚊 𝟶
}

# Combining marks placed after each visible scalar value.
STRIKETHROUGH = "\u0336"
UNDERLINE = "\u0332"

# Structural whitespace that never receives a combining mark.
_NO_OVERLAY = frozenset("\n\r\t")


def _build_map(upper_start: int, lower_start: int,
               digit_start: int | None) -> Mapping[str, str]:
    table: dict[str, str] = {}
    for offset, ch in enumerate(string.ascii_uppercase):
        table[ch] = chr(upper_start + offset)
    for offset, ch in enumerate(string.ascii_lowercase):
        table[ch] = chr(lower_start + offset)
    if digit_start is not None:
        for offset, ch in enumerate(string.digits):
            table[ch] = chr(digit_start + offset)
    return MappingProxyType(table)


STYLE_MAPS: Mapping[Style, Mapping[str, str]] = MappingProxyType(
    {style: _build_map(*starts) for style, starts in _BLOCK_STARTS.items()}
)

BOLD_MAP = STYLE_MAPS[Style.BOLD]
ITALIC_MAP = STYLE_MAPS[Style.ITALIC]
BOLD_ITALIC_MAP = STYLE_MAPS[Style.BOLD_ITALIC]
MONOSPACE_MAP = STYLE_MAPS[Style.MONOSPACE]


def lookup(style: Style, ch: str) -> str:
    """Return the styled form of ``ch``, or ``ch`` itself if it has none."""
    return STYLE_MAPS[Style(style)].get(ch, ch)


def apply_style_map(text: str, style: Style) -> str:
    """Map every scalar value of ``text`` through ``style``."""
    table = STYLE_MAPS[Style(style)]
    return "".join(table.get(ch, ch) for ch in text)


def to_bold(text: str) -> str:
    """Convert plain text to Math Sans-Serif Bold Unicode."""
    return apply_style_map(text, Style.BOLD)


def to_italic(text: str) -> str:
    """Convert plain text to Math Sans-Serif Italic Unicode."""
    return apply_style_map(text, Style.ITALIC)


def to_bold_italic(text: str) -> str:
    """Convert plain text to Math Sans-Serif Bold Italic Unicode."""
    return apply_style_map(text, Style.BOLD_ITALIC)


def to_monospace(text: str) -> str:
    """Convert plain text to Math Monospace Unicode."""
    return apply_style_map(text, Style.MONOSPACE)


def overlay(text: str, mark: str) -> str:
    """Append ``mark`` after every scalar value except LF, CR and tab.

    Repeated application stacks marks; nothing is deduplicated.
    """
    return "".join(ch if ch in _NO_OVERLAY else ch + mark for ch in text)
