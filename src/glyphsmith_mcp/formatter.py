"""Markdown → Unicode Mathematical Symbol transcoder.

Converts a small subset of Markdown into plain text that renders styled
on platforms that only accept plain text (LinkedIn, X, chat clients).

Block-level conversions (per line):
    # Heading          → bold text, heading level dropped
    - item / * / +     → • ◦ ▪ ▫ bullets cycled by nesting level
    - [ ] / - [x] task → ☐ / ☑
    1. item            → bold numeral, original number kept
    --- / *** / ___    → ---

Inline conversions (whole document, in this order):
    `monospace`        → Math Monospace
    ***bold italic***  → Math Sans-Serif Bold Italic (also ___x___)
    **bold**           → Math Sans-Serif Bold        (also __x__)
    *italic*           → Math Sans-Serif Italic      (also _x_)
    ~~strike~~         → each character followed by U+0336
    <u>underline</u>   → each character followed by U+0332

Unmatched delimiters are left as-is. The conversion never raises.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Union

from glyphsmith_mcp.style_maps import (
    STRIKETHROUGH,
    UNDERLINE,
    overlay,
    to_bold,
    to_bold_italic,
    to_italic,
    to_monospace,
)

logger = logging.getLogger(__name__)

BULLETS = ("•", "◦", "▪", "▫")
CHECKBOX_OPEN = "☐"  # U+2610
CHECKBOX_CHECKED = "☑"  # U+2611
RULE = "---"
TAB_WIDTH = 4
INDENT_PER_LEVEL = 2

# Private Use Area placeholders (U+E000..U+F8FF) shield code spans from the
# inline passes. Every private-use character in the working text is a
# placeholder, so restoration can be positional.
_PUA_START = 0xE000
_PUA_SIZE = 0xF8FF - 0xE000 + 1

_PROTECTED_RE = re.compile(r"`([^`]+)`|[\uE000-\uF8FF]")
_PLACEHOLDER_RE = re.compile(r"[\uE000-\uF8FF]")

_HEADING_RE = re.compile(r"^#+\s")
_HEADING_PREFIX_RE = re.compile(r"^#+\s*")
_UNORDERED_RE = re.compile(r"^(\s*)([*+\-])\s+(.*)$")
_TASK_RE = re.compile(r"^\[([ xX])\]\s+(.*)$")
_ORDERED_RE = re.compile(r"^(\s*)([0-9]+)\.\s+(.*)$")
_RULE_RE = re.compile(r"^(?:---|\*\*\*|___)\s*$")

_BOLD_ITALIC_RE = re.compile(r"\*\*\*(.*?)\*\*\*|___(.*?)___")
_BOLD_RE = re.compile(r"\*\*(.*?)\*\*|__(.*?)__")
_ITALIC_RE = re.compile(r"\*([^*]+)\*|_([^_]+)_")
_STRIKETHROUGH_RE = re.compile(r"~~(.*?)~~")
_UNDERLINE_RE = re.compile(r"<u>(.*?)</u>")


# ---------------------------------------------------------------------------
# Line classification
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Heading:
    text: str


@dataclass(frozen=True)
class UnorderedItem:
    """A bullet line. ``checked`` is None unless the item is a task."""

    indent: int
    level: int
    content: str
    checked: bool | None = None


@dataclass(frozen=True)
class OrderedItem:
    indent: int
    number: str
    content: str


@dataclass(frozen=True)
class Rule:
    pass


@dataclass(frozen=True)
class Plain:
    text: str


LineKind = Union[Heading, UnorderedItem, OrderedItem, Rule, Plain]


def _indent_width(raw: str) -> int:
    return len(raw.replace("\t", " " * TAB_WIDTH))


def classify_line(line: str) -> LineKind:
    """Classify a single line (without its line terminator)."""
    if _HEADING_RE.match(line):
        return Heading(_HEADING_PREFIX_RE.sub("", line, count=1))

    match = _UNORDERED_RE.match(line)
    if match:
        width = _indent_width(match.group(1))
        level = width // INDENT_PER_LEVEL
        content = match.group(3)
        task = _TASK_RE.match(content)
        if task:
            return UnorderedItem(width, level, task.group(2),
                                 checked=task.group(1) != " ")
        return UnorderedItem(width, level, content)

    match = _ORDERED_RE.match(line)
    if match:
        return OrderedItem(_indent_width(match.group(1)), match.group(2),
                           match.group(3))

    if _RULE_RE.match(line):
        return Rule()

    return Plain(line)


def render_line(kind: LineKind) -> str:
    """Render a classified line back to text."""
    if isinstance(kind, Heading):
        return to_bold(kind.text)
    if isinstance(kind, UnorderedItem):
        if kind.checked is None:
            marker = BULLETS[kind.level % len(BULLETS)]
        else:
            marker = CHECKBOX_CHECKED if kind.checked else CHECKBOX_OPEN
        return f"{' ' * kind.indent}{marker} {kind.content}"
    if isinstance(kind, OrderedItem):
        return f"{' ' * kind.indent}{to_bold(kind.number)}. {kind.content}"
    if isinstance(kind, Rule):
        return RULE
    return kind.text


# ---------------------------------------------------------------------------
# Passes
# ---------------------------------------------------------------------------


def _protect(text: str) -> tuple[str, list[str]]:
    """Swap code spans (and stray private-use characters) for placeholders."""
    protected: list[str] = []

    def _stash(match: re.Match[str]) -> str:
        content = match.group(1)
        protected.append(match.group(0) if content is None else to_monospace(content))
        return chr(_PUA_START + (len(protected) - 1) % _PUA_SIZE)

    return _PROTECTED_RE.sub(_stash, text), protected


def _restore(text: str, protected: list[str]) -> str:
    slots = iter(protected)
    return _PLACEHOLDER_RE.sub(lambda m: next(slots, m.group(0)), text)


def _transcode_blocks(text: str) -> str:
    lines = []
    for line in text.split("\n"):
        ending = ""
        if line.endswith("\r"):
            line, ending = line[:-1], "\r"
        lines.append(render_line(classify_line(line)) + ending)
    return "\n".join(lines)


def _inner(match: re.Match[str]) -> str:
    return match.group(1) or match.group(2) or ""


def _transcode_inline(text: str) -> str:
    # Longer delimiters first so *** is never read as ** plus *.
    text = _BOLD_ITALIC_RE.sub(lambda m: to_bold_italic(_inner(m)), text)
    text = _BOLD_RE.sub(lambda m: to_bold(_inner(m)), text)
    text = _ITALIC_RE.sub(lambda m: to_italic(_inner(m)), text)
    text = _STRIKETHROUGH_RE.sub(lambda m: overlay(m.group(1), STRIKETHROUGH), text)
    text = _UNDERLINE_RE.sub(lambda m: overlay(m.group(1), UNDERLINE), text)
    return text


def markdown_to_unicode(text: str) -> str:
    """Convert a Markdown document to styled plain-text Unicode.

    Processing order matters:
    1. Code spans are converted to monospace and hidden behind placeholders.
    2. Each line is classified (heading, list item, rule, plain) and rendered.
    3. Inline markers are replaced, longest delimiters first.
    4. Placeholders are swapped back for their converted code spans.

    Non-alphanumeric characters pass through unchanged and malformed markup
    is kept verbatim.

    Args:
        text: Markdown source.

    Returns:
        The transcoded text.
    """
    if not text:
        return ""

    working, protected = _protect(text)
    working = _transcode_blocks(working)
    working = _transcode_inline(working)
    result = _restore(working, protected)

    logger.debug(
        "Transcoded %d chars to %d chars (%d protected spans)",
        len(text), len(result), len(protected),
    )
    return result
