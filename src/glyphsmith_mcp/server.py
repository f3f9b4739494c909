"""Glyphsmith-mcp: FastMCP server for Markdown → styled Unicode text.

Exposes the transcoder, selection styling and Markdown authoring helpers
as tools. All tools are pure text transforms; nothing is stored.
"""

from __future__ import annotations

import logging
from typing import Any

from fastmcp import FastMCP

logger = logging.getLogger(__name__)

mcp = FastMCP("Glyphsmith")


class InputTooLargeError(ValueError):
    """Raised when tool input exceeds the configured size limit."""

    def __init__(self, length: int, limit: int):
        self.length = length
        self.limit = limit
        super().__init__(
            f"Input is {length} characters (max {limit}). "
            f"Shorten by {length - limit} characters."
        )


# ---------------------------------------------------------------------------
# Settings singleton
# ---------------------------------------------------------------------------

_settings = None


def get_settings():
    """Get or create the Settings singleton."""
    global _settings
    if _settings is not None:
        return _settings
    from glyphsmith_mcp.config import Settings

    _settings = Settings()
    return _settings


def _check_size(text: str) -> None:
    """Raise InputTooLargeError if ``text`` is over the configured limit."""
    limit = get_settings().glyphsmith_max_input_chars
    if len(text) > limit:
        raise InputTooLargeError(len(text), limit)


def _rejected(tool_name: str, exc: Exception) -> dict[str, Any]:
    logger.warning("%s rejected: %s", tool_name, exc)
    return {"error": str(exc)}


def _edit_result(edit) -> dict[str, Any]:
    return {"text": edit.text, "start": edit.start, "end": edit.end}


# ---------------------------------------------------------------------------
# MCP Tools
# ---------------------------------------------------------------------------


@mcp.tool()
async def health() -> dict:
    """Health check: returns service version and status."""
    import importlib.metadata as _meta

    from glyphsmith_mcp import __version__

    versions: dict[str, str] = {"glyphsmith_mcp": __version__}
    try:
        versions["fastmcp"] = _meta.version("fastmcp")
    except _meta.PackageNotFoundError:
        versions["fastmcp"] = "unknown"

    return {
        "service": "glyphsmith-mcp",
        "version": __version__,
        "versions": versions,
        "status": "ok",
    }


@mcp.tool()
async def transcode_markdown(markdown: str) -> dict[str, Any]:
    """Convert Markdown to plain text styled with Unicode characters.

    The result pastes anywhere that only accepts plain text:

        **bold**          → 𝗯𝗼𝗹𝗱
        *italic*          → 𝘪𝘵𝘢𝘭𝘪𝘤
        ***bold italic*** → 𝙗𝙤𝙡𝙙 𝙞𝙩𝙖𝙡𝙞𝙘
        `monospace`       → 𝚖𝚘𝚗𝚘𝚜𝚙𝚊𝚌𝚎
        ~~strike~~        → s̶t̶r̶i̶k̶e̶
        <u>under</u>      → u̲n̲d̲e̲r̲

    Headings become bold, list items get bullets (• ◦ ▪ ▫ by nesting),
    task items become ☐/☑ and ordered lists keep their numbers in bold.

    Args:
        markdown: Markdown source.

    Returns:
        text: The converted text.
        length: Its length in code points.
    """
    from glyphsmith_mcp.formatter import markdown_to_unicode

    try:
        _check_size(markdown)
    except InputTooLargeError as exc:
        return _rejected("transcode_markdown", exc)

    text = markdown_to_unicode(markdown)
    return {"text": text, "length": len(text)}


@mcp.tool()
async def apply_selection_style(fragment: str, style: str) -> dict[str, Any]:
    """Style an already-converted fragment of text.

    Args:
        fragment: The selected text.
        style: One of "bold", "italic", "bold_italic", "underline".

    Returns:
        text: The styled fragment.
        length: Its length in code points.
    """
    from glyphsmith_mcp import selection

    try:
        _check_size(fragment)
        text = selection.apply_selection_style(fragment, selection.SelectionStyle(style))
    except ValueError as exc:
        return _rejected("apply_selection_style", exc)

    return {"text": text, "length": len(text)}


@mcp.tool()
async def style_selection(text: str, start: int, end: int, style: str) -> dict[str, Any]:
    """Style ``text[start:end]`` in place and return the updated text.

    Args:
        text: The full converted text.
        start: Selection start (code-point offset).
        end: Selection end (code-point offset, exclusive).
        style: One of "bold", "italic", "bold_italic", "underline".

    Returns:
        text: The full text with the selection styled.
        start/end: The selection covering the styled span.
    """
    from glyphsmith_mcp import selection

    try:
        _check_size(text)
        edit = selection.style_selection(text, start, end, selection.SelectionStyle(style))
    except ValueError as exc:
        return _rejected("style_selection", exc)

    return _edit_result(edit)


@mcp.tool()
async def wrap_selection(text: str, start: int, end: int, marker: str) -> dict[str, Any]:
    """Wrap ``text[start:end]`` of a Markdown source in an inline marker.

    Args:
        text: The Markdown source.
        start: Selection start (code-point offset).
        end: Selection end (code-point offset, exclusive).
        marker: One of "bold", "italic", "bold_italic", "code",
                "strikethrough", "underline".

    Returns:
        text: The updated Markdown source.
        start/end: The selection, still covering the original characters.
    """
    from glyphsmith_mcp import editing

    if marker not in editing.MARKERS:
        return _rejected(
            "wrap_selection",
            ValueError(f"Unknown marker {marker!r}. Expected one of: {', '.join(editing.MARKERS)}."),
        )
    prefix, suffix = editing.MARKERS[marker]

    try:
        _check_size(text)
        edit = editing.wrap_selection(text, start, end, prefix, suffix)
    except ValueError as exc:
        return _rejected("wrap_selection", exc)

    return _edit_result(edit)


@mcp.tool()
async def format_list(text: str, start: int, end: int, ordered: bool = False) -> dict[str, Any]:
    """Turn the lines covered by a selection into a Markdown list.

    Args:
        text: The Markdown source.
        start: Selection start (code-point offset).
        end: Selection end (code-point offset, exclusive).
        ordered: Number the items (1., 2., ...) instead of using "* ".

    Returns:
        text: The updated Markdown source.
        start/end: The selection covering the rewritten lines.
    """
    from glyphsmith_mcp import editing

    try:
        _check_size(text)
        edit = editing.format_list(text, start, end, ordered=ordered)
    except ValueError as exc:
        return _rejected("format_list", exc)

    return _edit_result(edit)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """Entry point for the Glyphsmith MCP server."""
    level = get_settings().glyphsmith_log_level.upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO))
    logger.info("Starting Glyphsmith MCP server")
    mcp.run()


if __name__ == "__main__":
    main()
