"""Glyphsmith: Markdown to styled plain-text Unicode."""

from glyphsmith_mcp.formatter import markdown_to_unicode
from glyphsmith_mcp.selection import SelectionStyle, apply_selection_style

__version__ = "0.1.0"

__all__ = [
    "SelectionStyle",
    "__version__",
    "apply_selection_style",
    "markdown_to_unicode",
]
