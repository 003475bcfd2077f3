"""Byte offsets, ranges and line lookup over source buffers."""

from conflpy.text.text import TextRange, TextSize, line_bounds, line_number, slice_text_range

__all__ = [
    "TextRange",
    "TextSize",
    "line_bounds",
    "line_number",
    "slice_text_range",
]
