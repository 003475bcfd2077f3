"""Line-numbered, caret-annotated rendering of diagnostics against their source."""

from typing import Final

from conflpy.text import TextRange, line_bounds, line_number

DEFAULT_WINDOW: Final[int] = 72
"""Maximum number of source characters shown around the offending span."""

EOF_MARKER: Final[str] = "(EOF)"
ELLIPSIS: Final[str] = "..."


def render_diagnostic(
    message: str,
    range: TextRange,
    source: bytes,
    *,
    line: int | None = None,
    window: int = DEFAULT_WINDOW,
) -> str:
    """Render `message` with the source line holding `range` and a caret under it.

    Output shape::

        line 1: Unexpected `}`, expected end of input
          1 | test=23 "also"=this}
            |                    ^

    Empty spans are widened to one character. A span at the end of the
    source points at an explicit `(EOF)` marker appended to the snippet.
    """
    offset = min(range.start.to_int(), len(source))
    at_eof = offset >= len(source)
    if line is None:
        line = line_number(source, offset)

    line_start, line_end = line_bounds(source, offset)
    span_end = min(max(range.end.to_int(), offset), line_end)

    text = _decode(source[line_start:line_end])
    column = len(_decode(source[line_start:offset]))
    width = max(len(_decode(source[offset:span_end])), 1)

    if at_eof:
        text = text + EOF_MARKER
        width = 1

    snippet, caret_column, width = _clip(text, column, width, window)

    gutter = str(line)
    pad = " " * len(gutter)
    return "\n".join(
        (
            f"line {line}: {message}",
            f"  {gutter} | {snippet}",
            f"  {pad} | {' ' * caret_column}{'^' * width}",
        )
    )


def _clip(text: str, column: int, width: int, window: int) -> tuple[str, int, int]:
    if len(text) <= window:
        return text, column, width

    start = max(0, column - window // 3)
    end = min(len(text), start + window)
    start = max(0, end - window)

    prefix = ELLIPSIS if start > 0 else ""
    suffix = ELLIPSIS if end < len(text) else ""
    width = max(min(width, end - column), 1)
    return prefix + text[start:end] + suffix, column - start + len(prefix), width


def _decode(data: bytes) -> str:
    # Tabs would break caret alignment.
    return data.decode("utf-8", errors="replace").replace("\t", " ")
