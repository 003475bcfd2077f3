"""High-level parse entrypoint for Confl source."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

from conflpy.ast import MapNode
from conflpy.diagnostics import ParseError
from conflpy.lexer import BufferedLexer, Lexer
from conflpy.parser.grammar import parse_document
from conflpy.parser.options import ParserOptions
from conflpy.parser.parser import Parser

if TYPE_CHECKING:
    from conflpy.pipeline import ConflParseResult

Source: TypeAlias = bytes | bytearray | memoryview | str


def as_source_bytes(data: Source) -> bytes:
    """Normalize parser input to bytes; text is encoded as UTF-8."""
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def parse(data: Source, options: ParserOptions | None = None) -> MapNode:
    """Parse a document into its root map.

    Raises `ParseError` at the first lexical, structural or semantic error.
    """
    source = as_source_bytes(data)
    resolved_options = options or ParserOptions()

    lexer = Lexer(source, allow_multiline_strings=resolved_options.allow_multiline_strings)
    parser = Parser(BufferedLexer(lexer), options=resolved_options)
    try:
        return parse_document(parser)
    except RecursionError:
        # `max_depth` set beyond what the interpreter stack allows.
        parser.exhausted()


def parse_result(data: Source, options: ParserOptions | None = None) -> ConflParseResult:
    """Like `parse`, but return the error in a result carrier instead of raising."""
    from conflpy.pipeline import ConflParseResult

    source = as_source_bytes(data)
    resolved_options = options or ParserOptions()
    try:
        root = parse(source, options=resolved_options)
    except ParseError as error:
        return ConflParseResult(source=source, root=None, error=error, options=resolved_options)
    return ConflParseResult(source=source, root=root, error=None, options=resolved_options)
