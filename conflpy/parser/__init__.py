"""Parser (token cursor + recursive-descent grammar)."""

from conflpy.parser.confl import Source, as_source_bytes, parse, parse_result
from conflpy.parser.grammar import (
    parse_document,
    parse_key,
    parse_list,
    parse_map,
    parse_value,
)
from conflpy.parser.options import DEFAULT_MAX_DEPTH, ParserOptions
from conflpy.parser.parser import Parser

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "Parser",
    "ParserOptions",
    "Source",
    "as_source_bytes",
    "parse",
    "parse_document",
    "parse_key",
    "parse_list",
    "parse_map",
    "parse_result",
    "parse_value",
]
