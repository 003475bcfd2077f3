"""Diagnostics."""

from conflpy.diagnostics.codes import (
    LEXER_ILLEGAL_BOM,
    LEXER_ILLEGAL_CHARACTER,
    LEXER_INVALID_UTF8,
    LEXER_MALFORMED_NUMBER,
    LEXER_NUL_CHARACTER,
    LEXER_UNTERMINATED_STRING,
    PARSER_DUPLICATE_KEY,
    PARSER_EXPECTED_DELIMITER,
    PARSER_EXPECTED_TOKEN,
    PARSER_ILLEGAL_KEY_TYPE,
    PARSER_ILLEGAL_TOKEN,
    PARSER_MAX_DEPTH,
    PARSER_NESTED_DECORATOR,
    PARSER_TRAILING_CONTENT,
    PARSER_UNEXPECTED_CLOSER,
    DiagnosticSpec,
)
from conflpy.diagnostics.diagnostic import Diagnostic, Severity
from conflpy.diagnostics.error import ParseError
from conflpy.diagnostics.render import render_diagnostic
from conflpy.diagnostics.report import has_errors

__all__ = [
    "LEXER_ILLEGAL_BOM",
    "LEXER_ILLEGAL_CHARACTER",
    "LEXER_INVALID_UTF8",
    "LEXER_MALFORMED_NUMBER",
    "LEXER_NUL_CHARACTER",
    "LEXER_UNTERMINATED_STRING",
    "PARSER_DUPLICATE_KEY",
    "PARSER_EXPECTED_DELIMITER",
    "PARSER_EXPECTED_TOKEN",
    "PARSER_ILLEGAL_KEY_TYPE",
    "PARSER_ILLEGAL_TOKEN",
    "PARSER_MAX_DEPTH",
    "PARSER_NESTED_DECORATOR",
    "PARSER_TRAILING_CONTENT",
    "PARSER_UNEXPECTED_CLOSER",
    "Diagnostic",
    "DiagnosticSpec",
    "ParseError",
    "Severity",
    "has_errors",
    "render_diagnostic",
]
