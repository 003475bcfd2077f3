"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None

    def format(self, **fields: object) -> str:
        """Fill the `{name}` placeholders of the message template."""
        if not fields:
            return self.message
        return self.message.format(**fields)


LEXER_ILLEGAL_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_ILLEGAL_CHARACTER",
    message="Illegal character {text}",
    hint="Quote the value if it contains punctuation.",
    severity="error",
    category="lexer",
)

LEXER_NUL_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_NUL_CHARACTER",
    message="Illegal character \\0",
    severity="error",
    category="lexer",
)

LEXER_INVALID_UTF8: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INVALID_UTF8",
    message="Illegal UTF-8 encoding",
    hint="Documents must be UTF-8 encoded.",
    severity="error",
    category="lexer",
)

LEXER_ILLEGAL_BOM: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_ILLEGAL_BOM",
    message="Illegal byte order mark",
    hint="A byte order mark is only allowed at the very start of a document.",
    severity="error",
    category="lexer",
)

LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string literal",
    hint="Close the string with the same quote it was opened with.",
    severity="error",
    category="lexer",
)

LEXER_MALFORMED_NUMBER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_MALFORMED_NUMBER",
    message="Malformed number {text}",
    hint="Numbers take at most one decimal point; quote the value to use it as text.",
    severity="error",
    category="lexer",
)

PARSER_EXPECTED_DELIMITER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_DELIMITER",
    message="Illegal token {found}, expected map delimiter `=`",
    severity="error",
    category="parser",
)

PARSER_EXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_TOKEN",
    message="Illegal token {found}, expected {expected}",
    severity="error",
    category="parser",
)

PARSER_UNEXPECTED_CLOSER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_CLOSER",
    message="Unexpected {found}, expected {expected}",
    severity="error",
    category="parser",
)

PARSER_TRAILING_CONTENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_TRAILING_CONTENT",
    message="Unexpected {found} after the document map",
    hint="A document wrapped in `{ }` must end at its closing brace.",
    severity="error",
    category="parser",
)

PARSER_MAX_DEPTH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MAX_DEPTH",
    message="Maximum nesting depth of {max_depth} exceeded",
    severity="error",
    category="parser",
)

PARSER_ILLEGAL_KEY_TYPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_ILLEGAL_KEY_TYPE",
    message="Illegal key type {key_type}, map keys must be words or strings",
    severity="error",
    category="parser",
)

PARSER_DUPLICATE_KEY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_DUPLICATE_KEY",
    message="Duplicate key {key!r}",
    hint="Keys must be unique within one map.",
    severity="error",
    category="parser",
)

PARSER_NESTED_DECORATOR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_NESTED_DECORATOR",
    message="Decorator `{label}` cannot wrap another decorator",
    hint="A value takes at most one decorator.",
    severity="error",
    category="parser",
)

PARSER_ILLEGAL_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_ILLEGAL_TOKEN",
    message="Illegal token {found}",
    severity="error",
    category="parser",
)
