"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Final

from conflpy.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    ILLEGAL = 0
    EOF = 1

    # -------------------------
    # Literals
    # -------------------------
    NUMBER = 10
    WORD = 11
    STRING = 12  # quoted, content is unescaped

    # -------------------------
    # Punctuation
    # -------------------------
    MAP_START = 20  # {
    MAP_END = 21  # }
    LIST_START = 22  # [
    LIST_END = 23  # ]
    KEY_VALUE_DELIMITER = 24  # =
    DECORATOR_START = 25  # word(
    DECORATOR_END = 26  # )

    @property
    def is_terminal(self) -> bool:
        """The lexer must not be asked for more tokens after this kind."""
        return self in (TokenKind.ILLEGAL, TokenKind.EOF)

    @property
    def is_closer(self) -> bool:
        return self in (
            TokenKind.MAP_END,
            TokenKind.LIST_END,
            TokenKind.DECORATOR_END,
            TokenKind.EOF,
        )

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: Final[dict[TokenKind, str]] = {
    TokenKind.ILLEGAL: "illegal token",
    TokenKind.EOF: "end of input",
    TokenKind.NUMBER: "number",
    TokenKind.WORD: "word",
    TokenKind.STRING: "string",
    TokenKind.MAP_START: "`{`",
    TokenKind.MAP_END: "`}`",
    TokenKind.LIST_START: "`[`",
    TokenKind.LIST_END: "`]`",
    TokenKind.KEY_VALUE_DELIMITER: "`=`",
    TokenKind.DECORATOR_START: "decorator",
    TokenKind.DECORATOR_END: "`)`",
}


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token.

    `range` covers the raw source bytes (quotes and the decorator's `(`
    included); `content` is the decoded payload, empty for punctuation.
    """

    kind: TokenKind
    range: TextRange
    content: str = ""
    line: int = 1

    @property
    def offset(self) -> int:
        return self.range.start.to_int()

    def describe(self) -> str:
        """Short human-readable form used in parser messages."""
        if self.kind in (TokenKind.NUMBER, TokenKind.WORD, TokenKind.DECORATOR_START):
            return f"{self.kind.description} `{self.content}`"
        if self.kind == TokenKind.STRING:
            return f"string {self.content!r}"
        return self.kind.description

