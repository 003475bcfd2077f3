"""Lexer."""

from typing import Final

from conflpy.diagnostics import Diagnostic, DiagnosticSpec
from conflpy.diagnostics.codes import (
    LEXER_ILLEGAL_BOM,
    LEXER_ILLEGAL_CHARACTER,
    LEXER_INVALID_UTF8,
    LEXER_MALFORMED_NUMBER,
    LEXER_NUL_CHARACTER,
    LEXER_UNTERMINATED_STRING,
)
from conflpy.lexer.tokens import Token, TokenKind
from conflpy.text import TextRange, slice_text_range

EOF_CHAR: Final[str] = ""
BOM: Final[str] = "\ufeff"

WHITESPACE: Final[frozenset[str]] = frozenset(" \t\r\n")
PUNCTUATION: Final[frozenset[str]] = frozenset("{}[]=()")
STRING_DELIMITERS: Final[frozenset[str]] = frozenset("\"'")
HEX_DIGITS: Final[frozenset[str]] = frozenset("0123456789abcdefABCDEF")

SINGLE_CHAR_TOKENS: Final[dict[str, TokenKind]] = {
    "{": TokenKind.MAP_START,
    "}": TokenKind.MAP_END,
    "[": TokenKind.LIST_START,
    "]": TokenKind.LIST_END,
    "=": TokenKind.KEY_VALUE_DELIMITER,
    ")": TokenKind.DECORATOR_END,
}


class Lexer:
    """Scanner over a UTF-8 byte buffer.

    Each `next_token()` call returns one token. Failures never raise: they
    come back as an ILLEGAL token, with a matching diagnostic appended to
    `diagnostics`. Callers stop asking for tokens after ILLEGAL or EOF.
    """

    def __init__(self, source: bytes, *, allow_multiline_strings: bool = True) -> None:
        self._source = bytes(source)
        self._allow_multiline_strings = allow_multiline_strings
        # Offset of the current character and of the one after it.
        self._position = 0
        self._next_position = 0
        self._char = EOF_CHAR
        self._started = False
        self._line = 1
        self._line_start = 0
        # Set when the character at `_position` could not be decoded.
        self._decode_error: DiagnosticSpec | None = None
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> bytes:
        return self._source

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Diagnostics for every ILLEGAL token returned so far."""
        return self._diagnostics

    @property
    def line(self) -> int:
        return self._line

    @property
    def line_start(self) -> int:
        """Byte offset of the first character on the current line."""
        return self._line_start

    def next_token(self) -> Token:
        if not self._started:
            self._started = True
            if not self._advance():
                return self._illegal(self._position)
            if self._char == BOM and not self._advance():
                return self._illegal(self._position)

        while self._skip_whitespace() or self._skip_comment():
            pass
        if self._decode_error is not None:
            return self._illegal(self._position)

        start = self._position
        ch = self._char

        if ch == EOF_CHAR:
            return self._token(TokenKind.EOF, start)

        if ch.isdecimal():
            return self._lex_number()

        if ch.isalpha():
            return self._lex_word()

        if ch in STRING_DELIMITERS:
            return self._lex_string()

        kind = SINGLE_CHAR_TOKENS.get(ch)
        if kind is not None:
            # A decode failure on the following byte surfaces on the next call.
            self._advance()
            return self._token(kind, start)

        return self._illegal(start, LEXER_ILLEGAL_CHARACTER, text=repr(ch))

    def lex(self) -> list[Token]:
        """Lex up to and including the first EOF or ILLEGAL token."""
        tokens: list[Token] = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind.is_terminal:
                break
        return tokens

    def _lex_number(self) -> Token:
        start = self._position
        line = self._line
        seen_decimal = False
        is_hex = False
        digits = 0

        while not self._at_delimiter():
            ch = self._char
            if ch in ("x", "X") and self._position == start + 1 and self._source[start : start + 1] == b"0":
                is_hex = True
                digits = 0
            elif is_hex and ch in HEX_DIGITS:
                digits += 1
            elif not is_hex and ch.isdecimal():
                digits += 1
            elif ch == "." and not is_hex and not seen_decimal:
                seen_decimal = True
            else:
                return self._illegal(start, LEXER_MALFORMED_NUMBER, line=line)

            if not self._advance():
                return self._illegal(start, line=line)

        if is_hex and digits == 0:
            return self._illegal(start, LEXER_MALFORMED_NUMBER, line=line, end=self._position)

        return self._token(TokenKind.NUMBER, start, self._text(start, self._position), line=line)

    def _lex_word(self) -> Token:
        start = self._position
        while not self._at_delimiter():
            if not self._advance():
                return self._illegal(start)

        content = self._text(start, self._position)
        if self._char == "(":
            self._advance()
            return self._token(TokenKind.DECORATOR_START, start, content)

        return self._token(TokenKind.WORD, start, content)

    def _lex_string(self) -> Token:
        start = self._position
        line = self._line
        delimiter = self._char
        content: list[str] = []

        # Consume opening quote
        if not self._advance():
            return self._illegal(start, line=line)

        while self._char != delimiter:
            ch = self._char
            if ch == EOF_CHAR:
                return self._illegal(start, LEXER_UNTERMINATED_STRING, line=line)
            if ch == "\n" and not self._allow_multiline_strings:
                return self._illegal(start, LEXER_UNTERMINATED_STRING, line=line, end=self._position)
            if ch == "\\":
                # The escaped character is kept verbatim, backslash dropped.
                if not self._advance():
                    return self._illegal(start, line=line)
                ch = self._char
                if ch == EOF_CHAR:
                    return self._illegal(start, LEXER_UNTERMINATED_STRING, line=line)
            content.append(ch)
            if not self._advance():
                return self._illegal(start, line=line)

        # Consume closing quote
        self._advance()

        return self._token(TokenKind.STRING, start, "".join(content), line=line)

    def _skip_whitespace(self) -> bool:
        skipped = False
        while self._char in WHITESPACE and self._char != EOF_CHAR:
            skipped = True
            if not self._advance():
                break
        return skipped

    def _skip_comment(self) -> bool:
        if self._char != "#" or self._decode_error is not None:
            return False
        while self._char not in ("\n", EOF_CHAR):
            if not self._advance():
                break
        return True

    def _at_delimiter(self) -> bool:
        return self._char == EOF_CHAR or self._char in WHITESPACE or self._char in PUNCTUATION

    def _advance(self) -> bool:
        """Move to the next character, decoding one UTF-8 sequence.

        Returns False, leaving `_position` on the offending byte, when the
        next character is NUL, undecodable or a misplaced byte order mark.
        """
        if self._char == "\n":
            self._line += 1
            self._line_start = self._next_position

        if self._next_position >= len(self._source):
            self._position = len(self._source)
            self._char = EOF_CHAR
            return True

        position = self._next_position
        self._position = position
        lead = self._source[position]

        if lead == 0:
            return self._fail(LEXER_NUL_CHARACTER)

        if lead < 0x80:
            self._char = chr(lead)
            self._next_position = position + 1
            return True

        width = _utf8_width(lead)
        try:
            ch = self._source[position : position + width].decode("utf-8")
        except UnicodeDecodeError:
            return self._fail(LEXER_INVALID_UTF8)
        if width == 0 or len(ch) != 1:
            return self._fail(LEXER_INVALID_UTF8)
        if ch == BOM and position > 0:
            return self._fail(LEXER_ILLEGAL_BOM)

        self._char = ch
        self._next_position = position + width
        return True

    def _fail(self, spec: DiagnosticSpec) -> bool:
        self._decode_error = spec
        self._char = EOF_CHAR
        return False

    def _token(self, kind: TokenKind, start: int, content: str = "", *, line: int | None = None) -> Token:
        return Token(
            kind=kind,
            range=TextRange.from_offsets(start, self._position),
            content=content,
            line=self._line if line is None else line,
        )

    def _illegal(
        self,
        start: int,
        spec: DiagnosticSpec | None = None,
        *,
        line: int | None = None,
        end: int | None = None,
        **fields: object,
    ) -> Token:
        """Build an ILLEGAL token spanning the fragment consumed so far.

        A pending decode error takes precedence over `spec`: its span extends
        over the undecodable byte.
        """
        if self._decode_error is not None:
            spec = self._decode_error
            end = self._position + 1 if self._position < len(self._source) else self._position
        elif end is None:
            end = self._next_position if self._char != EOF_CHAR else self._position
        if spec is None:
            spec = LEXER_ILLEGAL_CHARACTER
        end = max(end, start)

        content = self._source[start:end].decode("utf-8", errors="replace")
        line = self._line if line is None else line
        if spec is LEXER_MALFORMED_NUMBER or spec is LEXER_ILLEGAL_CHARACTER:
            fields.setdefault("text", repr(content))

        token_range = TextRange.from_offsets(start, end)
        self._diagnostics.append(Diagnostic.from_spec(spec, token_range, line, **fields))
        return Token(TokenKind.ILLEGAL, token_range, content, line)

    def _text(self, start: int, end: int) -> str:
        return self._source[start:end].decode("utf-8")


def _utf8_width(lead: int) -> int:
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def token_text(source: bytes, token: Token) -> str:
    """Raw source text covered by a token."""
    if token.kind == TokenKind.EOF:
        return ""
    return slice_text_range(source, token.range).decode("utf-8", errors="replace")


def dump_tokens(tokens: list[Token], source: bytes, diagnostics: list[Diagnostic] | None = None) -> None:
    """Print token list with kind, range, line, content and raw text for debugging."""
    for i, tok in enumerate(tokens):
        text = token_text(source, tok)
        print(f"{i:03d} {tok.kind.name:<20} range={tok.range.as_tuple()} line={tok.line} content={tok.content!r} text={text!r}")

    if diagnostics is not None:
        print("\nDiagnostics:")
        for d in diagnostics:
            print(f"- {d.severity.upper()} {d.code} range={d.range.as_tuple()} message={d.message}")
