"""Fail-fast parser core."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import NoReturn

from conflpy.diagnostics import Diagnostic, DiagnosticSpec, ParseError
from conflpy.diagnostics.codes import LEXER_ILLEGAL_CHARACTER, PARSER_MAX_DEPTH
from conflpy.lexer import BufferedLexer, Token, TokenKind
from conflpy.parser.options import ParserOptions


class Parser:
    """Token cursor shared by the grammar routines.

    Owns the lookahead buffer and the nesting depth of one parse. Errors are
    raised as `ParseError` at the first problem; there is no recovery.
    """

    def __init__(self, source: BufferedLexer, options: ParserOptions | None = None) -> None:
        self._source = source
        self._options = options or ParserOptions()
        self._depth = 0
        # Deepest nesting reached and the token that opened it.
        self._deepest = 0
        self._deepest_opener: Token | None = None

    @property
    def source(self) -> BufferedLexer:
        return self._source

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def text(self) -> bytes:
        return self._source.source

    @property
    def depth(self) -> int:
        return self._depth

    def token(self) -> Token:
        """Consume the next token, raising the lexer's diagnostic for ILLEGAL."""
        token = self._source.token()
        if token.kind == TokenKind.ILLEGAL:
            self.illegal(token)
        return token

    def peek(self) -> Token:
        return self._source.peek(1)[0]

    def at(self, kind: TokenKind) -> bool:
        return self.peek().kind == kind

    def error(self, spec: DiagnosticSpec, token: Token, **fields: object) -> NoReturn:
        raise ParseError(Diagnostic.from_spec(spec, token.range, token.line, **fields), self.text)

    def illegal(self, token: Token) -> NoReturn:
        for diagnostic in reversed(self._source.diagnostics):
            if diagnostic.range == token.range:
                raise ParseError(diagnostic, self.text)
        self.error(LEXER_ILLEGAL_CHARACTER, token, text=repr(token.content))

    @contextmanager
    def nested(self, opener: Token) -> Iterator[None]:
        """Track one level of map/list nesting opened by `opener`."""
        if self._depth >= self._options.max_depth:
            self.error(PARSER_MAX_DEPTH, opener, max_depth=self._options.max_depth)
        self._depth += 1
        if self._depth > self._deepest:
            self._deepest = self._depth
            self._deepest_opener = opener
        try:
            yield
        finally:
            self._depth -= 1

    def exhausted(self) -> NoReturn:
        """Report a parse that ran out of interpreter stack as a depth error.

        The error points at the deepest opener reached before the stack gave
        out, which can be shallower than `max_depth`.
        """
        if self._deepest_opener is None:
            raise RecursionError("Parser ran out of stack outside nested containers")
        self.error(PARSER_MAX_DEPTH, self._deepest_opener, max_depth=self._deepest)
