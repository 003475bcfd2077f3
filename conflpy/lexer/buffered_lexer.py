"""Buffered lexer lookahead support."""

from collections import deque
from itertools import islice

from conflpy.diagnostics import Diagnostic
from conflpy.lexer.lexer import Lexer
from conflpy.lexer.tokens import Token


class BufferedLexer:
    """Lexer wrapper for bounded lookahead.

    Tokens fetched by `peek` wait in a FIFO until `token` consumes them, so
    the wrapped lexer is still asked for each token exactly once.
    """

    def __init__(self, lexer: Lexer) -> None:
        self._inner = lexer
        self._lookahead: deque[Token] = deque()

    @property
    def inner(self) -> Lexer:
        return self._inner

    @property
    def source(self) -> bytes:
        return self._inner.source

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._inner.diagnostics

    def token(self) -> Token:
        """Consume and return the next token."""
        if self._lookahead:
            return self._lookahead.popleft()
        return self._inner.next_token()

    def peek(self, n: int = 1) -> list[Token]:
        """Return up to `n` upcoming tokens without consuming them.

        Fewer than `n` come back when EOF (or an ILLEGAL token) is reached
        first; the terminal token itself is included.
        """
        if n <= 0:
            raise ValueError("n must be >= 1")

        while len(self._lookahead) < n:
            if self._lookahead and self._lookahead[-1].kind.is_terminal:
                break
            self._lookahead.append(self._inner.next_token())

        return list(islice(self._lookahead, n))

    def nth(self, n: int) -> Token | None:
        """The n-th upcoming token (1-based), or None past the end of input."""
        tokens = self.peek(n)
        if len(tokens) < n:
            return None
        return tokens[n - 1]
