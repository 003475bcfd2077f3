"""Lexer."""

from conflpy.lexer.buffered_lexer import BufferedLexer
from conflpy.lexer.lexer import Lexer, dump_tokens, token_text
from conflpy.lexer.tokens import Token, TokenKind

__all__ = [
    "BufferedLexer",
    "Lexer",
    "Token",
    "TokenKind",
    "dump_tokens",
    "token_text",
]
