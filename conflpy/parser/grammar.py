"""Confl grammar routines that build the AST bottom-up."""

from conflpy.ast import ListNode, MapEntry, MapNode, Node, NodeKind, ScalarNode
from conflpy.diagnostics.codes import (
    PARSER_DUPLICATE_KEY,
    PARSER_EXPECTED_DELIMITER,
    PARSER_EXPECTED_TOKEN,
    PARSER_ILLEGAL_KEY_TYPE,
    PARSER_ILLEGAL_TOKEN,
    PARSER_NESTED_DECORATOR,
    PARSER_TRAILING_CONTENT,
    PARSER_UNEXPECTED_CLOSER,
)
from conflpy.lexer import Token, TokenKind
from conflpy.parser.parser import Parser

SCALAR_TOKEN_KINDS: dict[TokenKind, NodeKind] = {
    TokenKind.NUMBER: NodeKind.NUMBER,
    TokenKind.WORD: NodeKind.WORD,
    TokenKind.STRING: NodeKind.STRING,
}

ILLEGAL_KEY_TYPES: dict[TokenKind, str] = {
    TokenKind.NUMBER: "number",
    TokenKind.MAP_START: "map",
    TokenKind.LIST_START: "list",
}


def parse_document(parser: Parser) -> MapNode:
    """Parse a whole document. The root map's braces are optional."""
    first = parser.peek()

    if first.kind == TokenKind.EOF:
        parser.token()
        return MapNode()

    if first.kind != TokenKind.MAP_START:
        return parse_map(parser, terminator=TokenKind.EOF)

    parser.token()
    root = parse_map(parser, terminator=TokenKind.MAP_END)
    trailing = parser.token()
    if trailing.kind != TokenKind.EOF:
        parser.error(PARSER_TRAILING_CONTENT, trailing, found=trailing.describe())
    return root


def parse_map(parser: Parser, terminator: TokenKind, *, decorator: str = "") -> MapNode:
    entries: list[MapEntry] = []
    seen: set[str] = set()

    while True:
        token = parser.token()
        if token.kind == terminator:
            return MapNode(entries=tuple(entries), decorator=decorator)
        if token.kind.is_closer:
            parser.error(
                PARSER_UNEXPECTED_CLOSER,
                token,
                found=token.describe(),
                expected=terminator.description,
            )

        key, key_token = parse_key(parser, token)
        if key.value in seen:
            parser.error(PARSER_DUPLICATE_KEY, key_token, key=key.value)
        seen.add(key.value)

        delimiter = parser.token()
        if delimiter.kind != TokenKind.KEY_VALUE_DELIMITER:
            parser.error(PARSER_EXPECTED_DELIMITER, delimiter, found=delimiter.describe())

        value = parse_value(parser, parser.token())
        entries.append(MapEntry(key=key, value=value))


def parse_key(parser: Parser, token: Token, *, decorator: str = "") -> tuple[ScalarNode, Token]:
    """Parse a map key starting at `token`.

    Returns the key and the token it came from, so duplicate-key errors
    point at the key text rather than at its decorator.
    """
    if token.kind in (TokenKind.WORD, TokenKind.STRING):
        return ScalarNode(SCALAR_TOKEN_KINDS[token.kind], token.content, decorator), token

    if token.kind in ILLEGAL_KEY_TYPES:
        parser.error(PARSER_ILLEGAL_KEY_TYPE, token, key_type=ILLEGAL_KEY_TYPES[token.kind])

    if token.kind == TokenKind.DECORATOR_START:
        if decorator:
            parser.error(PARSER_NESTED_DECORATOR, token, label=decorator)
        inner = parser.token()
        if inner.kind.is_closer:
            parser.error(PARSER_UNEXPECTED_CLOSER, inner, found=inner.describe(), expected="a key")
        key, key_token = parse_key(parser, inner, decorator=token.content)
        _expect_decorator_end(parser)
        return key, key_token

    parser.error(PARSER_ILLEGAL_TOKEN, token, found=token.describe())


def parse_value(parser: Parser, token: Token, *, decorator: str = "") -> Node:
    """Parse one value of any type starting at `token`."""
    match token.kind:
        case TokenKind.NUMBER | TokenKind.WORD | TokenKind.STRING:
            return ScalarNode(SCALAR_TOKEN_KINDS[token.kind], token.content, decorator)

        case TokenKind.MAP_START:
            with parser.nested(token):
                return parse_map(parser, terminator=TokenKind.MAP_END, decorator=decorator)

        case TokenKind.LIST_START:
            with parser.nested(token):
                return parse_list(parser, decorator=decorator)

        case TokenKind.DECORATOR_START:
            if decorator:
                parser.error(PARSER_NESTED_DECORATOR, token, label=decorator)
            value = parse_value(parser, parser.token(), decorator=token.content)
            _expect_decorator_end(parser)
            return value

        case kind if kind.is_closer:
            parser.error(PARSER_UNEXPECTED_CLOSER, token, found=token.describe(), expected="a value")

        case _:
            parser.error(PARSER_ILLEGAL_TOKEN, token, found=token.describe())


def parse_list(parser: Parser, *, decorator: str = "") -> ListNode:
    items: list[Node] = []

    while True:
        token = parser.token()
        if token.kind == TokenKind.LIST_END:
            return ListNode(items=tuple(items), decorator=decorator)
        if token.kind.is_closer:
            parser.error(
                PARSER_UNEXPECTED_CLOSER,
                token,
                found=token.describe(),
                expected=TokenKind.LIST_END.description,
            )
        items.append(parse_value(parser, token))


def _expect_decorator_end(parser: Parser) -> None:
    token = parser.token()
    if token.kind == TokenKind.DECORATOR_END:
        return
    spec = PARSER_UNEXPECTED_CLOSER if token.kind.is_closer else PARSER_EXPECTED_TOKEN
    parser.error(spec, token, found=token.describe(), expected=TokenKind.DECORATOR_END.description)
