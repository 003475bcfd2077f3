from collections.abc import Iterator

import pytest

from conflpy.ast import ListNode, MapNode, Node, NodeKind, ScalarNode
from conflpy.diagnostics import ParseError
from conflpy.lexer import BufferedLexer, Lexer
from conflpy.parser import Parser, ParserOptions, parse, parse_document
from tests._debug import debug_dump_ast, debug_dump_diagnostics
from tests._shared_cases import HOSTS_EXAMPLE, INVALID_CASES, VALID_CASES, WIFI_EXAMPLE, ConflCase, case_id


def _parse(source: str, options: ParserOptions | None = None) -> MapNode:
    data = source.encode("utf-8")
    root = parse(data, options=options)
    debug_dump_ast("parse", root, data)
    return root


def _parse_error(source: str, options: ParserOptions | None = None) -> ParseError:
    data = source.encode("utf-8")
    with pytest.raises(ParseError) as excinfo:
        parse(data, options=options)
    debug_dump_diagnostics("parse_error", [excinfo.value.diagnostic], data)
    return excinfo.value


def _walk(node: Node) -> Iterator[Node]:
    yield node
    for child in node.children:
        yield from _walk(child)


@pytest.mark.parametrize("case", VALID_CASES, ids=case_id)
def test_valid_cases_parse(case: ConflCase) -> None:
    root = _parse(case.source)
    assert isinstance(root, MapNode)
    assert root.decorator == ""


@pytest.mark.parametrize("case", INVALID_CASES, ids=case_id)
def test_invalid_cases_raise_expected_code(case: ConflCase) -> None:
    error = _parse_error(case.source)
    assert error.code == case.error_code


@pytest.mark.parametrize("case", VALID_CASES, ids=case_id)
def test_maps_have_even_children_and_unique_keys(case: ConflCase) -> None:
    root = _parse(case.source)

    for node in _walk(root):
        if isinstance(node, MapNode):
            assert len(node.children) % 2 == 0
            keys = node.children[0::2]
            assert all(key.kind in (NodeKind.WORD, NodeKind.STRING) for key in keys)
            assert len({key.value for key in keys}) == len(keys)


def test_implicit_document_map() -> None:
    root = _parse('test=23 "also"=this')

    assert [(child.kind, child.value) for child in root.children] == [
        (NodeKind.WORD, "test"),
        (NodeKind.NUMBER, "23"),
        (NodeKind.STRING, "also"),
        (NodeKind.WORD, "this"),
    ]


def test_explicit_document_map_matches_implicit() -> None:
    assert _parse('{test=23 "also"=this}') == _parse('test=23 "also"=this')


def test_empty_documents() -> None:
    assert _parse("") == MapNode()
    assert _parse("{}") == MapNode()
    assert _parse("  # only a comment\n") == MapNode()


def test_decorated_key() -> None:
    root = _parse('dec(test)=23 "also"=this')

    key = root.children[0]
    assert key == ScalarNode(NodeKind.WORD, "test", decorator="dec")
    assert root.children[1] == ScalarNode(NodeKind.NUMBER, "23")


def test_decorated_map_value() -> None:
    root = _parse("key=dec({decKey=val})")

    value = root.children[1]
    assert isinstance(value, MapNode)
    assert value.decorator == "dec"
    assert value.children == (
        ScalarNode(NodeKind.WORD, "decKey"),
        ScalarNode(NodeKind.WORD, "val"),
    )


def test_nested_map_and_list() -> None:
    root = _parse("map={key=value} list=[item1 item2]")

    nested_map = root.get("map")
    nested_list = root.get("list")
    assert isinstance(nested_map, MapNode)
    assert nested_map.keys() == ["key"]
    assert isinstance(nested_list, ListNode)
    assert [item.value for item in nested_list.items] == ["item1", "item2"]


def test_decorated_list_items() -> None:
    root = _parse("paths=[path('/etc') path(\"/var\") plain]")

    items = root.get("paths")
    assert isinstance(items, ListNode)
    assert [(item.kind, item.value, item.decorator) for item in items.items] == [
        (NodeKind.STRING, "/etc", "path"),
        (NodeKind.STRING, "/var", "path"),
        (NodeKind.WORD, "plain", ""),
    ]


def test_numbers_keep_their_literal_text() -> None:
    root = _parse("mask=0xFF ratio=0.75 count=12 trailing=1.")

    assert [value.value for value in root.children[1::2]] == ["0xFF", "0.75", "12", "1."]
    assert all(value.kind == NodeKind.NUMBER for value in root.children[1::2])


def test_hash_inside_value_is_not_a_comment() -> None:
    root = _parse("a=b#c url=http://host/x#frag")

    assert root.get("a") == ScalarNode(NodeKind.WORD, "b#c")
    assert root.get("url") == ScalarNode(NodeKind.WORD, "http://host/x#frag")


def test_comment_between_tokens() -> None:
    root = _parse("a=1 # c\nb=2")

    assert root.get("a") == ScalarNode(NodeKind.NUMBER, "1")
    assert root.get("b") == ScalarNode(NodeKind.NUMBER, "2")
    assert _parse_error("b=2#c").code == "LEXER_MALFORMED_NUMBER"


def test_wifi_example() -> None:
    root = _parse(WIFI_EXAMPLE)

    assert len(root) == 1
    device_key, device = root.children
    assert device_key == ScalarNode(NodeKind.WORD, "wifi0", decorator="device")
    assert isinstance(device, MapNode)
    assert device.keys() == ["network", "key", "dhcp", "dns", "gateway", "vpn"]

    vpn = device.get("vpn")
    assert isinstance(vpn, MapNode)
    assert vpn.get("key") == ScalarNode(NodeKind.STRING, "/etc/vpn.key", decorator="path")
    assert vpn.get("user") == ScalarNode(NodeKind.WORD, "frank")


def test_hosts_example() -> None:
    root = _parse(HOSTS_EXAMPLE)

    assert root.keys() == ["mail.confl.org", "dc.confl.org", "web.confl.org"]
    web = root.get("web.confl.org")
    assert isinstance(web, MapNode)
    os_value = web.get("os")
    assert isinstance(os_value, ListNode)
    assert os_value.decorator == "os"
    assert [item.value for item in os_value.items] == ["freebsd", "12"]


def test_str_and_bytes_inputs_agree() -> None:
    assert parse("a=ключ") == parse("a=ключ".encode("utf-8"))
    assert parse(bytearray(b"a=1")) == parse(memoryview(b"a=1"))


def test_stray_closer_after_implicit_map() -> None:
    error = _parse_error('test=23 "also"=this}')

    assert error.message == "Unexpected `}`, expected end of input"
    assert (error.offset, error.length, error.line) == (19, 1, 1)


def test_missing_closer_of_explicit_map_points_at_end_of_input() -> None:
    error = _parse_error('{test=23 "also"=this')

    assert error.message == "Unexpected end of input, expected `}`"
    assert (error.offset, error.length) == (20, 0)


def test_decorated_map_key_is_rejected() -> None:
    error = _parse_error("dec({key=val})=val")

    assert error.message == "Illegal key type map, map keys must be words or strings"
    assert error.offset == 4


def test_duplicate_key_points_at_second_key() -> None:
    error = _parse_error("a=1 a=2")

    assert error.message == "Duplicate key 'a'"
    assert (error.offset, error.length) == (4, 1)


def test_duplicate_decorated_key_points_at_key_text() -> None:
    error = _parse_error("a=1 dec(a)=2")

    assert error.code == "PARSER_DUPLICATE_KEY"
    assert error.offset == 8


@pytest.mark.parametrize(
    ("source", "message"),
    [
        ("a b", "Illegal token word `b`, expected map delimiter `=`"),
        ("a=", "Unexpected end of input, expected a value"),
        ("a=[1 2}", "Unexpected `}`, expected `]`"),
        ("a=dec(b c)", "Illegal token word `c`, expected `)`"),
        ("a=dec(b", "Unexpected end of input, expected `)`"),
        ("a=one(two(b))", "Decorator `one` cannot wrap another decorator"),
        ("{a=1} b=2", "Unexpected word `b` after the document map"),
        ("=a", "Illegal token `=`"),
        ("12=twelve", "Illegal key type number, map keys must be words or strings"),
        ("dec()=1", "Unexpected `)`, expected a key"),
    ],
)
def test_error_messages(source: str, message: str) -> None:
    assert _parse_error(source).message == message


@pytest.mark.parametrize(
    ("source", "code"),
    [
        ("dec(a b)=1", "PARSER_EXPECTED_TOKEN"),
        ("one(two(a))=1", "PARSER_NESTED_DECORATOR"),
        ("a=dec()", "PARSER_UNEXPECTED_CLOSER"),
        ("a=[1 =]", "PARSER_ILLEGAL_TOKEN"),
        ("a=[1 ]]", "PARSER_UNEXPECTED_CLOSER"),
    ],
)
def test_decorator_and_list_errors(source: str, code: str) -> None:
    assert _parse_error(source).code == code


def test_error_line_and_offset_on_later_line() -> None:
    error = _parse_error("a=1\nb=2\nc=}")

    assert error.line == 3
    assert error.offset == 10


def test_error_offsets_are_byte_offsets() -> None:
    error = _parse_error("ключ=}")
    assert error.offset == 9


def test_lexer_error_surfaces_with_lexer_span() -> None:
    error = _parse_error("a=1.2.3")

    assert error.code == "LEXER_MALFORMED_NUMBER"
    assert error.message == "Malformed number '1.2.'"
    assert (error.offset, error.length) == (2, 4)


def test_max_depth_limits_nested_containers() -> None:
    source = "a={b={c={}}}"

    error = _parse_error(source, ParserOptions(max_depth=2))
    assert error.code == "PARSER_MAX_DEPTH"
    assert error.message == "Maximum nesting depth of 2 exceeded"
    assert error.offset == 8

    assert _parse(source, ParserOptions(max_depth=3)) is not None


def test_explicit_root_does_not_count_towards_depth() -> None:
    root = _parse("{a={}}", ParserOptions(max_depth=1))
    assert root.get("a") == MapNode()


def test_default_depth_limit_stops_runaway_nesting() -> None:
    assert _parse("a=" + "[" * 200 + "]" * 200) is not None

    error = _parse_error("a=" + "[" * 500 + "]" * 500)
    assert error.code == "PARSER_MAX_DEPTH"


def test_depth_limit_beyond_interpreter_stack_still_raises_parse_error() -> None:
    source = "a=" + "[" * 5000 + "]" * 5000

    error = _parse_error(source, ParserOptions(max_depth=10_000))

    assert error.code == "PARSER_MAX_DEPTH"
    assert source[error.offset] == "["
    assert error.length == 1


def test_large_depth_limit_never_leaks_recursion_error() -> None:
    source = "a=" + "[" * 600 + "]" * 600

    try:
        root = parse(source, options=ParserOptions(max_depth=1000))
    except ParseError as error:
        assert error.code == "PARSER_MAX_DEPTH"
    else:
        assert isinstance(root.get("a"), ListNode)


def test_multiline_strings_can_be_disabled() -> None:
    source = "motd='first\nsecond'"

    assert _parse(source).get("motd") == ScalarNode(NodeKind.STRING, "first\nsecond")
    error = _parse_error(source, ParserOptions(allow_multiline_strings=False))
    assert error.code == "LEXER_UNTERMINATED_STRING"


def test_parser_options_reject_non_positive_depth() -> None:
    with pytest.raises(ValueError):
        ParserOptions(max_depth=0)


def test_parse_document_with_explicit_parser() -> None:
    parser = Parser(BufferedLexer(Lexer(b"a={b=[1]}")))

    root = parse_document(parser)

    assert root.keys() == ["a"]
    assert parser.depth == 0
