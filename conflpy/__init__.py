"""Lexer and parser for the Confl document language.

Confl documents are maps at their root::

    # Simple wifi configuration
    device(wifi0)={
        network="Pretty fly for a wifi"
        dhcp=true
        dns=["10.0.0.1" "10.0.0.2"]
        vpn={host="12.12.12.12" user=frank key=path("/etc/vpn.key")}
    }

`parse()` returns the root `MapNode` or raises `ParseError`.
"""

from conflpy.ast import (
    KeyValuePair,
    ListNode,
    MapEntry,
    MapNode,
    Node,
    NodeKind,
    ScalarNode,
    format_tree,
    is_text,
    kv_pairs,
)
from conflpy.diagnostics import Diagnostic, ParseError, render_diagnostic
from conflpy.parser import ParserOptions, parse, parse_result
from conflpy.pipeline import ConflParseResult, parse_path, parse_stream

__all__ = [
    "ConflParseResult",
    "Diagnostic",
    "KeyValuePair",
    "ListNode",
    "MapEntry",
    "MapNode",
    "Node",
    "NodeKind",
    "ParseError",
    "ParserOptions",
    "ScalarNode",
    "format_tree",
    "is_text",
    "kv_pairs",
    "parse",
    "parse_path",
    "parse_result",
    "parse_stream",
    "render_diagnostic",
]
