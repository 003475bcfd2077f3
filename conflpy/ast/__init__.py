"""Immutable AST for Confl documents."""

from conflpy.ast.model import (
    KEY_KINDS,
    SCALAR_KINDS,
    ListNode,
    MapEntry,
    MapNode,
    Node,
    NodeKind,
    ScalarNode,
)
from conflpy.ast.views import KeyValuePair, format_tree, is_text, kv_pairs

__all__ = [
    "KEY_KINDS",
    "SCALAR_KINDS",
    "KeyValuePair",
    "ListNode",
    "MapEntry",
    "MapNode",
    "Node",
    "NodeKind",
    "ScalarNode",
    "format_tree",
    "is_text",
    "kv_pairs",
]
