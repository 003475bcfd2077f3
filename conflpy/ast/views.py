"""Consumer helpers over parsed nodes."""

from __future__ import annotations

from dataclasses import dataclass

from conflpy.ast.model import KEY_KINDS, ListNode, MapNode, Node, ScalarNode


@dataclass(frozen=True, slots=True)
class KeyValuePair:
    key: Node
    value: Node


def kv_pairs(node: MapNode) -> list[KeyValuePair]:
    """Pair up a map's interleaved children as (key, value)."""
    children = node.children
    if len(children) % 2 != 0:
        raise ValueError("Map children must come in key/value pairs")
    return [KeyValuePair(key=children[i], value=children[i + 1]) for i in range(0, len(children), 2)]


def is_text(node: Node) -> bool:
    """True for word and string scalars."""
    return node.kind in KEY_KINDS


def format_tree(node: Node) -> str:
    """Indented one-node-per-line rendering, used by the CLI and test debugging."""
    lines: list[str] = []

    def walk(current: Node, depth: int, label: str) -> None:
        indent = "  " * depth
        decorator = f" @{current.decorator}" if current.decorator else ""
        match current:
            case ScalarNode(kind=kind, value=value):
                lines.append(f"{indent}{label}{kind.name} {value!r}{decorator}")
            case MapNode(entries=entries):
                lines.append(f"{indent}{label}MAP{decorator}")
                for entry in entries:
                    walk(entry.key, depth + 1, "key: ")
                    walk(entry.value, depth + 2, "")
            case ListNode(items=items):
                lines.append(f"{indent}{label}LIST{decorator}")
                for item in items:
                    walk(item, depth + 1, "- ")

    walk(node, 0, "")
    return "\n".join(lines)


__all__ = ["KeyValuePair", "format_tree", "is_text", "kv_pairs"]
