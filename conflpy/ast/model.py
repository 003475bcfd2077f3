"""AST data model for Confl documents."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias


class NodeKind(StrEnum):
    NUMBER = "number"
    WORD = "word"
    STRING = "string"
    MAP = "map"
    LIST = "list"


SCALAR_KINDS: frozenset[NodeKind] = frozenset({NodeKind.NUMBER, NodeKind.WORD, NodeKind.STRING})
KEY_KINDS: frozenset[NodeKind] = frozenset({NodeKind.WORD, NodeKind.STRING})


@dataclass(frozen=True, slots=True)
class ScalarNode:
    """Number, word or string leaf. Numbers keep their literal text."""

    kind: NodeKind
    value: str
    decorator: str = ""

    def __post_init__(self) -> None:
        if self.kind not in SCALAR_KINDS:
            raise ValueError(f"Not a scalar kind: {self.kind!r}")

    @property
    def children(self) -> tuple[Node, ...]:
        return ()


@dataclass(frozen=True, slots=True)
class MapEntry:
    key: ScalarNode
    value: Node


@dataclass(frozen=True, slots=True)
class MapNode:
    """Map in declared order; keys are unique word/string scalars."""

    entries: tuple[MapEntry, ...] = ()
    decorator: str = ""

    @property
    def kind(self) -> NodeKind:
        return NodeKind.MAP

    @property
    def value(self) -> str:
        return ""

    @property
    def children(self) -> tuple[Node, ...]:
        """Keys and values interleaved: key, value, key, value, ..."""
        children: list[Node] = []
        for entry in self.entries:
            children.append(entry.key)
            children.append(entry.value)
        return tuple(children)

    def keys(self) -> list[str]:
        return [entry.key.value for entry in self.entries]

    def get(self, key: str) -> Node | None:
        for entry in self.entries:
            if entry.key.value == key:
                return entry.value
        return None

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True, slots=True)
class ListNode:
    items: tuple[Node, ...] = ()
    decorator: str = ""

    @property
    def kind(self) -> NodeKind:
        return NodeKind.LIST

    @property
    def value(self) -> str:
        return ""

    @property
    def children(self) -> tuple[Node, ...]:
        return self.items

    def __len__(self) -> int:
        return len(self.items)


Node: TypeAlias = ScalarNode | MapNode | ListNode


__all__ = [
    "KEY_KINDS",
    "SCALAR_KINDS",
    "ListNode",
    "MapEntry",
    "MapNode",
    "Node",
    "NodeKind",
    "ScalarNode",
]
