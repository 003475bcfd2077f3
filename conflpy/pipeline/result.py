"""Parse carrier for parse-once/consume-many workflows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from conflpy.diagnostics import has_errors
from conflpy.parser.options import ParserOptions

if TYPE_CHECKING:
    from conflpy.ast import KeyValuePair, MapNode
    from conflpy.diagnostics import Diagnostic, ParseError


@dataclass(frozen=True, slots=True)
class ConflParseResult:
    """Either a root map or the error that stopped the parse, never both."""

    source: bytes
    root: MapNode | None
    error: ParseError | None
    options: ParserOptions

    def __post_init__(self) -> None:
        if (self.root is None) == (self.error is None):
            raise ValueError("A parse result holds exactly one of root or error")

    @property
    def diagnostics(self) -> list[Diagnostic]:
        if self.error is None:
            return []
        return [self.error.diagnostic]

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    def unwrap(self) -> MapNode:
        """The root map, or raise the parse error."""
        if self.root is not None:
            return self.root
        if self.error is not None:
            raise self.error
        raise ValueError("A parse result holds exactly one of root or error")

    def kv_pairs(self) -> list[KeyValuePair]:
        from conflpy.ast import kv_pairs

        return kv_pairs(self.unwrap())
