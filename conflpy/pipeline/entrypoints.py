"""Entrypoints that read a whole input before handing it to the parser."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

from conflpy.ast import MapNode
from conflpy.parser import ParserOptions, parse


def parse_stream(stream: BinaryIO, options: ParserOptions | None = None) -> MapNode:
    """Read `stream` to the end, then parse it."""
    return parse(stream.read(), options=options)


def parse_path(path: str | Path, options: ParserOptions | None = None) -> MapNode:
    return parse(Path(path).read_bytes(), options=options)
