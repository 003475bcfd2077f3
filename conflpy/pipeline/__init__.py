"""Parse result carrier and I/O entrypoints."""

from conflpy.pipeline.entrypoints import parse_path, parse_stream
from conflpy.pipeline.result import ConflParseResult

__all__ = [
    "ConflParseResult",
    "parse_path",
    "parse_stream",
]
