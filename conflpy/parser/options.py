"""Parser configuration options."""

from dataclasses import dataclass
from typing import Final

DEFAULT_MAX_DEPTH: Final[int] = 200


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Limits and feature flags for one parse."""

    max_depth: int = DEFAULT_MAX_DEPTH
    allow_multiline_strings: bool = True

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError("max_depth must be >= 1")
