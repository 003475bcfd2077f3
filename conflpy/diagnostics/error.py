"""Terminal parse failure raised by the parser."""

from conflpy.diagnostics.diagnostic import Diagnostic
from conflpy.diagnostics.render import render_diagnostic
from conflpy.text import TextRange


class ParseError(Exception):
    """First lexical, structural or semantic error of a parse.

    `str(error)` is the short message; `with_source_context()` renders the
    offending line with a caret under the span.
    """

    def __init__(self, diagnostic: Diagnostic, source: bytes) -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic
        self.source = source

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def code(self) -> str:
        return self.diagnostic.code

    @property
    def range(self) -> TextRange:
        return self.diagnostic.range

    @property
    def offset(self) -> int:
        return self.diagnostic.range.start.to_int()

    @property
    def length(self) -> int:
        return self.diagnostic.range.len().to_int()

    @property
    def line(self) -> int:
        return self.diagnostic.line

    def with_source_context(self) -> str:
        return render_diagnostic(
            self.diagnostic.message,
            self.diagnostic.range,
            self.source,
            line=self.diagnostic.line,
        )
