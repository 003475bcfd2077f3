"""Diagnostics core types."""

from dataclasses import dataclass

from conflpy.diagnostics.codes import DiagnosticSpec, Severity
from conflpy.text import TextRange


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer and parser."""

    code: str
    message: str
    range: TextRange
    line: int = 1
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(spec: DiagnosticSpec, range: TextRange, line: int, **fields: object) -> "Diagnostic":
        return Diagnostic(
            code=spec.code,
            message=spec.format(**fields),
            range=range,
            line=line,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )
