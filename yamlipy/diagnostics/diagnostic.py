"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Final

from yamlipy.diagnostics.codes import DiagnosticSpec
from yamlipy.text import TextRange

EXCERPT_LENGTH: Final[int] = 50


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured error produced by the lexer or parser.

    `excerpt` holds at most `EXCERPT_LENGTH` characters of the input that was
    still unconsumed at the failure point.
    """

    code: str
    message: str
    excerpt: str
    range: TextRange
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(
        spec: DiagnosticSpec,
        *,
        excerpt: str,
        range: TextRange,
        message: str | None = None,
    ) -> "Diagnostic":
        return Diagnostic(
            code=spec.code,
            message=spec.message if message is None else message,
            excerpt=excerpt[:EXCERPT_LENGTH],
            range=range,
            hint=spec.hint,
            category=spec.category,
        )

    def __str__(self) -> str:
        return f'{self.message}, near "{escape_excerpt(self.excerpt)}"'


def escape_excerpt(text: str) -> str:
    return text.replace("\r", "\\r").replace("\n", "\\n").replace('"', '\\"')
