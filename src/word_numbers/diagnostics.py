"""
diagnostics.py

PURPOSE: Map evaluation failures to positioned, human-readable errors.
DEPENDENCIES: models.tokens, parser

ARCHITECTURE NOTES:
A Diagnostic only stores character offsets. Line and column are computed
against the source text when the diagnostic is located, which keeps the
mapper independent of where the tokens came from (a CLI argument, a file,
or a macro body inside a file).
"""

from dataclasses import dataclass

from word_numbers.models.literal import MagnitudeOverflowError
from word_numbers.models.tokens import Span
from word_numbers.parser.parser import MisplacedSign, NonWordToken, ParseError, UnknownWord

ERROR_CODES: dict[type, str] = {
    NonWordToken: "non-word-token",
    UnknownWord: "unknown-word",
    MisplacedSign: "misplaced-sign",
}

OVERFLOW_CODE = "magnitude-overflow"


@dataclass(frozen=True)
class Location:
    """1-based line and column of a position in source text."""

    line: int
    column: int


@dataclass(frozen=True)
class Diagnostic:
    """A positioned error message."""

    code: str
    message: str
    span: Span

    def locate(self, source: str) -> Location:
        """Line and column of the span start within the source."""
        line = source.count("\n", 0, self.span.start) + 1
        line_start = source.rfind("\n", 0, self.span.start) + 1
        return Location(line=line, column=self.span.start - line_start + 1)

    def format(self, source: str, path: str = "<input>") -> str:
        """One-line form: path:line:col: error[code]: message."""
        loc = self.locate(source)
        return f"{path}:{loc.line}:{loc.column}: error[{self.code}]: {self.message}"


def to_diagnostic(error: ParseError) -> Diagnostic:
    """Convert a lexing error into a Diagnostic anchored at the offending token."""
    return Diagnostic(
        code=ERROR_CODES[type(error)],
        message=error.message,
        span=error.token.span,
    )


def overflow_diagnostic(error: MagnitudeOverflowError, span: Span) -> Diagnostic:
    """Convert an overflow into a Diagnostic covering the whole phrase."""
    return Diagnostic(code=OVERFLOW_CODE, message=str(error), span=span)
