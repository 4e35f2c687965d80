"""
expander.py

PURPOSE: Drive evaluation the way a macro host does and splice results into source text.
DEPENDENCIES: parser, evaluator, diagnostics

ARCHITECTURE NOTES:
The evaluator is pure and never talks to the outside world. This module is
the boundary:
- expand() takes raw text, tokenizes it, evaluates it, and hands exactly one
  outcome (a TypedInteger or a Diagnostic) to a LiteralSink.
- num() is the run-time form: it returns the literal or raises.
- expand_source() finds every `num!( ... )` invocation in a document, expands
  each one independently and rewrites the document. String literals and
  comments are stepped over, so text inside them is never expanded. An
  overflow in one invocation is reported at that invocation, the way a
  compiler reports a failing macro, and does not stop the others.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Protocol

from word_numbers.diagnostics import Diagnostic, overflow_diagnostic, to_diagnostic
from word_numbers.engine.evaluator import evaluate
from word_numbers.models.literal import LiteralStyle, MagnitudeOverflowError, TypedInteger
from word_numbers.models.tokens import Span
from word_numbers.observability import get_tracer
from word_numbers.parser.lexer import tokenize

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)

UNTERMINATED_CODE = "unterminated-invocation"

Outcome = TypedInteger | Diagnostic


class LiteralSink(Protocol):
    """Receives the single outcome of one expansion."""

    def emit(self, outcome: Outcome) -> None: ...


@dataclass
class CollectingSink:
    """A sink that remembers the outcome it was given."""

    outcome: Outcome | None = None

    def emit(self, outcome: Outcome) -> None:
        if self.outcome is not None:
            raise RuntimeError("Sink already received an outcome")
        self.outcome = outcome


class NumberWordsError(Exception):
    """A phrase could not be converted to a number."""

    def __init__(self, diagnostic: Diagnostic):
        self.diagnostic = diagnostic
        super().__init__(diagnostic.message)


def expand(raw: str, sink: LiteralSink, base_offset: int = 0) -> None:
    """
    Tokenize and evaluate a phrase, emitting the result to the sink.

    Args:
        raw: The phrase, e.g. "two hundred forty-seven"
        sink: Receives a TypedInteger or a Diagnostic
        base_offset: Offset of `raw` inside the document diagnostics refer to

    Raises:
        MagnitudeOverflowError: If the value is too large for any width
    """
    result = evaluate(tokenize(raw, base_offset))
    if result.literal is not None:
        sink.emit(result.literal)
    elif result.error is not None:
        sink.emit(to_diagnostic(result.error))


def num(text: str) -> TypedInteger:
    """
    Convert a number phrase to a typed integer at run time.

    Examples:
        num("minus ten") -> TypedInteger(value=-10, width=IntWidth.I8)
        num("plus two hundred fifty five") -> TypedInteger(value=255, width=IntWidth.U8)

    Raises:
        NumberWordsError: If the phrase contains a bad token or word
        MagnitudeOverflowError: If the value is too large for any width
    """
    sink = CollectingSink()
    expand(text, sink)
    if isinstance(sink.outcome, Diagnostic):
        raise NumberWordsError(sink.outcome)
    assert sink.outcome is not None
    return sink.outcome


@dataclass(frozen=True)
class Expansion:
    """One macro invocation found in a document and what it expanded to."""

    span: Span  # the whole invocation, name through closing paren
    body: str
    outcome: Outcome


@dataclass
class ExpansionReport:
    """Result of expanding every invocation in a document."""

    source: str
    output: str
    expansions: list[Expansion] = field(default_factory=list)

    @property
    def literals(self) -> list[TypedInteger]:
        return [e.outcome for e in self.expansions if isinstance(e.outcome, TypedInteger)]

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return [e.outcome for e in self.expansions if isinstance(e.outcome, Diagnostic)]

    @property
    def success(self) -> bool:
        return not self.diagnostics


# Text the scanner steps over whole so nothing inside it is seen as code
_SKIPPED = r'"(?:\\.|[^"\\])*"|//[^\n]*|/\*.*?\*/'

_BODY_PATTERN = re.compile(rf"{_SKIPPED}|(?P<paren>[()])", re.DOTALL)


def _invocation_pattern(macro_name: str) -> re.Pattern[str]:
    return re.compile(
        rf"{_SKIPPED}|(?P<invocation>(?<![A-Za-z0-9_]){re.escape(macro_name)}!\()",
        re.DOTALL,
    )


def _find_closing_paren(source: str, start: int) -> int | None:
    """Index of the paren closing the one just before `start`, or None."""
    depth = 1
    for match in _BODY_PATTERN.finditer(source, start):
        paren = match.group("paren")
        if paren == "(":
            depth += 1
        elif paren == ")":
            depth -= 1
            if depth == 0:
                return match.start()
    return None


def _expand_invocation(source: str, span: Span, body_start: int) -> Outcome:
    body = source[body_start : span.end - 1]
    sink = CollectingSink()
    try:
        expand(body, sink, base_offset=body_start)
    except MagnitudeOverflowError as e:
        logger.warning(f"Overflow in invocation at offset {span.start}: {e}")
        return overflow_diagnostic(e, span)
    assert sink.outcome is not None
    return sink.outcome


def expand_source(
    source: str,
    macro_name: str = "num",
    style: LiteralStyle = "suffixed",
) -> ExpansionReport:
    """
    Expand every `<macro_name>!( ... )` invocation in a document.

    Successful invocations are replaced by the rendered literal. Failed ones
    are left as written and reported as diagnostics.

    Args:
        source: Document text
        macro_name: Macro to look for
        style: "suffixed" (1337i16) or "plain" (1337)

    Returns:
        ExpansionReport with the rewritten text and every outcome
    """
    with tracer.start_as_current_span("words.expand_source") as span:
        pattern = _invocation_pattern(macro_name)
        report = ExpansionReport(source=source, output=source)
        pieces: list[str] = []
        position = 0
        cursor = 0

        while True:
            match = pattern.search(source, cursor)
            if match is None:
                break
            cursor = match.end()
            if match.lastgroup != "invocation":
                # String literal or comment
                continue

            close = _find_closing_paren(source, match.end())
            if close is None:
                unterminated = Span(match.start(), len(source))
                diagnostic = Diagnostic(
                    code=UNTERMINATED_CODE,
                    message=f"Unterminated {macro_name}! invocation: missing ')'",
                    span=Span(match.start(), match.end()),
                )
                report.expansions.append(
                    Expansion(span=unterminated, body=source[match.end() :], outcome=diagnostic)
                )
                break

            invocation = Span(match.start(), close + 1)
            outcome = _expand_invocation(source, invocation, match.end())
            report.expansions.append(
                Expansion(span=invocation, body=source[match.end() : close], outcome=outcome)
            )

            pieces.append(source[position : invocation.start])
            if isinstance(outcome, TypedInteger):
                pieces.append(outcome.render(style))
            else:
                pieces.append(source[invocation.start : invocation.end])
            position = cursor = invocation.end

        pieces.append(source[position:])
        report.output = "".join(pieces)

        for diagnostic in report.diagnostics:
            logger.debug(diagnostic.format(source))

        span.set_attribute("words.invocations", len(report.expansions))
        span.set_attribute("words.diagnostics", len(report.diagnostics))
        logger.debug(
            f"Expanded {len(report.literals)} of {len(report.expansions)} {macro_name}! invocations"
        )
        return report
