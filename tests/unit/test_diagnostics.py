"""
TEST DOC: Diagnostics

WHAT: Tests for mapping errors to positioned diagnostics and rendering them
WHY: A failed evaluation must point at the token that caused it
HOW: Map each error variant and render against source text

CASES:
- Each ParseError variant gets its own code and message
- Overflow diagnostics cover the whole phrase
- Line/column lookup and one-line formatting
- Caret rendering

EDGE CASES:
- Errors on later lines of a document
"""

import pytest

from word_numbers.diagnostics import (
    OVERFLOW_CODE,
    Diagnostic,
    Location,
    overflow_diagnostic,
    to_diagnostic,
)
from word_numbers.models.literal import MagnitudeOverflowError
from word_numbers.models.tokens import Span
from word_numbers.parser.lexer import tokenize
from word_numbers.parser.parser import lex
from word_numbers.ui import plain


def first_error(text: str):
    error = lex(tokenize(text)).error
    assert error is not None
    return error


class TestToDiagnostic:
    """Tests for the diagnostic mapper."""

    @pytest.mark.parametrize(
        "text,code,span",
        [
            ("one ; two", "non-word-token", Span(4, 5)),
            ("one tow", "unknown-word", Span(4, 7)),
            ("one negative", "misplaced-sign", Span(4, 12)),
        ],
    )
    def test_codes_and_spans(self, text: str, code: str, span: Span):
        """Each variant maps to a code anchored at the offending token."""
        diagnostic = to_diagnostic(first_error(text))
        assert diagnostic.code == code
        assert diagnostic.span == span

    def test_message_copied(self):
        """The error's message is carried over."""
        error = first_error("one tow")
        assert to_diagnostic(error).message == error.message

    def test_overflow(self):
        """Overflow diagnostics use the given span and the exception text."""
        diagnostic = overflow_diagnostic(MagnitudeOverflowError("1 * 2"), Span(0, 9))
        assert diagnostic.code == OVERFLOW_CODE
        assert diagnostic.span == Span(0, 9)
        assert "too large" in diagnostic.message


class TestLocate:
    """Tests for line/column lookup."""

    def test_first_line(self):
        """Columns are 1-based."""
        diagnostic = Diagnostic("unknown-word", "bad", Span(4, 7))
        assert diagnostic.locate("one tow") == Location(line=1, column=5)

    def test_later_line(self):
        """Lines are counted from newlines before the span."""
        source = "x = 1\ny = num!(tow)\n"
        start = source.index("tow")
        diagnostic = Diagnostic("unknown-word", "bad", Span(start, start + 3))
        assert diagnostic.locate(source) == Location(line=2, column=10)

    def test_format(self):
        """format() gives a compiler-style one-liner."""
        diagnostic = Diagnostic("unknown-word", "Unknown number word: 'tow'", Span(4, 7))
        assert diagnostic.format("one tow", "nums.txt") == (
            "nums.txt:1:5: error[unknown-word]: Unknown number word: 'tow'"
        )


class TestPrintDiagnostic:
    """Tests for the rich rendering."""

    def test_caret_under_token(self, capsys):
        """The offending token is underlined on its own source line."""
        source = "x = 1\ny = num!(two tow)\n"
        start = source.index("tow")
        diagnostic = Diagnostic("unknown-word", "Unknown number word: 'tow'", Span(start, start + 3))

        plain.print_diagnostic(diagnostic, source, "nums.txt")

        err = capsys.readouterr().err
        assert "error[unknown-word]" in err
        assert "nums.txt:2:14" in err
        assert "y = num!(two tow)" in err
        assert "             ^^^" in err

    def test_multiline_span_clipped_to_first_line(self, capsys):
        """Carets for a span crossing lines stop at the end of its first line."""
        source = "num!(two\nthree tow)"
        diagnostic = Diagnostic("magnitude-overflow", "Number too large", Span(0, len(source)))

        plain.print_diagnostic(diagnostic, source)

        err = capsys.readouterr().err
        assert "^" * 8 in err
        assert "^" * 9 not in err
