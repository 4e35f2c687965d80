"""
conftest.py

Shared pytest fixtures for word_numbers tests.
"""

from collections.abc import Callable

import pytest

from word_numbers.engine.evaluator import EvaluationResult, evaluate
from word_numbers.models.literal import TypedInteger
from word_numbers.parser.lexer import tokenize


@pytest.fixture
def evaluate_text() -> Callable[[str], EvaluationResult]:
    """Tokenize and evaluate a phrase in one step."""

    def _evaluate(text: str) -> EvaluationResult:
        return evaluate(tokenize(text))

    return _evaluate


@pytest.fixture
def literal_of(evaluate_text: Callable[[str], EvaluationResult]) -> Callable[[str], TypedInteger]:
    """Evaluate a phrase that is expected to succeed and return its literal."""

    def _literal(text: str) -> TypedInteger:
        result = evaluate_text(text)
        assert result.success, result.error
        assert result.literal is not None
        return result.literal

    return _literal


@pytest.fixture
def macro_source() -> str:
    """A small document with several num!(...) invocations."""
    return (
        "const LIMIT: i16 = num!(one thousand three hundred thirty seven);\n"
        "const MASK: u8 = num!(plus two hundred fifty five);\n"
        "const OFFSET: i8 = num!(minus ten);\n"
    )
