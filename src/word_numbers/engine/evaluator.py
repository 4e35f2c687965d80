"""
evaluator.py

PURPOSE: Reduce a list of NumberTokens to a single exact integer and pick its width.
DEPENDENCIES: models, parser, width

ARCHITECTURE NOTES:
The pipeline is a chain of pure functions:

    lex -> extract_sign -> add_implicit_unit -> sum_groups -> select_width

Grouping works with two accumulators. `acc` holds the group currently being
built and `total` holds every group already closed:
- a Literal is added to `acc`
- a Multiplier scales `acc`, then closes the group (moves it into `total`)
  unless a strictly larger multiplier appears later in the phrase

The lookahead keeps "two hundred" open until "thousand" arrives in
"two hundred thousand", while "thirteen hundred thirty seven" closes the
hundred group immediately because nothing larger follows.

All arithmetic goes through checked_add / checked_mul, which are bounded by
the signed 128-bit range. Exceeding it raises MagnitudeOverflowError.
"""

import logging
from dataclasses import dataclass
from functools import reduce

from word_numbers.engine.width import select_width
from word_numbers.models.literal import MAGNITUDE_MAX, MagnitudeOverflowError, TypedInteger
from word_numbers.models.tokens import Literal, Multiplier, NumberToken, Sign, SignToken, Token
from word_numbers.observability import get_tracer
from word_numbers.parser.parser import ParseError, lex

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)


def checked_add(a: int, b: int) -> int:
    """Add two magnitudes, raising if the result exceeds MAGNITUDE_MAX."""
    result = a + b
    if result > MAGNITUDE_MAX:
        raise MagnitudeOverflowError(f"{a} + {b}")
    return result


def checked_mul(a: int, b: int) -> int:
    """Multiply two magnitudes, raising if the result exceeds MAGNITUDE_MAX."""
    result = a * b
    if result > MAGNITUDE_MAX:
        raise MagnitudeOverflowError(f"{a} * {b}")
    return result


def extract_sign(tokens: list[NumberToken]) -> tuple[Sign, list[NumberToken]]:
    """
    Split off a leading sign token.

    Returns:
        (sign, remaining tokens); sign is UNSPECIFIED when there is none
    """
    if tokens and isinstance(tokens[0], SignToken):
        return tokens[0].sign, tokens[1:]
    return Sign.UNSPECIFIED, list(tokens)


def add_implicit_unit(tokens: list[NumberToken]) -> list[NumberToken]:
    """Prepend Literal(1) when a phrase starts with a scale word ("hundred twenty")."""
    if tokens and isinstance(tokens[0], Multiplier):
        return [Literal(1), *tokens]
    return list(tokens)


@dataclass(frozen=True)
class GroupState:
    """Accumulators for the grouping fold."""

    acc: int = 0  # open group
    total: int = 0  # sum of closed groups


def _larger_multiplier_follows(tokens: list[NumberToken], index: int, value: int) -> bool:
    return any(isinstance(t, Multiplier) and t.value > value for t in tokens[index + 1 :])


def _step(state: GroupState, tokens: list[NumberToken], index: int) -> GroupState:
    token = tokens[index]
    match token:
        case Literal(value=value):
            return GroupState(acc=checked_add(state.acc, value), total=state.total)
        case Multiplier(value=value):
            acc = checked_mul(state.acc, value)
            if _larger_multiplier_follows(tokens, index, value):
                return GroupState(acc=acc, total=state.total)
            return GroupState(acc=0, total=checked_add(state.total, acc))
        case _:
            # Signs are removed by extract_sign before grouping
            return state


def sum_groups(tokens: list[NumberToken]) -> int:
    """
    Fold normalized tokens into a single non-negative magnitude.

    Args:
        tokens: Sign-free tokens, already passed through add_implicit_unit

    Returns:
        The exact magnitude

    Raises:
        MagnitudeOverflowError: If any intermediate value exceeds MAGNITUDE_MAX
    """
    state = reduce(lambda s, i: _step(s, tokens, i), range(len(tokens)), GroupState())
    return checked_add(state.total, state.acc)


@dataclass
class EvaluationResult:
    """Result of evaluating a phrase - either a typed literal or a parse error."""

    literal: TypedInteger | None
    error: ParseError | None

    @property
    def success(self) -> bool:
        return self.literal is not None

    @classmethod
    def ok(cls, literal: TypedInteger) -> "EvaluationResult":
        return cls(literal=literal, error=None)

    @classmethod
    def fail(cls, error: ParseError) -> "EvaluationResult":
        return cls(literal=None, error=error)


def evaluate(tokens: list[Token]) -> EvaluationResult:
    """
    Evaluate a tokenized number phrase.

    Args:
        tokens: Positioned source tokens

    Returns:
        EvaluationResult with the narrowest TypedInteger, or the first
        lexing error

    Raises:
        MagnitudeOverflowError: If the value cannot be represented even in
            the widest supported width
    """
    with tracer.start_as_current_span("words.evaluate") as span:
        span.set_attribute("words.token_count", len(tokens))

        lexed = lex(tokens)
        if lexed.error is not None:
            logger.debug(f"Lexing failed: {lexed.error.message}")
            span.set_attribute("words.error", type(lexed.error).__name__)
            return EvaluationResult.fail(lexed.error)

        sign, unsigned_tokens = extract_sign(lexed.tokens)
        normalized = add_implicit_unit(unsigned_tokens)
        magnitude = sum_groups(normalized)
        literal = select_width(sign, magnitude)

        logger.debug(f"Evaluated {len(tokens)} tokens to {literal.render()}")
        span.set_attribute("words.literal", literal.render())
        return EvaluationResult.ok(literal)
