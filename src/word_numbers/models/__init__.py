"""Token and literal models."""

from word_numbers.models.literal import (
    MAGNITUDE_MAX,
    SIGNED_WIDTHS,
    UNSIGNED_WIDTHS,
    IntWidth,
    LiteralStyle,
    MagnitudeOverflowError,
    TypedInteger,
)
from word_numbers.models.tokens import (
    Literal,
    Multiplier,
    NumberToken,
    Sign,
    SignToken,
    Span,
    Token,
    TokenType,
)

__all__ = [
    "IntWidth",
    "Literal",
    "LiteralStyle",
    "MAGNITUDE_MAX",
    "MagnitudeOverflowError",
    "Multiplier",
    "NumberToken",
    "SIGNED_WIDTHS",
    "Sign",
    "SignToken",
    "Span",
    "Token",
    "TokenType",
    "TypedInteger",
    "UNSIGNED_WIDTHS",
]
