"""
width.py

PURPOSE: Choose the narrowest fixed-width integer kind for an evaluated value.
DEPENDENCIES: models

ARCHITECTURE NOTES:
Literals are signed unless the phrase starts with "plus"/"positive". With no
sign word the value is non-negative but still gets a signed width, so
"eight" is 8i8 while "plus eight" is 8u8.
"""

from word_numbers.models.literal import (
    SIGNED_WIDTHS,
    UNSIGNED_WIDTHS,
    MagnitudeOverflowError,
    TypedInteger,
)
from word_numbers.models.tokens import Sign


def select_width(sign: Sign, magnitude: int) -> TypedInteger:
    """
    Pick the narrowest width for a magnitude.

    Args:
        sign: Sign taken from the phrase
        magnitude: Non-negative value from grouping

    Returns:
        TypedInteger holding the (possibly negated) value

    Raises:
        MagnitudeOverflowError: If no candidate width can hold the value
    """
    if sign == Sign.POSITIVE:
        value = magnitude
        candidates = UNSIGNED_WIDTHS
    else:
        value = -magnitude if sign == Sign.NEGATIVE else magnitude
        candidates = SIGNED_WIDTHS

    for width in candidates:
        if width.contains(value):
            return TypedInteger(value=value, width=width)

    raise MagnitudeOverflowError(f"{value} as {candidates[-1].value}")
