"""
vocabulary.py

PURPOSE: The English number-word vocabulary.
DEPENDENCIES: models.tokens

ARCHITECTURE NOTES:
Every recognised word maps to exactly one NumberToken, or to None for
connectives that carry no value ("and"). Keys are lowercase; callers are
expected to lowercase before lookup.
"""

from word_numbers.models.tokens import Literal, Multiplier, NumberToken, Sign, SignToken

ONES: dict[str, int] = {
    "zero": 0,
    "one": 1,
    "a": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
    "eleven": 11,
    "twelve": 12,
    "thirteen": 13,
    "fourteen": 14,
    "fifteen": 15,
    "sixteen": 16,
    "seventeen": 17,
    "eighteen": 18,
    "nineteen": 19,
}

TENS: dict[str, int] = {
    "twenty": 20,
    "thirty": 30,
    "forty": 40,
    "fourty": 40,  # common misspelling
    "fifty": 50,
    "sixty": 60,
    "seventy": 70,
    "eighty": 80,
    "ninety": 90,
}

SCALES: dict[str, int] = {
    "hundred": 10**2,
    "thousand": 10**3,
    "million": 10**6,
    "billion": 10**9,
    "trillion": 10**12,
    "quadrillion": 10**15,
    "quintillion": 10**18,
    "septillion": 10**21,
    "octillion": 10**24,
}

SIGNS: dict[str, Sign] = {
    "plus": Sign.POSITIVE,
    "positive": Sign.POSITIVE,
    "minus": Sign.NEGATIVE,
    "negative": Sign.NEGATIVE,
}

# Connectives that are accepted but contribute nothing
CONNECTIVES = frozenset({"and"})


def _build_vocabulary() -> dict[str, NumberToken | None]:
    vocabulary: dict[str, NumberToken | None] = {}
    for word, value in (ONES | TENS).items():
        vocabulary[word] = Literal(value)
    for word, value in SCALES.items():
        vocabulary[word] = Multiplier(value)
    for word, sign in SIGNS.items():
        vocabulary[word] = SignToken(sign)
    for word in CONNECTIVES:
        vocabulary[word] = None
    return vocabulary


VOCABULARY: dict[str, NumberToken | None] = _build_vocabulary()
