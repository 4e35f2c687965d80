"""
tokens.py

PURPOSE: Token types shared by the source tokenizer, the word lexer and the evaluator.
DEPENDENCIES: None (pure Python + enum)

ARCHITECTURE NOTES:
There are two layers of tokens:
- Token: a raw source token (word, punctuation, number) with a Span into the
  text it came from. Produced by parser.lexer.tokenize.
- NumberToken: the semantic meaning of a word (Literal, Multiplier or
  SignToken). Produced by parser.parser.lex and consumed by the engine.

Spans are plain character offsets. Line and column are only computed when a
diagnostic is rendered, so tokens stay cheap to create.
"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Types of raw source tokens."""

    WORD = auto()  # identifier-like run: two, Hundred, forty_two
    PUNCT = auto()  # a single punctuation character
    NUMBER = auto()  # a run of digits
    OTHER = auto()  # anything else that is not whitespace


@dataclass(frozen=True)
class Span:
    """Half-open range of character offsets [start, end) in the source text."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid span: {self.start}..{self.end}")

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class Token:
    """A single raw token from the source tokenizer."""

    type: TokenType
    value: str
    span: Span


class Sign(Enum):
    """Polarity requested by a leading sign word."""

    UNSPECIFIED = auto()
    POSITIVE = auto()
    NEGATIVE = auto()


@dataclass(frozen=True)
class Literal:
    """An additive value (zero through ninety)."""

    value: int


@dataclass(frozen=True)
class Multiplier:
    """A scale factor applied to the currently open group (hundred, thousand, ...)."""

    value: int


@dataclass(frozen=True)
class SignToken:
    """A sign word. Only legal as the first token of a phrase."""

    sign: Sign


NumberToken = Literal | Multiplier | SignToken
