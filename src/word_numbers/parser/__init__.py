"""Parser module for number-word phrases."""

from word_numbers.parser.lexer import tokenize
from word_numbers.parser.parser import (
    LexResult,
    MisplacedSign,
    NonWordToken,
    ParseError,
    UnknownWord,
    lex,
)
from word_numbers.parser.vocabulary import VOCABULARY

__all__ = [
    "LexResult",
    "MisplacedSign",
    "NonWordToken",
    "ParseError",
    "UnknownWord",
    "VOCABULARY",
    "lex",
    "tokenize",
]
