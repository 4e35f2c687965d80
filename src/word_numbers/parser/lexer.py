"""
lexer.py

PURPOSE: Tokenize raw text into positioned word/punctuation tokens.
DEPENDENCIES: None (pure Python)

ARCHITECTURE NOTES:
This plays the part a compiler's tokenizer plays for a macro: it hands the
word lexer an ordered token sequence where each token knows where it came
from. It does not know anything about numbers.

It handles:
- Identifier-like words (letters, digits, underscores; no leading digit)
- Digit runs (reported as NUMBER so the word lexer can reject them)
- Single punctuation characters
- Whitespace, which separates tokens and is dropped
"""

import re

from word_numbers.models.tokens import Span, Token, TokenType

# Alternation order matters: whitespace is skipped, words before numbers
TOKEN_PATTERN = re.compile(
    r"(?P<space>\s+)"
    r"|(?P<word>[A-Za-z_][A-Za-z0-9_]*)"
    r"|(?P<number>[0-9][A-Za-z0-9_]*)"
    r"|(?P<punct>[!-/:-@\[-`{-~])"
    r"|(?P<other>.)",
    re.DOTALL,
)

_GROUP_TYPES: dict[str, TokenType] = {
    "word": TokenType.WORD,
    "number": TokenType.NUMBER,
    "punct": TokenType.PUNCT,
    "other": TokenType.OTHER,
}


def tokenize(text: str, base_offset: int = 0) -> list[Token]:
    """
    Convert raw text into a list of positioned tokens.

    Args:
        text: Raw text, e.g. the body of a macro invocation
        base_offset: Added to every span, so tokens taken from a slice of a
            larger document point into that document

    Returns:
        List of Token objects in source order
    """
    tokens: list[Token] = []

    for match in TOKEN_PATTERN.finditer(text):
        kind = match.lastgroup
        if kind == "space" or kind is None:
            continue

        span = Span(base_offset + match.start(), base_offset + match.end())
        tokens.append(Token(_GROUP_TYPES[kind], match.group(), span))

    return tokens
