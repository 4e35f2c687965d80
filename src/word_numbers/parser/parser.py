"""
parser.py

PURPOSE: Turn positioned source tokens into semantic NumberTokens.
DEPENDENCIES: lexer tokens, vocabulary

ARCHITECTURE NOTES:
The word lexer is the only stage that can fail on bad input. It fails fast:
the first offending token ends the scan and no partial token list is
returned.

Rules:
- A "-" punctuation token is dropped, so "twenty-five" works.
- Any other non-word token is a NonWordToken error.
- Words are looked up case-insensitively; unknown words are UnknownWord errors.
- "and" produces nothing.
- A sign word is only legal as the first emitted token (MisplacedSign).
"""

from dataclasses import dataclass

from word_numbers.models.tokens import NumberToken, SignToken, Token, TokenType
from word_numbers.parser.vocabulary import VOCABULARY

# Punctuation that joins compound words
CONNECTING_PUNCTUATION = frozenset({"-"})


@dataclass(frozen=True)
class NonWordToken:
    """A token that is neither a word nor a connecting hyphen."""

    token: Token

    @property
    def message(self) -> str:
        return f"Non-word token encountered: '{self.token.value}'"


@dataclass(frozen=True)
class UnknownWord:
    """A word that is not in the number vocabulary."""

    token: Token

    @property
    def message(self) -> str:
        return f"Unknown number word: '{self.token.value}'"


@dataclass(frozen=True)
class MisplacedSign:
    """A sign word that is not the first word of the phrase."""

    token: Token

    @property
    def message(self) -> str:
        return f"Unexpected sign word '{self.token.value}': a sign may only appear first"


ParseError = NonWordToken | UnknownWord | MisplacedSign


@dataclass
class LexResult:
    """Result of lexing - either a token list or an error."""

    tokens: list[NumberToken]
    error: ParseError | None

    @property
    def success(self) -> bool:
        return self.error is None

    @classmethod
    def ok(cls, tokens: list[NumberToken]) -> "LexResult":
        return cls(tokens=tokens, error=None)

    @classmethod
    def fail(cls, error: ParseError) -> "LexResult":
        return cls(tokens=[], error=error)


def lex(tokens: list[Token]) -> LexResult:
    """
    Map source tokens to NumberTokens.

    Args:
        tokens: Positioned tokens from the source tokenizer

    Returns:
        LexResult with the NumberTokens (a sign, if any, at index 0) or the
        first error encountered
    """
    number_tokens: list[NumberToken] = []

    for token in tokens:
        if token.type != TokenType.WORD:
            if token.type == TokenType.PUNCT and token.value in CONNECTING_PUNCTUATION:
                continue
            return LexResult.fail(NonWordToken(token))

        word = token.value.lower()
        if word not in VOCABULARY:
            return LexResult.fail(UnknownWord(token))

        number_token = VOCABULARY[word]
        if number_token is None:
            # Connective
            continue

        if isinstance(number_token, SignToken) and number_tokens:
            return LexResult.fail(MisplacedSign(token))

        number_tokens.append(number_token)

    return LexResult.ok(number_tokens)
