"""
literal.py

PURPOSE: Fixed-width integer kinds and the typed literal produced by evaluation.
DEPENDENCIES: pydantic

ARCHITECTURE NOTES:
IntWidth mirrors the fixed-width integer kinds a host language offers
(i8 ... i128, u8 ... u128). Enum values are the literal suffixes, so
bits and signedness are derived from the value itself.

TypedInteger is a pydantic model so that a value can never be paired with a
width that cannot represent it, and so the CLI can dump it as JSON.
"""

from enum import Enum
from typing import Literal as LiteralType

from pydantic import BaseModel, ConfigDict, model_validator


class IntWidth(Enum):
    """Fixed-width integer kinds, named by their literal suffix."""

    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    I128 = "i128"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"

    @property
    def bits(self) -> int:
        return int(self.value[1:])

    @property
    def signed(self) -> bool:
        return self.value.startswith("i")

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        """Whether the value is representable in this width."""
        return self.min_value <= value <= self.max_value


# Candidate widths in the order they are tried, narrowest first
SIGNED_WIDTHS: tuple[IntWidth, ...] = (
    IntWidth.I8,
    IntWidth.I16,
    IntWidth.I32,
    IntWidth.I64,
    IntWidth.I128,
)
UNSIGNED_WIDTHS: tuple[IntWidth, ...] = (
    IntWidth.U8,
    IntWidth.U16,
    IntWidth.U32,
    IntWidth.U64,
    IntWidth.U128,
)

LiteralStyle = LiteralType["suffixed", "plain"]

# Ceiling for every intermediate value: the widest signed width
MAGNITUDE_MAX: int = IntWidth.I128.max_value


class MagnitudeOverflowError(Exception):
    """A value does not fit in the widest supported integer width."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Number too large to represent: {operation} overflows")


class TypedInteger(BaseModel):
    """
    An exact integer value together with the width chosen for it.

    Examples:
        - TypedInteger(value=1337, width=IntWidth.I16).render() -> "1337i16"
        - TypedInteger(value=255, width=IntWidth.U8).render("plain") -> "255"
    """

    model_config = ConfigDict(frozen=True)

    value: int
    width: IntWidth

    @model_validator(mode="after")
    def validate_range(self) -> "TypedInteger":
        """Reject values the width cannot hold."""
        if not self.width.contains(self.value):
            raise ValueError(f"{self.value} does not fit in {self.width.value}")
        return self

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.render()

    def render(self, style: LiteralStyle = "suffixed") -> str:
        """Render as source text, with or without the width suffix."""
        if style == "plain":
            return str(self.value)
        return f"{self.value}{self.width.value}"

    def to_bytes(self, byteorder: LiteralType["little", "big"] = "little") -> bytes:
        """Pack into exactly bits // 8 bytes, two's complement for signed widths."""
        return self.value.to_bytes(self.width.bits // 8, byteorder, signed=self.width.signed)
