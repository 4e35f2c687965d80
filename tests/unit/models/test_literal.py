"""
TEST DOC: Literal Models

WHAT: Tests for IntWidth and TypedInteger
WHY: Width ranges drive width selection and rendering drives expansion output
HOW: Check ranges, validation, rendering and byte packing

CASES:
- Bits, signedness and range of every width
- Suffixed and plain rendering
- JSON dump for the CLI

EDGE CASES:
- Values outside the width are rejected
- Negative values pack as two's complement
"""

import pytest
from pydantic import ValidationError

from word_numbers.models.literal import (
    MAGNITUDE_MAX,
    SIGNED_WIDTHS,
    UNSIGNED_WIDTHS,
    IntWidth,
    TypedInteger,
)


class TestIntWidth:
    """Tests for the IntWidth enum."""

    @pytest.mark.parametrize(
        "width,bits,signed,low,high",
        [
            (IntWidth.I8, 8, True, -128, 127),
            (IntWidth.I16, 16, True, -32768, 32767),
            (IntWidth.I32, 32, True, -(2**31), 2**31 - 1),
            (IntWidth.I64, 64, True, -(2**63), 2**63 - 1),
            (IntWidth.I128, 128, True, -(2**127), 2**127 - 1),
            (IntWidth.U8, 8, False, 0, 255),
            (IntWidth.U16, 16, False, 0, 65535),
            (IntWidth.U32, 32, False, 0, 2**32 - 1),
            (IntWidth.U64, 64, False, 0, 2**64 - 1),
            (IntWidth.U128, 128, False, 0, 2**128 - 1),
        ],
    )
    def test_ranges(self, width: IntWidth, bits: int, signed: bool, low: int, high: int):
        """Each width knows its size and range."""
        assert width.bits == bits
        assert width.signed is signed
        assert width.min_value == low
        assert width.max_value == high
        assert width.contains(low)
        assert width.contains(high)
        assert not width.contains(low - 1)
        assert not width.contains(high + 1)

    def test_candidate_order(self):
        """Candidates are ordered narrowest first."""
        assert [w.bits for w in SIGNED_WIDTHS] == [8, 16, 32, 64, 128]
        assert [w.bits for w in UNSIGNED_WIDTHS] == [8, 16, 32, 64, 128]
        assert all(w.signed for w in SIGNED_WIDTHS)
        assert not any(w.signed for w in UNSIGNED_WIDTHS)

    def test_ceiling_is_i128(self):
        """The accumulation ceiling is the i128 maximum."""
        assert MAGNITUDE_MAX == IntWidth.I128.max_value
        assert MAGNITUDE_MAX > 10**24


class TestTypedInteger:
    """Tests for the TypedInteger model."""

    def test_render_suffixed(self):
        """Default rendering appends the width suffix."""
        assert TypedInteger(value=1337, width=IntWidth.I16).render() == "1337i16"
        assert str(TypedInteger(value=-10, width=IntWidth.I8)) == "-10i8"

    def test_render_plain(self):
        """Plain rendering is the bare integer."""
        assert TypedInteger(value=255, width=IntWidth.U8).render("plain") == "255"

    def test_int(self):
        """int() gives the value."""
        assert int(TypedInteger(value=-5, width=IntWidth.I8)) == -5

    def test_out_of_range_rejected(self):
        """A value the width cannot hold fails validation."""
        with pytest.raises(ValidationError):
            TypedInteger(value=256, width=IntWidth.U8)
        with pytest.raises(ValidationError):
            TypedInteger(value=-1, width=IntWidth.U64)

    def test_frozen(self):
        """Literals are immutable."""
        literal = TypedInteger(value=1, width=IntWidth.I8)
        with pytest.raises(ValidationError):
            literal.value = 2

    def test_to_bytes(self):
        """Values pack into exactly bits // 8 bytes."""
        assert TypedInteger(value=1337, width=IntWidth.I16).to_bytes() == b"\x39\x05"
        assert TypedInteger(value=1337, width=IntWidth.I16).to_bytes("big") == b"\x05\x39"
        assert TypedInteger(value=-1, width=IntWidth.I8).to_bytes() == b"\xff"
        assert len(TypedInteger(value=0, width=IntWidth.U128).to_bytes()) == 16

    def test_json_dump(self):
        """The width dumps as its suffix."""
        dumped = TypedInteger(value=7331, width=IntWidth.U16).model_dump(mode="json")
        assert dumped == {"value": 7331, "width": "u16"}
