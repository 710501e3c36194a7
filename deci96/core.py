"""The 96-bit decimal value type and the helpers shared by its operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

MANTISSA_BITS = 96
MANTISSA_LIMIT = 1 << MANTISSA_BITS
MAX_SCALE = 28
WORD_MASK = 0xFFFFFFFF
SCALE_SHIFT = 16
SCALE_MASK = 0x00FF0000
SIGN_BIT = 127


class DecimalError(ArithmeticError):
    """Base class of every error raised by this package."""


class PositiveOverflowError(DecimalError):
    """The result is too large to be represented."""


class NegativeOverflowError(DecimalError):
    """The result is too small (too large a negative number) to be represented."""


class DecimalZeroDivisionError(DecimalError, ZeroDivisionError):
    """Division by zero."""


class ConversionError(DecimalError, ValueError):
    """A value cannot be converted to or from a decimal."""


@dataclass(frozen=True)
class Decimal96:
    """A decimal number: a 96-bit mantissa divided by ten to the power of scale."""

    mantissa: int = 0
    scale: int = 0
    negative: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.mantissa < MANTISSA_LIMIT:
            raise ValueError(f"mantissa out of range: {self.mantissa}")
        if not 0 <= self.scale <= 0xFF:
            raise ValueError(f"scale out of range: {self.scale}")

    @classmethod
    def from_bits(cls, bits: Iterable[int]) -> "Decimal96":
        """Build a value from its four 32-bit words: low, mid, high and flags."""
        words = [int(word) & WORD_MASK for word in bits]
        if len(words) != 4:
            raise ValueError("exactly four words are required")
        low, mid, high, flags = words
        return cls(
            mantissa=low | (mid << 32) | (high << 64),
            scale=(flags & SCALE_MASK) >> SCALE_SHIFT,
            negative=bool(flags >> 31),
        )

    def to_bits(self) -> tuple[int, int, int, int]:
        """Return the four 32-bit words of this value."""
        flags = (self.scale << SCALE_SHIFT) | (int(self.negative) << 31)
        return (
            self.mantissa & WORD_MASK,
            (self.mantissa >> 32) & WORD_MASK,
            (self.mantissa >> 64) & WORD_MASK,
            flags,
        )

    def _as_int(self) -> int:
        low, mid, high, flags = self.to_bits()
        return low | (mid << 32) | (high << 64) | (flags << 96)

    def is_zero(self) -> bool:
        """True when the mantissa is zero, whatever the sign and scale."""
        return self.mantissa == 0

    def get_bit(self, index: int) -> int:
        """Return bit ``index`` (0..127) of the 128-bit representation."""
        if not 0 <= index <= SIGN_BIT:
            raise IndexError(f"bit index out of range: {index}")
        return (self._as_int() >> index) & 1

    def set_bit(self, index: int, value: int) -> "Decimal96":
        """Return a copy with bit ``index`` set to ``value`` (0 or 1)."""
        if value not in (0, 1):
            raise ValueError(f"bit value must be 0 or 1, not {value}")
        if not 0 <= index <= SIGN_BIT:
            raise IndexError(f"bit index out of range: {index}")
        raw = self._as_int()
        raw = raw | (1 << index) if value else raw & ~(1 << index)
        return Decimal96.from_bits(
            [(raw >> shift) & WORD_MASK for shift in (0, 32, 64, 96)]
        )

    def with_scale(self, scale: int) -> "Decimal96":
        """Return a copy with another scale (kept to its eight stored bits)."""
        return Decimal96(self.mantissa, scale & 0xFF, self.negative)

    def with_sign(self, negative: bool) -> "Decimal96":
        """Return a copy with the given sign."""
        return Decimal96(self.mantissa, self.scale, bool(negative))


def to_decimal96(mantissa: int, scale: int, negative: bool) -> Decimal96:
    """Fit an unbounded mantissa and scale into a Decimal96.

    A scale above 28 is brought down by dividing by ten, rounding half up.
    Raises an overflow error when the mantissa does not fit in 96 bits.
    """
    if mantissa < 0:
        raise ValueError("mantissa must not be negative")
    while scale > MAX_SCALE:
        quotient, remainder = divmod(mantissa, 10)
        mantissa = quotient + (1 if remainder > 4 else 0)
        scale -= 1
    if scale < 0 or mantissa >= MANTISSA_LIMIT:
        raise NegativeOverflowError() if negative else PositiveOverflowError()
    return Decimal96(mantissa, scale, bool(negative))


def align_scales(a: Decimal96, b: Decimal96) -> tuple[int, int, int]:
    """Bring both mantissas to the larger of the two scales.

    Returns ``(mantissa_a, mantissa_b, scale)``.
    """
    scale = max(a.scale, b.scale)
    return (
        a.mantissa * 10 ** (scale - a.scale),
        b.mantissa * 10 ** (scale - b.scale),
        scale,
    )