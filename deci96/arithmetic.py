"""Addition, division and rounding down of Decimal96 values."""

from __future__ import annotations

from .core import (
    MAX_SCALE,
    Decimal96,
    DecimalZeroDivisionError,
    align_scales,
    to_decimal96,
)


def add(a: Decimal96, b: Decimal96) -> Decimal96:
    """Return ``a + b``.

    Raises PositiveOverflowError or NegativeOverflowError when the sum does
    not fit in 96 bits.
    """
    ma, mb, scale = align_scales(a, b)
    if a.negative == b.negative:
        mantissa, negative = ma + mb, a.negative
    elif ma > mb:
        mantissa, negative = ma - mb, a.negative
    elif mb > ma:
        mantissa, negative = mb - ma, b.negative
    else:
        mantissa, negative = 0, False
    return to_decimal96(mantissa, scale, negative)


def _long_divide(dividend: int, divisor: int) -> Decimal96:
    """Divide two aligned mantissas, appending fractional digits one by one."""
    quotient, remainder = divmod(dividend, divisor)
    digits = 0
    while remainder and digits <= MAX_SCALE:
        remainder *= 10
        if remainder < divisor:
            remainder *= 10
            quotient *= 10
            digits += 1
        digit, remainder = divmod(remainder, divisor)
        quotient = quotient * 10 + digit
        digits += 1
    # The intermediate value is always positive; the sign is applied later.
    return to_decimal96(quotient, digits, False)


def div(a: Decimal96, b: Decimal96) -> Decimal96:
    """Return ``a / b``.

    Raises DecimalZeroDivisionError when ``b`` is zero and
    PositiveOverflowError when the quotient cannot be represented.
    """
    ma, mb, _ = align_scales(a, b)
    negative = a.negative != b.negative

    if mb == 1:
        result = a if ma else Decimal96()
    elif mb == 0:
        raise DecimalZeroDivisionError("division by zero")
    elif ma == 0:
        result = Decimal96()
    elif ma == mb:
        result = Decimal96(1)
    else:
        result = _long_divide(ma, mb)

    return result.with_sign(negative)


def floor(value: Decimal96) -> Decimal96:
    """Return the largest whole number not greater than ``value``.

    The result has scale 0 and keeps the sign of ``value``.
    """
    whole, fraction = divmod(value.mantissa, 10**value.scale)
    if value.negative and fraction:
        whole += 1
    return Decimal96(whole, 0, value.negative)