"""Conversions between Decimal96 and Python int and float values."""

from __future__ import annotations

import math
import struct

from .core import MAX_SCALE, MANTISSA_LIMIT, ConversionError, Decimal96

_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1


def _float32(value: float) -> float:
    """Round a Python float to single precision."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def from_int(value: int) -> Decimal96:
    """Convert a 32-bit signed integer to a decimal."""
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ConversionError(f"integer out of 32-bit range: {value}")
    return Decimal96(abs(value), 0, value < 0)


def to_int(value: Decimal96) -> int:
    """Convert a decimal to a 32-bit signed integer, dropping the fraction.

    Raises ConversionError when the mantissa does not fit in 32 bits.
    """
    if value.mantissa >> 32:
        raise ConversionError("decimal does not fit in a 32-bit integer")
    low = value.mantissa
    result = low - (1 << 32) if low > _INT32_MAX else low
    if 0 < value.scale <= MAX_SCALE:
        divisor = 10**value.scale
        quotient = abs(result) // divisor
        result = -quotient if result < 0 else quotient
    return -result if value.negative else result


def from_float(value: float) -> Decimal96:
    """Convert a single-precision float to a decimal of about seven digits."""
    src = _float32(value)
    if math.isnan(src) or math.isinf(src):
        raise ConversionError(f"cannot convert {value!r} to a decimal")
    if src == 0:
        return Decimal96()

    scale = 0
    copy = abs(src)
    while scale < MAX_SCALE and copy < (1 << 21):
        copy *= 10
        scale += 1
    copy = math.floor(copy + 0.5)
    while copy != 0 and math.fmod(copy, 10) == 0 and scale > 0:
        scale -= 1
        copy /= 10
    if copy == 0:
        return Decimal96()

    mantissa = int(_float32(copy))
    if mantissa >= MANTISSA_LIMIT:
        raise ConversionError(f"float too large for a decimal: {value!r}")
    return Decimal96(mantissa, scale, src < 0)


def to_float(value: Decimal96) -> float:
    """Convert a decimal to the nearest single-precision float."""
    number = float(value.mantissa) / math.pow(10, value.scale)
    if value.negative:
        number = -number
    return _float32(number)