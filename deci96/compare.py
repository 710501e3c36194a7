"""Comparisons between Decimal96 values."""

from __future__ import annotations

from .core import Decimal96, align_scales


def is_equal(a: Decimal96, b: Decimal96) -> bool:
    """True when both values are numerically equal; +0 equals -0."""
    if a.negative != b.negative:
        return a.is_zero() and b.is_zero()
    ma, mb, _ = align_scales(a, b)
    return ma == mb


def is_not_equal(a: Decimal96, b: Decimal96) -> bool:
    """True when the values differ."""
    return not is_equal(a, b)


def is_greater(a: Decimal96, b: Decimal96) -> bool:
    """True when ``a`` is strictly greater than ``b``."""
    if is_equal(a, b):
        return False
    if not a.negative and b.negative:
        return not (a.is_zero() and b.is_zero())
    if a.negative != b.negative:
        return False
    ma, mb, _ = align_scales(a, b)
    return mb > ma if a.negative else ma > mb


def is_greater_or_equal(a: Decimal96, b: Decimal96) -> bool:
    """True when ``a`` is greater than or equal to ``b``."""
    return is_greater(a, b) or is_equal(a, b)


def is_less(a: Decimal96, b: Decimal96) -> bool:
    """True when ``a`` is strictly less than ``b``."""
    return not is_greater(a, b) and not is_equal(a, b)


def is_less_or_equal(a: Decimal96, b: Decimal96) -> bool:
    """True when ``a`` is less than or equal to ``b``."""
    return is_less(a, b) or is_equal(a, b)