import pytest

from deci96.arithmetic import add, div, floor
from deci96.compare import is_equal
from deci96.convert import from_int, to_float, to_int
from deci96.core import (
    Decimal96,
    DecimalZeroDivisionError,
    NegativeOverflowError,
    PositiveOverflowError,
)

NEG = 0x80000000
MAX_MANTISSA = (1 << 96) - 1


def dec(low, mid=0, high=0, flags=0):
    return Decimal96.from_bits([low, mid, high, flags])


# ---------------------------------------------------------------- add


def test_add_same_sign():
    assert add(from_int(1), from_int(2)) == Decimal96(3, 0, False)


def test_add_aligns_scales():
    result = add(Decimal96(15, 1), Decimal96(25, 2))
    assert result.mantissa == 175
    assert result.scale == 2
    assert not result.negative


def test_add_negative_values():
    result = add(from_int(-5), from_int(-7))
    assert result == Decimal96(12, 0, True)


def test_add_opposite_signs_first_larger():
    assert add(from_int(10), from_int(-3)) == Decimal96(7, 0, False)


def test_add_opposite_signs_second_larger():
    assert add(from_int(3), from_int(-10)) == Decimal96(7, 0, True)


def test_add_opposite_equal_gives_positive_zero():
    result = add(from_int(-4), from_int(4))
    assert result.mantissa == 0
    assert not result.negative


def test_add_positive_overflow():
    with pytest.raises(PositiveOverflowError):
        add(Decimal96(MAX_MANTISSA), from_int(1))


def test_add_negative_overflow():
    with pytest.raises(NegativeOverflowError):
        add(Decimal96(MAX_MANTISSA, 0, True), from_int(-1))


def test_add_is_commutative():
    a = Decimal96(12345, 3, True)
    b = Decimal96(678, 1, False)
    assert add(a, b) == add(b, a)


# ---------------------------------------------------------------- div


def test_div_1():
    result = div(dec(2, flags=NEG), dec(2))
    assert result.mantissa == 1
    assert result.negative


def test_div_2():
    result = div(dec(2), dec(2, flags=NEG))
    assert result.mantissa == 1
    assert result.negative


def test_div_3():
    result = div(dec(2, flags=NEG), dec(2, flags=NEG))
    assert to_int(result) == 1


@pytest.mark.parametrize(
    "dividend",
    [dec(2, flags=NEG), dec(2), dec(1110), dec(15, flags=NEG), dec(42), dec(42, flags=NEG)],
)
def test_div_by_zero(dividend):
    with pytest.raises(DecimalZeroDivisionError):
        div(dividend, dec(0))


def test_div_7():
    assert to_int(div(from_int(2), from_int(2))) == 1


def test_div_8():
    assert to_int(div(from_int(0), from_int(5))) == 0


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (dec(100), dec(10), (10, 0, 0, 0)),
        (dec(100, flags=NEG), dec(10), (10, 0, 0, NEG)),
        (dec(110, flags=NEG), dec(10, flags=NEG), (11, 0, 0, 0)),
        (dec(0), dec(10), (0, 0, 0, 0)),
        (dec(42), dec(42), (1, 0, 0, 0)),
        (dec(1000, flags=NEG), dec(10), (100, 0, 0, NEG)),
        (dec(42), dec(1), (42, 0, 0, 0)),
        (dec(25), dec(5), (5, 0, 0, 0)),
        (dec(128), dec(64), (2, 0, 0, 0)),
        (dec(128), dec(32), (4, 0, 0, 0)),
        (dec(128), dec(16), (8, 0, 0, 0)),
    ],
)
def test_div_exact_results(a, b, expected):
    result = div(a, b)
    assert result.to_bits()[:3] == expected[:3]
    assert result.scale == 0
    if expected[0]:
        assert result.negative == bool(expected[3])


def test_div_zero_by_negative():
    result = div(dec(0), dec(10, flags=NEG))
    assert result.mantissa == 0
    assert result.scale == 0


def test_div_20():
    result = div(dec(10), dec(1000))
    assert result.mantissa == 1
    assert result.scale == 2
    assert to_float(result) == pytest.approx(0.01, rel=1e-6)


def test_div_24():
    result = div(dec(85), dec(10))
    assert result.scale == 1
    assert to_float(result) == 8.5


def test_div_25():
    result = div(from_int(85), from_int(10))
    assert result.scale == 1
    assert to_float(result) == 8.5


def test_div_26():
    result = div(from_int(-96), from_int(10))
    assert result.scale == 1
    assert result == Decimal96(96, 1, True)
    assert to_float(result) == pytest.approx(-9.6, rel=1e-6)


def test_div_27():
    result = div(from_int(84), from_int(-10))
    assert result.scale == 1
    assert result == Decimal96(84, 1, True)
    assert to_float(result) == pytest.approx(-8.4, rel=1e-6)


@pytest.mark.parametrize("a, b", [(0, 10), (0, -10)])
def test_div_zero_dividend(a, b):
    result = div(from_int(a), from_int(b))
    assert to_int(result) == 0
    assert result.scale == 0


@pytest.mark.parametrize("a, b", [(3, 3), (-8, -8)])
def test_div_equal_values(a, b):
    result = div(from_int(a), from_int(b))
    assert to_int(result) == 1
    assert result.scale == 0


def test_div_repeating_fraction_fills_precision():
    result = div(from_int(10), from_int(3))
    assert result.mantissa == int("3" * 29)
    assert result.scale == 28


def test_div_repeating_fraction_rounds_half_up():
    result = div(from_int(2), from_int(3))
    assert result.mantissa == int("6" * 27 + "7")
    assert result.scale == 28


def test_div_too_many_digits_overflows():
    with pytest.raises(PositiveOverflowError):
        div(from_int(100), from_int(3))


def test_div_with_fractional_operands():
    result = div(Decimal96(15, 1), Decimal96(5, 1))
    assert is_equal(result, from_int(3))


# ---------------------------------------------------------------- floor


def test_floor_1():
    assert floor(dec(2)) == Decimal96(2, 0, False)


def test_floor_2():
    result = floor(dec(2, flags=NEG))
    assert result == Decimal96(2, 0, True)
    assert to_float(result) == -2.0


def test_floor_3():
    value = dec(2, flags=NEG).with_scale(5)
    result = floor(value)
    assert result == Decimal96(1, 0, True)


def test_floor_4():
    value = dec(2).with_scale(5)
    result = floor(value)
    assert to_float(result) == 0.0
    assert result.mantissa == 0


def test_floor_5():
    value = dec(7444923).with_scale(5)
    result = floor(value)
    assert is_equal(result, dec(74))


def test_floor_6():
    value = dec(7444923).with_scale(5).set_bit(127, 1)
    check = dec(75).set_bit(127, 1)
    assert is_equal(floor(value), check)


def test_floor_7():
    value = dec(
        0b00001111111111111111111111111111,
        0b00111110001001010000001001100001,
        0b00100000010011111100111001011110,
        0b10000000000010100000000000000000,
    )
    assert floor(value).to_bits() == (
        0b10100111011001000000000000000000,
        0b00001101111000001011011010110011,
        0,
        0b10000000000000000000000000000000,
    )


def test_floor_never_exceeds_value():
    for mantissa, scale, negative in [(1999, 3, False), (1999, 3, True), (5, 0, True)]:
        value = Decimal96(mantissa, scale, negative)
        result = floor(value)
        assert result.scale == 0
        assert not is_equal(add(result, from_int(1)), value) or mantissa % 10**scale
        assert to_float(result) <= to_float(value)