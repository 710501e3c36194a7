# deci96

A small decimal number type built on a 96-bit unsigned mantissa, a sign and
a decimal scale. A value is `(-1)**sign * mantissa / 10**scale`. Results of
arithmetic are kept to a scale of at most 28.

Values are `Decimal96` instances: frozen dataclasses with the fields
`mantissa`, `scale` and `negative`. They can also be read from and written to
the four-word layout: three 32-bit words of mantissa (low, mid, high) and a
fourth word holding the scale in bits 16–23 and the sign in bit 31.

## Installing

```
pip install deci96
```

## Modules

- `deci96.core`: the `Decimal96` type, the error classes and shared helpers.
  - `Decimal96.from_bits(bits)` and `Decimal96.to_bits()` read and write the
    four-word layout.
  - `is_zero()` is true for a zero mantissa, whatever the sign and scale.
  - `get_bit(index)` and `set_bit(index, value)` read a bit of the 128-bit
    layout or return a copy with one bit changed.
  - `with_scale(scale)` and `with_sign(negative)` return changed copies.
  - `to_decimal96(mantissa, scale, negative)` fits an unbounded mantissa into
    a `Decimal96`. A scale above 28 is brought down by dividing by ten and
    rounding half up. An overflow error is raised if the mantissa still does
    not fit in 96 bits.
  - `align_scales(a, b)` returns both mantissas brought to the larger scale,
    together with that scale.
- `deci96.convert`
  - `from_int` accepts 32-bit signed integers only.
  - `to_int` drops the fraction. It raises `ConversionError` when the
    mantissa is wider than 32 bits. A 32-bit mantissa above 2**31 − 1 wraps
    round to a negative number.
  - `from_float` first rounds the value to single precision, then keeps about
    seven significant digits.
  - `to_float` returns the nearest single-precision value.
- `deci96.compare`: `is_equal`, `is_not_equal`, `is_greater`,
  `is_greater_or_equal`, `is_less` and `is_less_or_equal`. Positive and
  negative zero compare equal.
- `deci96.arithmetic`
  - `add(a, b)` adds two values.
  - `div(a, b)` divides, working out up to about 28 fractional digits.
  - `floor(value)` returns a whole number with scale 0 that keeps the sign of
    `value`.

## Example

```python
from deci96.convert import from_int, to_float, to_int
from deci96.arithmetic import add, div, floor
from deci96.compare import is_greater

a = from_int(85)
b = from_int(10)

q = div(a, b)           # 8.5, scale 1
print(to_float(q))      # 8.5
print(to_int(floor(q))) # 8
print(is_greater(q, b)) # False

total = add(q, b)       # 18.5
```

## Errors

Every error is a subclass of `deci96.core.DecimalError`, which is itself an
`ArithmeticError`:

- `PositiveOverflowError` and `NegativeOverflowError` are raised when a
  result does not fit in 96 bits.
- `DecimalZeroDivisionError` is raised on division by zero. It is also a
  `ZeroDivisionError`.
- `ConversionError` is raised when a value cannot be converted: an integer
  outside the 32-bit range, a decimal too wide for `to_int`, or a NaN,
  infinite or too large float. It is also a `ValueError`.

## What it does not do

The only arithmetic operations are addition, division and floor. There is no
subtraction, multiplication, remainder, negation, rounding or truncation.
There is no command-line tool.

## Running the tests

```
pip install -e .[test]
pytest
```