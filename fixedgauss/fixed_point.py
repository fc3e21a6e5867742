"""
Checked WAD fixed-point arithmetic on Python ints treated as int256 words.

Every operation truncates toward zero (two's complement SDIV semantics) and
raises instead of wrapping when a result leaves the int256 range, so the same
inputs give bit-identical outputs everywhere.
"""
from __future__ import annotations
import math
import numbers
from decimal import Decimal, ROUND_DOWN, localcontext
from typing import Union
from .conventions import (
    WAD, INT256_MIN, INT256_MAX,
    EXP_LOWER_BOUND, EXP_UPPER_BOUND, EXP_SCALE, LN2_36,
)
from .errors import ArithmeticOverflow, MinValueUnrepresentable

Numeric = Union[int, float, str, Decimal]

# ---- integer primitives ----

def check_int256(x: int) -> int:
    if x < INT256_MIN or x > INT256_MAX:
        raise ArithmeticOverflow(f"{x} does not fit in int256.")
    return x

def sdiv(x: int, y: int) -> int:
    """Signed division truncating toward zero."""
    if y == 0:
        raise ArithmeticOverflow("Division by zero.")
    q = abs(x) // abs(y)
    return -q if (x < 0) != (y < 0) else q

def mul_div(x: int, y: int, d: int) -> int:
    """trunc(x*y/d), failing when x*y is not representable before the division."""
    product = x * y
    if product < INT256_MIN or product > INT256_MAX:
        raise ArithmeticOverflow(f"Product {x}*{y} overflows int256.")
    return check_int256(sdiv(product, d))

def mul_wad(x: int, y: int) -> int:
    return mul_div(x, y, WAD)

def div_wad(x: int, y: int) -> int:
    return mul_div(x, WAD, y)

def absolute_value(x: int) -> int:
    """Magnitude of an int256 as a uint256."""
    check_int256(x)
    if x == INT256_MIN:
        raise MinValueUnrepresentable()
    return x if x >= 0 else -x

# ---- exponential ----

def exp_wad(x: int) -> int:
    """
    trunc(exp(x / WAD) * WAD) using only integer arithmetic.

    Writes x = k*ln2 + r with |r| <= ln2/2, sums the Taylor series of exp(r)
    at 1e36 precision until the next term truncates to zero, then scales
    by 2**k.
    """
    if x <= EXP_LOWER_BOUND:
        return 0
    if x >= EXP_UPPER_BOUND:
        raise ArithmeticOverflow(f"exp_wad({x}) overflows int256.")
    scaled = x * (EXP_SCALE // WAD)
    k = (2*scaled + LN2_36) // (2*LN2_36)
    r = scaled - k*LN2_36

    total = term = EXP_SCALE
    n = 1
    while term != 0:
        term = sdiv(term * r, EXP_SCALE * n)
        total += term
        n += 1

    if k >= 0:
        return check_int256((total << k) // (EXP_SCALE // WAD))
    return total // ((EXP_SCALE // WAD) << -k)

# ---- conversions (boundary use only; the core never touches floats) ----

def to_wad(value: Numeric) -> int:
    """Decimal value -> WAD int, truncating digits past the 18th decimal toward zero."""
    if isinstance(value, bool) or getattr(value, "dtype", None) == bool:
        raise TypeError("bool is not a numeric value.")
    if isinstance(value, numbers.Integral):
        return check_int256(int(value) * WAD)
    if isinstance(value, numbers.Real):
        if not math.isfinite(value):
            raise ValueError(f"Cannot convert {value} to WAD.")
        value = repr(float(value))   # shortest round-trip decimal of the plain float
    d = Decimal(value)
    if not d.is_finite():
        raise ValueError(f"Cannot convert {value} to WAD.")
    with localcontext() as ctx:
        ctx.prec = 120
        scaled = (d * WAD).to_integral_value(rounding=ROUND_DOWN)
    return check_int256(int(scaled))

def from_wad(value: int) -> float:
    return value / WAD
