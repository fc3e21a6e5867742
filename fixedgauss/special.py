from __future__ import annotations
from .conventions import (
    WAD, TWO_WAD, ERFC_BOUND,
    ERFC_A, ERFC_B, ERFC_C, ERFC_D, ERFC_E,
    ERFC_F, ERFC_G, ERFC_H, ERFC_I, ERFC_J,
)
from .fixed_point import absolute_value, mul_div, mul_wad, div_wad, exp_wad

def _exponent_correction(t: int) -> int:
    """t*(B + t*(C + t*(D + t*(E + t*(F + t*(G + t*(H + t*(I + t*J)))))))) in WAD."""
    inner = ERFC_F + mul_wad(t, ERFC_G + mul_wad(t, ERFC_H + mul_wad(t, ERFC_I + mul_wad(t, ERFC_J))))
    outer = ERFC_B + mul_wad(t, ERFC_C + mul_wad(t, ERFC_D + mul_wad(t, ERFC_E + mul_wad(t, inner))))
    return mul_wad(t, outer)

def erfc(value: int) -> int:
    """
    Complementary error function of a WAD value, returned in WAD.

    Output lies in [0, 2*WAD]; inputs at or beyond +/-ERFC_BOUND saturate
    to 0 and 2*WAD respectively.
    """
    if value >= ERFC_BOUND:
        return 0
    if value <= -ERFC_BOUND:
        return TWO_WAD

    z = absolute_value(value)
    t = div_wad(WAD, WAD + mul_div(z, WAD, TWO_WAD))   # 1 / (1 + z/2)
    k = -mul_wad(z, z) - ERFC_A + _exponent_correction(t)
    r = mul_wad(t, exp_wad(k))
    # erfc(-z) = 2 - erfc(z)
    return r if value >= 0 else TWO_WAD - r
