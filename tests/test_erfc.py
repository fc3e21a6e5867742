import math
import numpy as np
from fixedgauss import WAD, ERFC_BOUND, erfc, to_wad, from_wad
from fixedgauss.conventions import INT256_MIN, INT256_MAX
from fixedgauss import normaldist
from conftest import FLOAT_ATOL

GRID = [-5.85, -4.0, -2.5, -1.0, -0.3, -1e-6, 1e-6, 0.05, 0.3, 0.727, 1.0, 1.7, 2.5, 3.3, 4.0, 5.0, 5.85]

def test_saturation():
    assert erfc(ERFC_BOUND) == 0
    assert erfc(ERFC_BOUND + 1) == 0
    assert erfc(INT256_MAX) == 0
    assert erfc(-ERFC_BOUND) == 2*WAD
    assert erfc(-ERFC_BOUND - 1) == 2*WAD
    # INT256_MIN never reaches absolute_value
    assert erfc(INT256_MIN) == 2*WAD

def test_just_inside_bound():
    assert 0 <= erfc(ERFC_BOUND - 1) < 10**3
    assert 2*WAD - 10**3 < erfc(-ERFC_BOUND + 1) <= 2*WAD

def test_value_at_zero():
    # the approximation is 3e-8 above 1 at the origin
    assert abs(erfc(0) - WAD) < 10**11

def test_point_symmetry():
    for v in GRID:
        w = to_wad(v)
        assert erfc(-w) == 2*WAD - erfc(w), v

def test_matches_float_approximation():
    for v in GRID:
        got = from_wad(erfc(to_wad(v)))
        assert abs(got - normaldist.erfc(v)) <= FLOAT_ATOL, v

def test_close_to_exact_erfc():
    for v in GRID:
        got = from_wad(erfc(to_wad(v)))
        ref = math.erfc(v)
        assert abs(got - ref) <= 1.3e-7 * ref + 1e-15, v

def test_output_range_and_decreasing():
    vals = np.array([erfc(to_wad(v)) for v in np.linspace(-6.0, 6.0, 241)], dtype=object)
    assert all(0 <= v <= 2*WAD for v in vals)
    diffs = np.diff(vals.astype(float))
    # one upward step of ~6e-8 where the sign branch switches at 0
    assert np.all(diffs <= 1e11)
