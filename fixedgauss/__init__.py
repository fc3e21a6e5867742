
from .gaussian import cdf, validate
from .special import erfc
from .fixed_point import (
    absolute_value, mul_div, mul_wad, div_wad, sdiv, exp_wad, to_wad, from_wad
)
from .errors import (
    FixedGaussError, DomainError, XOutOfBounds, MuOutOfBounds, SigmaOutOfBounds,
    FixedPointError, ArithmeticOverflow, MinValueUnrepresentable
)
from .oracle import VectorBatch, generate_vectors, write_vectors, read_vectors
from .differential import DifferentialReport, run_differential, run_from_directory
from .conventions import (
    WAD, X_BOUND, MU_BOUND, SIGMA_BOUND, ERFC_BOUND, SQRT2, LOOP_SIZE, EPSILON, MAX_DEVIATION
)

__all__ = [
    "cdf", "validate", "erfc",
    "absolute_value", "mul_div", "mul_wad", "div_wad", "sdiv", "exp_wad", "to_wad", "from_wad",
    "FixedGaussError", "DomainError", "XOutOfBounds", "MuOutOfBounds", "SigmaOutOfBounds",
    "FixedPointError", "ArithmeticOverflow", "MinValueUnrepresentable",
    "VectorBatch", "generate_vectors", "write_vectors", "read_vectors",
    "DifferentialReport", "run_differential", "run_from_directory",
    "WAD", "X_BOUND", "MU_BOUND", "SIGMA_BOUND", "ERFC_BOUND", "SQRT2", "LOOP_SIZE", "EPSILON", "MAX_DEVIATION",
]
