from __future__ import annotations
from .conventions import WAD, TWO_WAD, X_BOUND, MU_BOUND, SIGMA_BOUND, SQRT2
from .errors import XOutOfBounds, MuOutOfBounds, SigmaOutOfBounds
from .fixed_point import check_int256, mul_div, sdiv
from .special import erfc

def validate(x: int, mu: int, sigma: int) -> None:
    """Raise the error of the first argument (x, mu, sigma) outside its domain."""
    if x < -X_BOUND or x > X_BOUND:
        raise XOutOfBounds(x)
    if mu < -MU_BOUND or mu > MU_BOUND:
        raise MuOutOfBounds(mu)
    if sigma <= 0 or sigma > SIGMA_BOUND:
        raise SigmaOutOfBounds(sigma)

def cdf(x: int, mu: int, sigma: int) -> int:
    """
    Gaussian CDF P(X <= x) for X ~ N(mu, sigma**2), all arguments and the
    result in WAD. Uses CDF(x) = erfc(-(x - mu) / (sigma*sqrt(2))) / 2.
    """
    validate(x, mu, sigma)
    # both WAD factors go on the numerator before dividing to keep precision
    numerator = check_int256((x - mu) * WAD * WAD)
    negated_z = -sdiv(numerator, check_int256(SQRT2 * sigma))
    return mul_div(WAD, erfc(negated_z), TWO_WAD)
