from __future__ import annotations


class FixedGaussError(Exception):
    """Root of every error raised by fixedgauss."""


# ---- domain validation (raised by cdf before any arithmetic) ----

class DomainError(FixedGaussError, ValueError):
    pass

class XOutOfBounds(DomainError):
    def __init__(self, x: int):
        super().__init__(f"x={x} outside [-X_BOUND, X_BOUND].")
        self.x = x

class MuOutOfBounds(DomainError):
    def __init__(self, mu: int):
        super().__init__(f"mu={mu} outside [-MU_BOUND, MU_BOUND].")
        self.mu = mu

class SigmaOutOfBounds(DomainError):
    def __init__(self, sigma: int):
        super().__init__(f"sigma={sigma} outside (0, SIGMA_BOUND].")
        self.sigma = sigma


# ---- arithmetic edge cases ----

class FixedPointError(FixedGaussError, ArithmeticError):
    pass

class ArithmeticOverflow(FixedPointError):
    pass

class MinValueUnrepresentable(FixedPointError):
    def __init__(self):
        super().__init__("Magnitude of INT256_MIN is not representable.")
