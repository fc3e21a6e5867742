import numpy as np
import pytest

# fixed point vs the same approximation in double precision
FLOAT_ATOL = 1e-14
# fixed point vs the exact function (approximation error envelope)
APPROX_ATOL = 1e-7
# tolerated non-monotone step around x == mu, in WAD
SLACK = 10**11

@pytest.fixture(scope="session")
def rng():
    return np.random.default_rng(1234)
