import numpy as np
from fixedgauss import WAD, cdf, to_wad, from_wad

def test_basic_flow():
    xs = [-1.96, -1.0, 0.0, 1.0, 1.96]
    probs = [from_wad(cdf(to_wad(x), 0, WAD)) for x in xs]
    assert np.allclose(probs, [0.0249979, 0.1586553, 0.5, 0.8413447, 0.9750021], atol=1e-6)
    assert np.all(np.diff(probs) > 0)
