
import pytest
from fixedgauss import WAD, cdf, to_wad

# Skip if pytest-benchmark plugin is not installed
pytest.importorskip("pytest_benchmark")

def test_cdf_speed(benchmark):
    x, mu, sigma = to_wad("1.25"), to_wad("-0.5"), to_wad("2.75")
    def run():
        cdf(x, mu, sigma)
    benchmark(run)
