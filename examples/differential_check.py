"""
Example: differential check of the fixed-point CDF against stored vectors.

Reads the 'input' and 'output' files written by generate_vectors.py, evaluates
the fixed-point cdf on every triple and reports the largest deviation from the
floating-point reference. Exits non-zero if any vector misses the tolerance.

Environment (optionally from .env):
    FIXEDGAUSS_DATA_DIR   directory holding the vectors (default ./data)
    FIXEDGAUSS_TOLERANCE  absolute tolerance in real units (default 1e-8)
    FIXEDGAUSS_LOGLEVEL   logging level (default INFO)

Run:
    python examples/generate_vectors.py
    python examples/differential_check.py
"""
import os
import sys
import logging
from dotenv import load_dotenv

from fixedgauss import EPSILON, from_wad, run_from_directory

load_dotenv()

logging.basicConfig(
    level=os.getenv("FIXEDGAUSS_LOGLEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


def main():
    data_dir = os.getenv("FIXEDGAUSS_DATA_DIR", "data")
    tolerance = float(os.getenv("FIXEDGAUSS_TOLERANCE", EPSILON))

    report = run_from_directory(data_dir, tolerance=tolerance)
    print(report.summary())
    for f in report.failures[:10]:
        x, mu, sigma = (from_wad(v) for v in f.triple)
        if f.error is not None:
            print(f"  #{f.index}: x={x} mu={mu} sigma={sigma} raised {f.error}")
        else:
            print(f"  #{f.index}: x={x} mu={mu} sigma={sigma} got={from_wad(f.got)} "
                  f"expected={from_wad(f.expected)} dev={f.deviation:.3e}")
    if not report.ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
