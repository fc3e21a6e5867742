"""
Example: fixed-point standard normal CDF next to the float references.

Prints cdf(x, 0, 1) for x in [-4, 4] from the WAD implementation, the same
approximation in double precision, and the math.erf based CDF.

Run:
    python examples/cdf_table.py
"""
import numpy as np

from fixedgauss import WAD, cdf, to_wad, from_wad
from fixedgauss.normaldist import normcdf, normcdf_exact


def main():
    print(f"{'x':>6} {'fixed':>22} {'approx (float)':>22} {'exact (float)':>22}")
    for x in np.linspace(-4.0, 4.0, 17):
        x = float(x)
        c = cdf(to_wad(x), 0, WAD)
        print(f"{x:6.2f} {from_wad(c):22.18f} {normcdf(x):22.18f} {normcdf_exact(x):22.18f}")


if __name__ == "__main__":
    main()
