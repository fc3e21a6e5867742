
import math

SQRT2 = math.sqrt(2.0)

# Floating-point reference only. The fixed-point core never calls into here.

def erfc(x: float) -> float:
    # same rational approximation as the fixed-point erfc, in double precision
    z = math.fabs(x)
    t = 1.0 / (1.0 + 0.5*z)
    r = t * math.exp(-z*z - 1.26551223 + t*(1.00002368 + t*(0.37409196 + t*(0.09678418 +
            t*(-0.18628806 + t*(0.27886807 + t*(-1.13520398 + t*(1.48851587 +
            t*(-0.82215223 + t*0.17087277)))))))))
    return r if x >= 0 else 2.0 - r

def normcdf(x: float, mu: float = 0.0, sigma: float = 1.0) -> float:
    return 0.5 * erfc(-(x - mu) / math.sqrt(2.0*sigma*sigma))

def normcdf_exact(x: float, mu: float = 0.0, sigma: float = 1.0) -> float:
    # high-accuracy via erf
    return 0.5 * (1.0 + math.erf((x - mu) / (sigma*SQRT2)))
