
# Package-wide constants. Every fixed-point value is an int scaled by WAD.
WAD     = 10**18
TWO_WAD = 2 * WAD

# Signed 256-bit word limits
INT256_MIN = -2**255
INT256_MAX = 2**255 - 1

# Domain of the CDF arguments
X_BOUND     = 10**23              # |x| <= 100000
MU_BOUND    = 10**20              # |mu| <= 100
SIGMA_BOUND = 10**19              # 0 < sigma <= 10

# erfc saturates to 0 / 2 beyond this magnitude
ERFC_BOUND = 5_900_000_000_000_000_000

SQRT2 = 1_414_213_562_373_095_048

# Rational approximation of erfc (Numerical Recipes erfcc, |rel err| < 1.2e-7)
ERFC_A =  1_265_512_230_000_000_000
ERFC_B =  1_000_023_680_000_000_000
ERFC_C =    374_091_960_000_000_000
ERFC_D =     96_784_180_000_000_000
ERFC_E =   -186_288_060_000_000_000
ERFC_F =    278_868_070_000_000_000
ERFC_G = -1_135_203_980_000_000_000
ERFC_H =  1_488_515_870_000_000_000
ERFC_I =   -822_152_230_000_000_000
ERFC_J =    170_872_770_000_000_000

# exp_wad limits: floor(ln(0.5e-18) * 1e18) and floor(ln(INT256_MAX / 1e18) * 1e18)
EXP_LOWER_BOUND = -42_139_678_854_452_767_551
EXP_UPPER_BOUND = 135_305_999_368_893_231_589

# Working precision of exp_wad
EXP_SCALE = 10**36
LN2_36    = 693_147_180_559_945_309_417_232_121_458_176_568

# Test-vector generation defaults
LOOP_SIZE  = 100_000
MU_RANGE   = 100.0     # mu ~ U(-MU_RANGE, MU_RANGE)
SIGMA_MAX  = 10.0      # sigma ~ U(0, SIGMA_MAX)
SIGMA_SPAN = 10.0      # x ~ U(mu - SIGMA_SPAN*sigma, mu + SIGMA_SPAN*sigma)
INPUT_FILE  = "input"
OUTPUT_FILE = "output"

# Agreement tolerance between the fixed-point CDF and the float reference (real units)
EPSILON = 1e-8
# Bound on the largest deviation over a whole generated batch (real units)
MAX_DEVIATION = 1e-13
