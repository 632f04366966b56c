"""mathematical constants computed once here to avoid recomputation"""
import math
import sys

# general math constants
SQRT_2 = math.sqrt(2.0)
INV_SQRT_2 = 1.0 / SQRT_2
SQRT_2PI = math.sqrt(2.0 * math.pi)

# smallest variance a rating update is allowed to produce
MIN_VARIANCE = 1e-12

# below this a cdf value is subnormal and has lost its precision
MIN_CDF = sys.float_info.min
