"""
Constants declarations for geolines
"""

import math
import sys

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_INV_F = 298.257223563  # Inverse flattening

# Truncation order of every series expansion
GEODESIC_ORDER = 6
NA3 = GEODESIC_ORDER
NC3 = GEODESIC_ORDER
NC3X = (NC3 * (NC3 - 1)) // 2
NC4 = GEODESIC_ORDER
NC4X = (NC4 * (NC4 + 1)) // 2

# Float characteristics
DIGITS = sys.float_info.mant_dig  # 53
EPSILON = sys.float_info.epsilon
MIN_FLOAT = sys.float_info.min
TINY = math.sqrt(MIN_FLOAT)

# Iteration caps for the inverse solution
MAXIT1 = 20
MAXIT2 = MAXIT1 + DIGITS + 10

# Tolerances
TOL0 = EPSILON
TOL1 = 200 * TOL0
TOL2 = math.sqrt(TOL0)
TOLB = TOL0 * TOL2
XTHRESH = 1000 * TOL2

# Flattening beyond which the truncated series lose accuracy
FLATTENING_WARN_THRESHOLD = 0.01
