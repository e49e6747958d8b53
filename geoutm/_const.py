"""
Constants declarations for geoutm
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_F = 1 / 298.257222101  # Flattening

# UTM grid constants
K0 = 0.9996  # Scale factor on the central meridian
FALSE_EASTING = 500_000.0
FALSE_NORTHING_SOUTH = 10_000_000.0

# Latitude band letters, 8 degrees each from 80S. The final 'X' is doubled so the
# topmost band (72N to 84N) covers 12 degrees.
ZONE_LETTERS = 'CDEFGHJKLMNPQRSTUVWXX'
MIN_LATITUDE = -80.0
MAX_LATITUDE = 84.0
