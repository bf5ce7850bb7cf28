"""
Constants declarations for geogrids
"""
import math

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening
WGS84_CODE = 'WE'

HALF_PI = math.pi / 2
TWO_PI = 2 * math.pi

# Approx 1.0e-5 degrees (~1 meter) in radians
EPSILON_RADIANS = 1.75e-7

# Accepted inverse flattening for the polar and grid systems
MIN_INV_FLATTENING = 250.
MAX_INV_FLATTENING = 350.

# Transverse Mercator
TM_MIN_INV_FLATTENING = 150.
TM_TESTED_INV_FLATTENING = (290., 301.)
TM_MIN_SCALE_FACTOR = 0.1
TM_MAX_SCALE_FACTOR = 10.0
TM_MAX_DELTA_LONGITUDE = math.pi * 70 / 180.0
TM_DELTA_EASTING = 20000000.0
TM_DELTA_NORTHING = 10000000.0
TM_SERIES_TERMS = 6
TM_LATITUDE_ITERATIONS = 30
TM_LATITUDE_TOLERANCE = 1.0e-12

# Polar Stereographic
PS_MIN_SCALE_FACTOR = 0.1
PS_MAX_SCALE_FACTOR = 3.0
PS_POLE_TOLERANCE = 1.0e-10
PS_STANDARD_PARALLEL_ITERATIONS = 30
PS_STANDARD_PARALLEL_TOLERANCE = 1.0e-15
PS_LATITUDE_ITERATIONS = 30
PS_LATITUDE_TOLERANCE = 1.0e-10
PS_DELTA_SCALE = 1.01

# UTM
UTM_MIN_LAT = math.radians(-80.5)
UTM_MAX_LAT = math.radians(84.5)
UTM_MIN_EASTING = 100000.0
UTM_MAX_EASTING = 900000.0
UTM_MIN_NORTHING = 0.0
UTM_MAX_NORTHING = 10000000.0
UTM_SCALE_FACTOR = 0.9996
UTM_FALSE_EASTING = 500000.0
UTM_SOUTH_FALSE_NORTHING = 10000000.0

# UPS
UPS_SCALE_FACTOR = 0.994
UPS_FALSE_EASTING = 2000000.0
UPS_FALSE_NORTHING = 2000000.0
UPS_MAX_LAT = HALF_PI
UPS_MIN_NORTH_LAT = math.radians(83.5)
UPS_MAX_SOUTH_LAT = math.radians(-79.5)
UPS_MIN_EAST_NORTH = 0.0
UPS_MAX_EAST_NORTH = 4000000.0

# MGRS
MGRS_MAX_PRECISION = 5
MGRS_MIN_NON_POLAR_LAT = math.radians(-80.0)
MGRS_MAX_NON_POLAR_LAT = math.radians(84.0)
MGRS_TRUNCATION_EPSILON = 4.99e-4
MGRS_ROUNDING_EPSILON = 4.99e-1
MGRS_SQUARE_SIZE = 100000.0
MGRS_ROW_PERIOD = 2000000.0
