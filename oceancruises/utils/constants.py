# oceancruises/utils/constants.py

# --- Earth Geometry ---

# Mean Earth radius in kilometers, used for along-track distances.
R_EARTH_KM = 6371.0

# The ordering engine only needs relative costs, so its distance matrix is
# built on a unit sphere.
UNIT_RADIUS = 1.0

# --- Longitude Conventions ---

# Base of the [-180, 180) convention applied when a track crosses 0°/360°.
WESTMOST_LONGITUDE = -180.0

# Longitude bands used to flag tracks crossing the prime meridian while
# expressed in the [0, 360) convention.
WRAPAROUND_EAST_BAND = (0.0, 90.0)
WRAPAROUND_WEST_BAND = (270.0, 360.0)

# --- Route Ordering ---

# Edge weight between the synthetic dummy node and every station.
DUMMY_DISTANCE = 0.0

# Matrices with at most this many nodes (dummy included) are solved exactly.
# Dynamic programming is O(n^2 2^n), so keep this small.
DEFAULT_EXACT_THRESHOLD = 12

# Tolerance for the symmetry check on solver input.
MATRIX_SYMMETRY_ATOL = 1e-9
