"""Named constants for the geoex demo and tests.

Dimensions are unitless.
"""

# Demo shapes (all centered at the origin)
DEMO_RADIUS = 3.5                 # circle and sphere radius
DEMO_SIDE = 3.0                   # square side
DEMO_EDGE = 3.0                   # cube edge

# Float comparison tolerance
TOL = 1e-9
