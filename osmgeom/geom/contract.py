"""
Geometry Contract

Constants shared by the constructors, dispatch functions and transforms.
"""

# OSM node locations are WGS84 longitude/latitude
DEFAULT_SRID = 4326

# Canonical type names returned by geometry_type()
NULL_TYPE_NAME = "GEOMETRY"
POINT_TYPE_NAME = "POINT"
LINESTRING_TYPE_NAME = "LINESTRING"
POLYGON_TYPE_NAME = "POLYGON"
MULTIPOINT_TYPE_NAME = "MULTIPOINT"
MULTILINESTRING_TYPE_NAME = "MULTILINESTRING"
MULTIPOLYGON_TYPE_NAME = "MULTIPOLYGON"

# A closed ring needs three distinct corners plus the repeated first point
MIN_RING_POINTS = 4
MIN_LINESTRING_POINTS = 2

# Segmentize remainders below this fraction of max_length count as zero
SEGMENTIZE_REMAINDER_TOLERANCE = 1e-12
