"""
Core geohash algorithms.

Contains the base-32 alphabet and direction tables, the encode/decode
codec and the table-driven neighbour resolver.
"""
from geohash_grid.core.tables import (
    BASE32,
    LAT_MAX_PRECISION,
    LON_MAX_PRECISION,
    Direction,
)
from geohash_grid.core.codec import (
    GeoHash,
    BoundingBox,
    normalize,
    encode,
    parse,
    decode,
)
from geohash_grid.core.neighbors import (
    neighbor,
    adjacent,
)

__all__ = [
    'BASE32',
    'LAT_MAX_PRECISION',
    'LON_MAX_PRECISION',
    'Direction',
    'GeoHash',
    'BoundingBox',
    'normalize',
    'encode',
    'parse',
    'decode',
    'neighbor',
    'adjacent',
]
