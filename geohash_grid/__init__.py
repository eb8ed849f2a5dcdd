"""
geohash-grid: geohash encoding, decoding and neighbour lookup.

Example:
    >>> from geohash_grid import encode, decode, neighbor, Direction
    >>> gh = encode(53.3498, -6.2603, 0.001, 0.001)
    >>> decode(gh).contains(53.3498, -6.2603)
    True
    >>> len(neighbor(gh, Direction.NORTH)) == len(gh)
    True
"""
from geohash_grid.core import (
    BASE32,
    LAT_MAX_PRECISION,
    LON_MAX_PRECISION,
    Direction,
    GeoHash,
    BoundingBox,
    normalize,
    encode,
    parse,
    decode,
    neighbor,
    adjacent,
)
from geohash_grid.utils.exceptions import (
    GeohashError,
    InvalidCharacterError,
    InvalidDirectionError,
    ConfigurationError,
)

__version__ = "0.1.0"

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
    'GeohashError',
    'InvalidCharacterError',
    'InvalidDirectionError',
    'ConfigurationError',
]
