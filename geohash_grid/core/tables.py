"""
Alphabet and direction lookup tables for geohash cells.

Even- and odd-length hashes end on characters whose 5 bits interleave
longitude and latitude in opposite order, so every direction needs one
table per parity. Tables are keyed by ``(Direction, is_even)`` where
``is_even`` is the parity of the full hash length.

References:
    https://en.wikipedia.org/wiki/Geohash
"""
from enum import IntEnum
from typing import Dict, Tuple


# Base32 encoding for geohash (no a, i, l, o)
BASE32 = "0123456789bcdefghjkmnpqrstuvwxyz"

# Smallest cell height/width the encoder will aim for, in degrees.
# Roughly 6.3 cm at the equator for a 6371 km earth radius.
LAT_MAX_PRECISION = 1e-8
LON_MAX_PRECISION = 1e-8

_DIRECTION_ALIASES = {
    'n': 'NORTH',
    'e': 'EAST',
    's': 'SOUTH',
    'w': 'WEST',
}


class Direction(IntEnum):
    """Cardinal step between adjacent cells of the same length."""
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def opposite(self) -> "Direction":
        """Direction that undoes this step."""
        return Direction((self.value + 2) % 4)

    @classmethod
    def from_name(cls, name: str) -> "Direction":
        """
        Look up a direction by name or initial, case-insensitive.

        Args:
            name: "north", "N", "West", ...

        Returns:
            Matching Direction

        Raises:
            KeyError: If the name is not a known direction
        """
        key = name.strip()
        key = _DIRECTION_ALIASES.get(key.lower(), key.upper())
        return cls[key]


# Character of the adjacent cell is BASE32[NEIGHBORS[...].index(last)]
NEIGHBORS: Dict[Tuple[Direction, bool], str] = {
    (Direction.NORTH, True): "p0r21436x8zb9dcf5h7kjnmqesgutwvy",
    (Direction.EAST, True): "bc01fg45238967deuvhjyznpkmstqrwx",
    (Direction.SOUTH, True): "14365h7k9dcfesgujnmqp0r2twvyx8zb",
    (Direction.WEST, True): "238967debc01fg45kmstqrwxuvhjyznp",
    (Direction.NORTH, False): "bc01fg45238967deuvhjyznpkmstqrwx",
    (Direction.EAST, False): "p0r21436x8zb9dcf5h7kjnmqesgutwvy",
    (Direction.SOUTH, False): "238967debc01fg45kmstqrwxuvhjyznp",
    (Direction.WEST, False): "14365h7k9dcfesgujnmqp0r2twvyx8zb",
}

# Last characters whose step leaves the parent cell
BORDERS: Dict[Tuple[Direction, bool], str] = {
    (Direction.NORTH, True): "prxz",
    (Direction.EAST, True): "bcfguvyz",
    (Direction.SOUTH, True): "028b",
    (Direction.WEST, True): "0145hjnp",
    (Direction.NORTH, False): "bcfguvyz",
    (Direction.EAST, False): "prxz",
    (Direction.SOUTH, False): "0145hjnp",
    (Direction.WEST, False): "028b",
}
