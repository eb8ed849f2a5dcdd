"""
Geohash encoding and decoding.

Converts between lat/lon coordinates and geohash strings by repeated
bisection of the latitude and longitude ranges. Bits alternate between
longitude and latitude, starting with longitude, and are packed five at
a time (most significant bit first) into base-32 characters.
"""
import math
from dataclasses import dataclass
from typing import Iterator, Tuple

from shapely.geometry import Polygon

from geohash_grid.core.tables import BASE32, LAT_MAX_PRECISION, LON_MAX_PRECISION
from geohash_grid.utils.exceptions import InvalidCharacterError


_CHAR_INDEX = {char: idx for idx, char in enumerate(BASE32)}

# Bit masks of one character, most significant first
_MASKS = (0x10, 0x08, 0x04, 0x02, 0x01)


class GeoHash(str):
    """
    Immutable, validated geohash string.

    Behaves as a plain ``str`` for storage and comparison; construction
    rejects any character outside the base-32 alphabet.

    Example:
        >>> GeoHash("u4pruydqqvj")
        GeoHash('u4pruydqqvj')
        >>> GeoHash("abc!")
        Traceback (most recent call last):
        ...
        InvalidCharacterError: Hash contains illegal characters: 'a!' (position=0)
    """
    __slots__ = ()

    def __new__(cls, value: str = ""):
        if not isinstance(value, str):
            raise TypeError(f"GeoHash value must be a string, got {type(value).__name__}")
        _check_alphabet(value)
        return super().__new__(cls, value)

    def __repr__(self):
        return f"GeoHash({str.__repr__(self)})"


@dataclass(frozen=True)
class BoundingBox:
    """Cell covered by a geohash: lower-left corner plus full height and width."""
    lat_min: float
    lat_delta: float
    lon_min: float
    lon_delta: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.lat_min, self.lat_delta, self.lon_min, self.lon_delta))

    @property
    def lat_max(self) -> float:
        return self.lat_min + self.lat_delta

    @property
    def lon_max(self) -> float:
        return self.lon_min + self.lon_delta

    @property
    def center(self) -> Tuple[float, float]:
        """(latitude, longitude) of the middle of the cell."""
        return (
            self.lat_min + self.lat_delta / 2,
            self.lon_min + self.lon_delta / 2,
        )

    def contains(self, latitude: float, longitude: float) -> bool:
        """
        Check whether a coordinate lies in the cell, edges included.

        Coordinates are wrapped the same way the encoder wraps them.
        """
        latitude, longitude = normalize(latitude, longitude)
        return (
            self.lat_min <= latitude <= self.lat_max
            and self.lon_min <= longitude <= self.lon_max
        )

    def to_polygon(self) -> Polygon:
        """
        Convert the cell to a Shapely Polygon in (lon, lat) order.

        Example:
            >>> decode("ezs42").to_polygon().bounds
            (-5.625, 42.5830078125, -5.5810546875, 42.626953125)
        """
        return Polygon([
            (self.lon_min, self.lat_min),
            (self.lon_min, self.lat_max),
            (self.lon_max, self.lat_max),
            (self.lon_max, self.lat_min),
            (self.lon_min, self.lat_min),
        ])


def _check_alphabet(value: str) -> None:
    invalid = [(pos, char) for pos, char in enumerate(value) if char not in _CHAR_INDEX]
    if invalid:
        chars = "".join(dict.fromkeys(char for _, char in invalid))
        raise InvalidCharacterError(
            f"Hash contains illegal characters: {chars!r}",
            value=value,
            invalid=chars,
            position=invalid[0][0],
        )


def normalize(latitude: float, longitude: float) -> Tuple[float, float]:
    """
    Wrap a coordinate into latitude [-90, 90) and longitude [-180, 180).

    Non-finite values come back as NaN, which encodes to the lowest cell.

    Example:
        >>> normalize(-460, -190)
        (80.0, 170.0)
    """
    if not math.isfinite(latitude):
        latitude = math.nan
    if not math.isfinite(longitude):
        longitude = math.nan

    latitude = math.fmod(math.fmod(latitude - 90.0, 180.0) + 180.0, 180.0) - 90.0
    longitude = math.fmod(math.fmod(longitude - 180.0, 360.0) + 360.0, 360.0) - 180.0
    return latitude, longitude


def encode(
    latitude: float,
    longitude: float,
    lat_tol: float = LAT_MAX_PRECISION,
    lon_tol: float = LON_MAX_PRECISION,
) -> GeoHash:
    """
    Encode latitude/longitude to a geohash string.

    Characters are produced until the cell is no taller than ``lat_tol``
    and no wider than ``lon_tol``. Tolerances below LAT_MAX_PRECISION /
    LON_MAX_PRECISION are raised to those values. Out-of-range coordinates
    are wrapped, never rejected.

    Args:
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees
        lat_tol: Maximum cell height in degrees
        lon_tol: Maximum cell width in degrees

    Returns:
        GeoHash

    Example:
        >>> encode(57.64911, 10.40744, 2e-6, 2e-6)
        GeoHash('u4pruydqqvj')
    """
    # NaN tolerances are floored as well
    if not lat_tol >= LAT_MAX_PRECISION:
        lat_tol = LAT_MAX_PRECISION
    if not lon_tol >= LON_MAX_PRECISION:
        lon_tol = LON_MAX_PRECISION
    latitude, longitude = normalize(latitude, longitude)

    lat_min, lat_span = -90.0, 180.0
    lon_min, lon_span = -180.0, 360.0

    chars = []
    value = 0
    mask = 0x10
    targeting_longitude = True

    while True:
        if targeting_longitude:
            lon_span *= 0.5
            if longitude > lon_min + lon_span:
                value |= mask
                lon_min += lon_span
        else:
            lat_span *= 0.5
            if latitude > lat_min + lat_span:
                value |= mask
                lat_min += lat_span

        targeting_longitude = not targeting_longitude
        mask >>= 1

        if mask == 0:
            chars.append(BASE32[value])
            value = 0
            mask = 0x10
            if lat_span <= lat_tol and lon_span <= lon_tol:
                break

    return GeoHash("".join(chars))


def parse(value: str) -> GeoHash:
    """
    Create a GeoHash from a string.

    Raises:
        InvalidCharacterError: If any character is outside the alphabet
    """
    if isinstance(value, GeoHash):
        return value
    return GeoHash(value)


def decode(geohash: str) -> BoundingBox:
    """
    Decode a geohash into the bounding box of its cell.

    Args:
        geohash: GeoHash or raw string (validated before decoding)

    Returns:
        BoundingBox with lower-left corner and full cell height/width

    Raises:
        InvalidCharacterError: If a raw string has illegal characters

    Example:
        >>> box = decode("ezs42")
        >>> box.lat_min, box.lon_min
        (42.5830078125, -5.625)
    """
    geohash = parse(geohash)

    lat_min, lat_span = -90.0, 180.0
    lon_min, lon_span = -180.0, 360.0

    for position, char in enumerate(geohash):
        value = _CHAR_INDEX[char]
        # Even positions start on longitude, odd ones on latitude
        targeting_longitude = position % 2 == 0

        for mask in _MASKS:
            if targeting_longitude:
                lon_span *= 0.5
                if value & mask:
                    lon_min += lon_span
            else:
                lat_span *= 0.5
                if value & mask:
                    lat_min += lat_span
            targeting_longitude = not targeting_longitude

    return BoundingBox(lat_min, lat_span, lon_min, lon_span)
