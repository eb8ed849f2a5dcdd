"""
Adjacent-cell lookup for geohashes.

Finds the cell next to a geohash in a cardinal direction using the
neighbor/border tables, without decoding to coordinates. When the last
character sits on the edge of its parent cell the parent prefix is
stepped in the same direction first, recursively.
"""
from typing import Dict

from geohash_grid.core.codec import GeoHash
from geohash_grid.core.tables import BASE32, BORDERS, NEIGHBORS, Direction
from geohash_grid.utils.error_handling import require_direction, require_geohash


def _step(hash_text: str, direction: Direction) -> str:
    # Nothing left to step: the walk has wrapped around the top-level grid
    if not hash_text:
        return ""

    base, last = hash_text[:-1], hash_text[-1]
    key = (direction, len(hash_text) % 2 == 0)

    if last in BORDERS[key]:
        base = _step(base, direction)

    return base + BASE32[NEIGHBORS[key].index(last)]


@require_direction("direction")
@require_geohash("geohash")
def neighbor(geohash: GeoHash, direction: Direction) -> GeoHash:
    """
    Get the adjacent geohash in one direction, at the same length.

    Args:
        geohash: GeoHash or raw string
        direction: Direction member, its value 0-3, or a name such as "north"

    Returns:
        GeoHash of the neighbouring cell

    Raises:
        InvalidDirectionError: If direction is not NORTH, EAST, SOUTH or WEST
        InvalidCharacterError: If geohash contains illegal characters

    Example:
        >>> neighbor("gz", Direction.EAST)
        GeoHash('up')
        >>> neighbor("up", "west")
        GeoHash('gz')

    Note:
        Latitude does not wrap in reality but the tables do: stepping north
        off the top row lands on the bottom row (north of "b" is "0").
    """
    return GeoHash(_step(geohash, direction))


@require_geohash("geohash")
def adjacent(geohash: GeoHash) -> Dict[Direction, GeoHash]:
    """
    Get the four cardinal neighbours of a geohash.

    Example:
        >>> adjacent("s")[Direction.NORTH]
        GeoHash('u')
    """
    return {direction: neighbor(geohash, direction) for direction in Direction}
