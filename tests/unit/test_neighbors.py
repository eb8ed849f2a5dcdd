"""
Tests for the table-driven neighbour resolver.
"""
import random

import pytest

from geohash_grid.core.codec import GeoHash, encode, decode
from geohash_grid.core.neighbors import neighbor, adjacent
from geohash_grid.core.tables import Direction
from geohash_grid.utils.exceptions import InvalidCharacterError, InvalidDirectionError


class TestNeighbor:
    """Tests for neighbor function."""

    @pytest.mark.parametrize("direction,expected", [
        (Direction.NORTH, "u"),
        (Direction.EAST, "t"),
        (Direction.SOUTH, "k"),
        (Direction.WEST, "e"),
    ])
    def test_single_character(self, direction, expected):
        """Neighbours of a top-level cell with no carry."""
        assert neighbor("s", direction) == expected

    def test_carry_into_parent(self):
        """A border character steps the parent cell too."""
        assert neighbor("gz", Direction.EAST) == "up"
        assert neighbor("up", Direction.WEST) == "gz"

    def test_returns_geohash_type(self):
        """Result is a GeoHash of the same length."""
        result = neighbor(GeoHash("u4pruydqqvj"), Direction.NORTH)
        assert isinstance(result, GeoHash)
        assert len(result) == 11

    def test_wraps_at_antimeridian(self):
        """East of the last column is the first column."""
        assert neighbor("z", Direction.EAST) == "b"
        assert neighbor("b", Direction.WEST) == "z"

    def test_wraps_at_pole(self):
        """The tables wrap latitude too: north of the top row is the bottom row."""
        assert neighbor("b", Direction.NORTH) == "0"

    def test_wrapping_writes_nothing(self, capsys):
        """Wrapping steps produce no output, even with logging unconfigured."""
        for cell in ("b", "z", "0", "p", "bz", "zz"):
            for direction in Direction:
                neighbor(cell, direction)

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_empty_hash(self):
        """Stepping an empty hash yields an empty hash."""
        assert neighbor("", Direction.NORTH) == ""

    @pytest.mark.parametrize("direction", [Direction.NORTH, 0, "north", "N", "n", " North "])
    def test_direction_forms(self, direction):
        """Members, integer values and names are accepted."""
        assert neighbor("s", direction) == "u"

    def test_keyword_arguments(self):
        """Arguments can be passed by name."""
        assert neighbor(direction="east", geohash="gz") == "up"

    def test_north_neighbor_shares_edge(self):
        """The northern neighbour starts where the cell ends."""
        rng = random.Random(3)
        for _ in range(50):
            gh = encode(rng.uniform(-80, 80), rng.uniform(-180, 180), 0.01, 0.01)
            box = decode(gh)
            north = decode(neighbor(gh, Direction.NORTH))

            assert north.lat_min == pytest.approx(box.lat_max)
            assert north.lon_min == pytest.approx(box.lon_min)
            assert north.lat_delta == pytest.approx(box.lat_delta)

    def test_east_neighbor_shares_edge(self):
        """The eastern neighbour starts where the cell ends."""
        rng = random.Random(5)
        for _ in range(50):
            gh = encode(rng.uniform(-90, 90), rng.uniform(-170, 170), 0.01, 0.01)
            box = decode(gh)
            east = decode(neighbor(gh, Direction.EAST))

            assert east.lon_min == pytest.approx(box.lon_max)
            assert east.lat_min == pytest.approx(box.lat_min)

    @pytest.mark.parametrize("tol", [1.0, 0.01, 1e-5])
    def test_neighbor_involution(self, tol):
        """Stepping in a direction and back returns the original hash."""
        rng = random.Random(int(tol * 1e6))
        for _ in range(40):
            gh = encode(rng.uniform(-80, 80), rng.uniform(-180, 180), tol, tol)
            for direction in Direction:
                step = neighbor(gh, direction)
                assert neighbor(step, direction.opposite) == gh


class TestNeighborErrors:
    """Tests for neighbor error handling."""

    @pytest.mark.parametrize("direction", [99, -1, 4, "up", "", 1.5, None, True])
    def test_invalid_direction(self, direction):
        """Anything but the four directions is rejected."""
        with pytest.raises(InvalidDirectionError) as exc_info:
            neighbor("gz", direction)

        assert exc_info.value.direction == direction

    def test_invalid_hash(self):
        """Characters outside the alphabet are rejected."""
        with pytest.raises(InvalidCharacterError):
            neighbor("gz!", Direction.NORTH)

    def test_direction_checked_first(self):
        """With both arguments bad, the direction error wins."""
        with pytest.raises(InvalidDirectionError):
            neighbor("gz!", 99)


class TestAdjacent:
    """Tests for adjacent function."""

    def test_four_neighbors(self):
        """One neighbour per cardinal direction."""
        cells = adjacent("s")

        assert list(cells) == list(Direction)
        assert cells == {
            Direction.NORTH: "u",
            Direction.EAST: "t",
            Direction.SOUTH: "k",
            Direction.WEST: "e",
        }

    def test_invalid_hash(self):
        """Characters outside the alphabet are rejected."""
        with pytest.raises(InvalidCharacterError):
            adjacent("sa")
