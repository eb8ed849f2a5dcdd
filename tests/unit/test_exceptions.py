"""
Tests for custom exceptions.
"""
import pytest
from geohash_grid.utils.exceptions import (
    GeohashError,
    InvalidCharacterError,
    InvalidDirectionError,
    ConfigurationError,
)


def test_base_exception():
    """Test base exception."""
    with pytest.raises(GeohashError):
        raise GeohashError("Base error")


def test_invalid_character_error():
    """Test invalid character error with details."""
    error = InvalidCharacterError(
        "Hash contains illegal characters",
        value="u4a",
        invalid="a",
        position=2,
    )

    assert error.value == "u4a"
    assert error.invalid == "a"
    assert error.position == 2
    assert "position=2" in str(error)


def test_invalid_character_error_without_position():
    """Message is unchanged when no position is known."""
    assert str(InvalidCharacterError("bad hash")) == "bad hash"


def test_invalid_direction_error():
    """Test invalid direction error."""
    error = InvalidDirectionError("Illegal input direction: 99", direction=99)
    assert error.direction == 99

    # Should also be catchable as ValueError
    with pytest.raises(ValueError):
        raise error


def test_configuration_error():
    """Test configuration error."""
    with pytest.raises(ConfigurationError):
        raise ConfigurationError("Invalid config")

    # Should also be catchable as base class
    with pytest.raises(GeohashError):
        raise ConfigurationError("Invalid config")


def test_exception_inheritance():
    """Test that all custom exceptions inherit from base."""
    exceptions = [
        InvalidCharacterError,
        InvalidDirectionError,
        ConfigurationError,
    ]

    for exc_class in exceptions:
        assert issubclass(exc_class, GeohashError)
