"""
Custom exception hierarchy for geohash-grid.

All custom exceptions inherit from GeohashError for easy catching.
"""


class GeohashError(Exception):
    """Base exception for all geohash-grid errors."""
    pass


class InvalidCharacterError(GeohashError, ValueError):
    """Geohash text contains characters outside the base-32 alphabet.

    Attributes:
        value: The rejected input string
        invalid: Offending characters, in order of first appearance
        position: Index of the first offending character
    """

    def __init__(self, message: str, value: str = "", invalid: str = "", position: int = None):
        super().__init__(message)
        self.value = value
        self.invalid = invalid
        self.position = position

    def __str__(self):
        base = super().__str__()
        if self.position is not None:
            return f"{base} (position={self.position})"
        return base


class InvalidDirectionError(GeohashError, ValueError):
    """Direction is not one of NORTH, EAST, SOUTH or WEST.

    Example:
        >>> raise InvalidDirectionError("Illegal input direction: 99", direction=99)
    """

    def __init__(self, message: str, direction=None):
        super().__init__(message)
        self.direction = direction


class ConfigurationError(GeohashError):
    """Configuration-related errors.

    Raised when configuration loading or validation fails.

    Example:
        >>> raise ConfigurationError("Invalid config: lat_tol must be positive")
    """
    pass
