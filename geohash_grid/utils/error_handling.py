"""
Argument validation for the public geohash API.

Provides decorators that check and coerce geohash and direction arguments
before the wrapped function runs, so malformed input fails at the call
boundary rather than mid-algorithm.
"""
import inspect
from functools import wraps
from typing import Any, Callable

from geohash_grid.core.codec import GeoHash, parse
from geohash_grid.core.tables import Direction
from geohash_grid.utils.exceptions import InvalidCharacterError, InvalidDirectionError
from geohash_grid.utils.logging_config import get_logger

logger = get_logger(__name__)


def validate_geohash(value: Any) -> GeoHash:
    """
    Coerce a value to a GeoHash.

    Parameters
    ----------
    value : Any
        GeoHash or plain string

    Returns
    -------
    GeoHash

    Raises
    ------
    InvalidCharacterError
        If the string has characters outside the alphabet
    TypeError
        If the value is not a string
    """
    if not isinstance(value, str):
        raise TypeError(f"Geohash must be a string, got {type(value).__name__}")
    return parse(value)


def validate_direction(value: Any) -> Direction:
    """
    Coerce a value to a Direction.

    Accepts Direction members, their integer values (0-3) and names or
    initials ("north", "N").

    Raises
    ------
    InvalidDirectionError
        If the value does not name one of the four directions
    """
    if isinstance(value, Direction):
        return value

    if isinstance(value, str):
        try:
            return Direction.from_name(value)
        except KeyError:
            raise InvalidDirectionError(f"Illegal input direction: {value!r}", direction=value) from None

    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDirectionError(f"Illegal input direction: {value!r}", direction=value)

    try:
        return Direction(value)
    except ValueError:
        raise InvalidDirectionError(f"Illegal input direction: {value!r}", direction=value) from None


def _validated_argument(param: str, validator: Callable[[Any], Any]):
    """Build a decorator that replaces argument ``param`` with ``validator(param)``."""
    def decorator(func: Callable) -> Callable:
        sig = inspect.signature(func)
        if param not in sig.parameters:
            raise TypeError(f"{func.__name__}() has no parameter '{param}'")

        @wraps(func)
        def wrapper(*args, **kwargs):
            bound = sig.bind(*args, **kwargs)
            if param in bound.arguments:
                try:
                    bound.arguments[param] = validator(bound.arguments[param])
                except (InvalidCharacterError, InvalidDirectionError) as e:
                    logger.warning(
                        f"{func.__name__} rejected argument",
                        param=param,
                        error=str(e),
                    )
                    raise
            return func(*bound.args, **bound.kwargs)
        return wrapper
    return decorator


def require_geohash(param: str = "geohash"):
    """
    Decorator to validate a geohash argument.

    Parameters
    ----------
    param : str
        Name of the geohash parameter to check

    Raises
    ------
    InvalidCharacterError
        If the argument contains characters outside the alphabet
    """
    return _validated_argument(param, validate_geohash)


def require_direction(param: str = "direction"):
    """
    Decorator to validate a direction argument.

    Parameters
    ----------
    param : str
        Name of the direction parameter to check

    Raises
    ------
    InvalidDirectionError
        If the argument is not one of the four directions
    """
    return _validated_argument(param, validate_direction)
