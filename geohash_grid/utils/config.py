"""
Configuration management using Pydantic for validation.

This module provides type-safe configuration loading and validation
for the geohash-grid command line tools.
"""
from pathlib import Path
from typing import Optional, Union
from pydantic import BaseModel, Field, ValidationError, validator
import yaml
import os

from geohash_grid.core.tables import LAT_MAX_PRECISION, LON_MAX_PRECISION
from geohash_grid.utils.exceptions import ConfigurationError


LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class PrecisionSettings(BaseModel):
    """Default cell size used when encoding."""
    lat_tol: float = Field(LAT_MAX_PRECISION, gt=0.0, description="Maximum cell height (degrees)")
    lon_tol: float = Field(LON_MAX_PRECISION, gt=0.0, description="Maximum cell width (degrees)")


class LoggingSettings(BaseModel):
    """Logging output options."""
    level: str = Field("INFO", description="Log level name")
    json_output: bool = Field(False, description="Render logs as JSON")
    log_file: Optional[Path] = Field(None, description="Optional log file path")

    @validator('level', pre=True)
    def check_level(cls, v):
        """Normalise and check the level name."""
        v = str(v).upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"level must be one of {LOG_LEVELS}, got {v}")
        return v

    @validator('log_file', pre=True)
    def expand_env_vars(cls, v):
        """Expand environment variables in paths."""
        if isinstance(v, str):
            # Replace ${VAR} with environment variable
            for var in ['LOG_ROOT', 'HOME', 'PWD']:
                if f'${{{var}}}' in v:
                    v = v.replace(f'${{{var}}}', os.environ.get(var, ''))
            return Path(v)
        return v


class GridConfig(BaseModel):
    """Complete geohash-grid configuration."""
    precision: PrecisionSettings = Field(default_factory=PrecisionSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def load_config(config_path: Union[str, Path]) -> GridConfig:
    """
    Load and validate configuration from YAML file.

    Args:
        config_path: Path to YAML config file

    Returns:
        Validated GridConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigurationError: If YAML is malformed or validation fails

    Example:
        >>> config = load_config(Path("config/geohash.yaml"))
        >>> config.precision.lat_tol
        0.001
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path, 'r') as f:
            config_dict = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Malformed YAML in {config_path}: {e}") from e

    if config_dict is None:
        config_dict = {}
    if not isinstance(config_dict, dict):
        raise ConfigurationError(
            f"Config root must be a mapping, got {type(config_dict).__name__}: {config_path}"
        )

    try:
        return GridConfig(**config_dict)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid config {config_path}: {e}") from e


def get_default_config() -> GridConfig:
    """
    Get default configuration template.

    Returns:
        Default GridConfig
    """
    return GridConfig(
        precision=PrecisionSettings(),
        logging=LoggingSettings(),
    )
