"""Configuration models and loading utilities."""

from pathlib import Path

import yaml
from pydantic import BaseModel, field_validator


class FacilityConfig(BaseModel):
    """Parking facility configuration."""

    capacity: int = 7  # Number of parking slots
    store_path: str = "parking_data.txt"  # Flat text store for parked vehicles

    @field_validator("capacity")
    @classmethod
    def check_capacity(cls, v: int) -> int:
        if v < 1:
            raise ValueError("capacity must be at least 1")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Accept level names in any case."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level


class MetricsConfig(BaseModel):
    """Metrics export configuration."""

    enabled: bool = False
    output_path: str = "parking_metrics.prom"  # Written at shutdown


class AppConfig(BaseModel):
    """Main application configuration."""

    facility: FacilityConfig = FacilityConfig()
    logging: LoggingConfig = LoggingConfig()
    metrics: MetricsConfig = MetricsConfig()


def load_config(path: str | Path) -> AppConfig:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the configuration file

    Returns:
        Validated AppConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config is invalid
        OSError: If config file can't be read
    """
    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

    # An empty file means all defaults
    if data is None:
        return AppConfig()
    if not isinstance(data, dict):
        raise ValueError(f"Configuration must be a mapping: {config_path}")

    return AppConfig(**data)


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path("config/config.yaml")
