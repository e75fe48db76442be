"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
"""

import logging
from pathlib import Path
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator, ConfigDict

# Package root: backend/race_points/
PACKAGE_ROOT = Path(__file__).parent
# Embedded reference tables: backend/race_points/features/scoring/data/
DEFAULT_DATA_DIR = PACKAGE_ROOT / "features" / "scoring" / "data"


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # === Scoring ===
    data_dir: Path = Field(
        default=DEFAULT_DATA_DIR,
        description="Directory with coefficients.yaml and breakpoints.yaml"
    )
    clamp_parametric_points: bool = Field(
        default=False,
        description="Clamp quadratic/linear scores at 0 (tabular scores always are)"
    )

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept 'debug', 'Info', ... and reject unknown level names."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RACE_POINTS_",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
