"""Configuration settings for curvekit."""

from pathlib import Path

from pydantic import BaseModel, Field


class SamplingConfig(BaseModel):
    """Configuration for curve sampling.

    The equidistant sample multiplier trades precision for speed: the
    resampler evaluates ``count * multiplier`` dense samples before walking
    them. Values below 2 give no meaningful smoothing.
    """

    equidistant_sample_multiplier: int = Field(
        default=10,
        ge=2,
        le=1000,
        description="Oversampling factor for equidistant resampling",
    )
    bounding_box_samples: int = Field(
        default=100,
        ge=4,
        le=100_000,
        description="Uniform parameter steps used when extracting a bounding box",
    )
    plot_count: int = Field(
        default=10,
        ge=1,
        le=100_000,
        description="Default number of segments when plotting curve points",
    )


class NumericConfig(BaseModel):
    """Configuration for numeric tolerances."""

    epsilon: float = Field(
        default=1e-6,
        gt=0.0,
        le=0.1,
        description="Distance tolerance for on-segment tests",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (no file logging when unset)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class CurvekitSettings(BaseModel):
    """Main application settings."""

    sampling: SamplingConfig = Field(default_factory=SamplingConfig)
    numeric: NumericConfig = Field(default_factory=NumericConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> CurvekitSettings:
    """Get default application settings."""
    return CurvekitSettings()
