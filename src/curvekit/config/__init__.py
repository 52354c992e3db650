"""Configuration management for curvekit.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments, keyword arguments to the
kernel functions, or defaults.

Key classes:
- SamplingConfig: Oversampling and sample-count settings
- NumericConfig: Numeric tolerance settings
- LoggingConfig: Logging settings
- CurvekitSettings: Main application settings
"""

from curvekit.config.settings import (
    CurvekitSettings,
    LoggingConfig,
    NumericConfig,
    SamplingConfig,
    get_default_settings,
)

__all__ = [
    "CurvekitSettings",
    "LoggingConfig",
    "NumericConfig",
    "SamplingConfig",
    "get_default_settings",
]
