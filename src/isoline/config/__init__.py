"""Configuration management for isoline.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- MarchConfig: Threshold selection and border handling
- SimplifyConfig: Polyline simplification settings
- OutputConfig: SVG styling
- LoggingConfig: Logging settings
- IsolineSettings: Main application settings
"""

from isoline.config.settings import (
    IsolineSettings,
    LoggingConfig,
    MarchConfig,
    OutputConfig,
    SimplifyConfig,
    get_default_settings,
)

__all__ = [
    "IsolineSettings",
    "LoggingConfig",
    "MarchConfig",
    "OutputConfig",
    "SimplifyConfig",
    "get_default_settings",
]
