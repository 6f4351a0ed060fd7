"""Configuration management for slidedict.

This module provides configuration management using Pydantic models.
Configuration comes from defaults; the CLI takes no flags.

Key classes:
- ResampleConfig: Arc-length resampling settings
- FeatureConfig: Wavelet and feature vector settings
- ProcessingConfig: Batch processing settings
- LoggingConfig: Logging settings
- SlideDictSettings: Main application settings
"""

from slidedict.config.settings import (
    FeatureConfig,
    LoggingConfig,
    ProcessingConfig,
    ResampleConfig,
    SlideDictSettings,
    TransformKind,
    WaveletName,
    get_default_settings,
)

__all__ = [
    "FeatureConfig",
    "LoggingConfig",
    "ProcessingConfig",
    "ResampleConfig",
    "SlideDictSettings",
    "TransformKind",
    "WaveletName",
    "get_default_settings",
]
