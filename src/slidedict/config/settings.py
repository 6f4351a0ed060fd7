"""Configuration settings for Slidedict."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, model_validator


class WaveletName(str, Enum):
    """Wavelet filter used for the per-segment transform."""

    HAAR = "haar"
    DAUBECHIES4 = "daubechies4"
    COIFLET6 = "coiflet6"


class TransformKind(str, Enum):
    """Transform applied to each power-of-two chunk of a signal."""

    FAST = "fast"
    PACKET = "packet"
    FILTER = "filter"


class ResampleConfig(BaseModel):
    """Configuration for arc-length resampling."""

    sample_count: int = Field(
        default=64,
        ge=2,
        le=4096,
        description="Number of samples per axis after resampling",
    )


class FeatureConfig(BaseModel):
    """Configuration for feature vector extraction."""

    coefficient_count: int = Field(
        default=8,
        ge=1,
        description="Leading wavelet coefficients kept per axis",
    )
    wavelet: WaveletName = Field(
        default=WaveletName.HAAR,
        description="Wavelet filter",
    )
    transform: TransformKind = Field(
        default=TransformKind.FAST,
        description="Transform applied per power-of-two chunk",
    )
    level: int | None = Field(
        default=None,
        ge=0,
        description="Maximum transform levels (None = full decomposition)",
    )

    @property
    def vector_length(self) -> int:
        """Length of the feature vector: reserved slot plus both axes."""
        return 1 + 2 * self.coefficient_count


class ProcessingConfig(BaseModel):
    """Configuration for batch processing."""

    max_workers: int | None = Field(
        default=1,
        ge=1,
        description="Max worker processes (1 = inline, None = auto)",
    )
    chunk_size: int = Field(
        default=256,
        ge=1,
        description="Words per worker task",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class SlideDictSettings(BaseModel):
    """Main application settings."""

    resample: ResampleConfig = Field(default_factory=ResampleConfig)
    features: FeatureConfig = Field(default_factory=FeatureConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def _check_coefficient_count(self) -> "SlideDictSettings":
        if self.features.coefficient_count > self.resample.sample_count:
            raise ValueError(
                f"coefficient_count ({self.features.coefficient_count}) exceeds "
                f"sample_count ({self.resample.sample_count})"
            )
        return self


def get_default_settings() -> SlideDictSettings:
    """Get default application settings."""
    return SlideDictSettings()
