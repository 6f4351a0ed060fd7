"""Utility functions for slidedict.

This module provides utility functions including:

- Logging setup and configuration
- Processing statistics for batch runs
"""

from slidedict.utils.logging import (
    ProcessingLogger,
    ProcessingStats,
    configure_logging,
)

__all__ = [
    "ProcessingLogger",
    "ProcessingStats",
    "configure_logging",
]
