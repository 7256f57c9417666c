"""Utility functions for isoline.

This module provides utility functions including:

- Logging setup and configuration
- Processing statistics
"""

from isoline.utils.logging import (
    ProcessingLogger,
    ProcessingStats,
    configure_logging,
)

__all__ = [
    "ProcessingLogger",
    "ProcessingStats",
    "configure_logging",
]
