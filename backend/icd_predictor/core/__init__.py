"""Core application configuration and utilities."""

from icd_predictor.core.config import settings
from icd_predictor.core.logging import configure_logging

__all__ = [
    "configure_logging",
    "settings",
]
