"""Base schemas and enums for the ICD-10 Code Predictor."""

from enum import Enum


class ConfidenceTier(str, Enum):
    """Review tier derived from a prediction's confidence."""

    HIGH = "high"  # Ready for automated processing
    MEDIUM = "medium"  # Consider manual review
    LOW = "low"  # Manual review required
