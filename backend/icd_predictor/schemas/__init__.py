"""Pydantic schemas for the ICD-10 Code Predictor."""

from icd_predictor.schemas.base import ConfidenceTier
from icd_predictor.schemas.prediction import (
    PredictIcdRequest,
    PredictIcdResponse,
    ReferenceEntryOut,
    SampleDataResponse,
)

__all__ = [
    "ConfidenceTier",
    "PredictIcdRequest",
    "PredictIcdResponse",
    "ReferenceEntryOut",
    "SampleDataResponse",
]
