"""Pydantic schemas for ICD-10 prediction requests and responses."""

from pydantic import BaseModel, Field, field_validator

from icd_predictor.schemas.base import ConfidenceTier

EMPTY_DIAGNOSIS_MESSAGE = "Please enter diagnosis text"


class PredictIcdRequest(BaseModel):
    """Request body for ICD-10 code prediction."""

    diagnosis: str = Field(
        ...,
        min_length=1,
        max_length=1000,
        description="Medical diagnosis text (e.g., 'Type 2 diabetes mellitus')",
    )

    @field_validator("diagnosis")
    @classmethod
    def validate_diagnosis(cls, v: str) -> str:
        """Reject whitespace-only diagnosis text."""
        if not v.strip():
            raise ValueError(EMPTY_DIAGNOSIS_MESSAGE)
        return v


class PredictIcdResponse(BaseModel):
    """Predicted ICD-10 code with confidence."""

    diagnosis: str = Field(..., description="Diagnosis text as submitted")
    code: str = Field(..., description="Predicted ICD-10 code")
    confidence: float = Field(..., ge=0, le=1, description="Heuristic confidence score")
    confidence_percent: str = Field(..., description="Confidence as a percentage, e.g. '95.0%'")
    label: str = Field(..., description="Diagnosis label of the predicted code")
    tier: ConfidenceTier = Field(..., description="Review tier for the confidence")
    interpretation: str = Field(..., description="Review recommendation for the tier")


class ReferenceEntryOut(BaseModel):
    """A reference diagnosis and its code."""

    label: str
    code: str


class SampleDataResponse(BaseModel):
    """Reference table used for matching."""

    entries: list[ReferenceEntryOut]
    total: int
