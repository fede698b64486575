"""Services for the ICD-10 Code Predictor.

Services implement business logic:
- ICD10MatcherService: keyword-overlap ICD-10 code prediction
- confidence: review tiers and display formatting for predictions
"""

from icd_predictor.services.confidence import (
    confidence_tier,
    format_confidence,
    interpret_confidence,
)
from icd_predictor.services.icd10_matcher import (
    FALLBACK_RESULT,
    SAMPLE_REFERENCES,
    ICD10MatcherService,
    MatchResult,
    ReferenceEntry,
    get_icd10_matcher_service,
    match,
    reset_icd10_matcher_service,
)

__all__ = [
    "FALLBACK_RESULT",
    "ICD10MatcherService",
    "MatchResult",
    "ReferenceEntry",
    "SAMPLE_REFERENCES",
    "confidence_tier",
    "format_confidence",
    "get_icd10_matcher_service",
    "interpret_confidence",
    "match",
    "reset_icd10_matcher_service",
]
