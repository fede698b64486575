"""ICD-10 Prediction API Endpoints.

Provides mock ICD-10 code prediction from diagnosis text:
- Predict: best-matching code with a confidence score and review tier
- Sample data: the reference table the predictions are matched against
"""

import asyncio
import logging

from fastapi import APIRouter

from icd_predictor.core.config import settings
from icd_predictor.schemas.prediction import (
    PredictIcdRequest,
    PredictIcdResponse,
    ReferenceEntryOut,
    SampleDataResponse,
)
from icd_predictor.services.confidence import confidence_tier, format_confidence, interpret_confidence
from icd_predictor.services.icd10_matcher import get_icd10_matcher_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/predict-icd", tags=["Prediction"])


@router.post(
    "",
    response_model=PredictIcdResponse,
    summary="Predict ICD-10 code",
    description="Predict the ICD-10 code for a medical diagnosis using keyword overlap.",
)
async def predict_icd(request: PredictIcdRequest) -> PredictIcdResponse:
    """Predict an ICD-10 code for diagnosis text.

    Returns the best-matching reference code, or the general examination
    fallback (Z00.00) when no reference entry scores above it.

    Args:
        request: Diagnosis text to code.

    Returns:
        PredictIcdResponse with code, confidence and review tier.
    """
    if settings.prediction_delay_ms > 0:
        await asyncio.sleep(settings.prediction_delay_ms / 1000)

    result = get_icd10_matcher_service().predict(request.diagnosis)
    logger.info(
        f"Predicted {result.code} for diagnosis='{request.diagnosis}' "
        f"(confidence={result.confidence:.3f})"
    )

    return PredictIcdResponse(
        diagnosis=request.diagnosis,
        code=result.code,
        confidence=result.confidence,
        confidence_percent=format_confidence(result.confidence),
        label=result.label,
        tier=confidence_tier(result.confidence),
        interpretation=interpret_confidence(result.confidence),
    )


@router.get(
    "/sample-data",
    response_model=SampleDataResponse,
    summary="List reference diagnoses",
)
async def get_sample_data() -> SampleDataResponse:
    """List the reference diagnoses and codes used for prediction."""
    entries = [
        ReferenceEntryOut(label=entry.label, code=entry.code)
        for entry in get_icd10_matcher_service().list_references()
    ]
    return SampleDataResponse(entries=entries, total=len(entries))
