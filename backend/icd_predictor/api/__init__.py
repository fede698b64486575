"""API routers for the ICD-10 Code Predictor."""

from icd_predictor.api.predict import router as predict_router

__all__ = [
    "predict_router",
]
