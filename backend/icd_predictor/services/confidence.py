"""Confidence tiers and display helpers for ICD-10 predictions."""

from icd_predictor.schemas.base import ConfidenceTier

HIGH_CONFIDENCE_THRESHOLD = 0.8
MEDIUM_CONFIDENCE_THRESHOLD = 0.6

TIER_INTERPRETATIONS: dict[ConfidenceTier, str] = {
    ConfidenceTier.HIGH: "High confidence - Ready for automated processing",
    ConfidenceTier.MEDIUM: "Medium confidence - Consider manual review",
    ConfidenceTier.LOW: "Low confidence - Manual review required",
}


def confidence_tier(confidence: float) -> ConfidenceTier:
    """Bucket a confidence value into a review tier."""
    if confidence >= HIGH_CONFIDENCE_THRESHOLD:
        return ConfidenceTier.HIGH
    if confidence >= MEDIUM_CONFIDENCE_THRESHOLD:
        return ConfidenceTier.MEDIUM
    return ConfidenceTier.LOW


def interpret_confidence(confidence: float) -> str:
    """Get the review recommendation for a confidence value."""
    return TIER_INTERPRETATIONS[confidence_tier(confidence)]


def format_confidence(confidence: float) -> str:
    """Format a confidence value as a percentage with one decimal."""
    return f"{confidence * 100:.1f}%"
