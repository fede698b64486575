"""ICD-10 Code Matcher Service.

This module predicts a single ICD-10 code for free-text diagnosis wording
using keyword overlap against a small reference table. It supports:

- Case-insensitive, bidirectional substring matching of words
- Recall-based confidence scoring capped at 0.95
- A low-confidence fallback when no reference entry scores higher

Note: This is a mock predictor. Confidence values are heuristic and are not
calibrated probabilities. Suggestions should be verified by qualified coders.
"""

from collections.abc import Sequence
from dataclasses import dataclass
import threading


@dataclass(frozen=True)
class ReferenceEntry:
    """A known diagnosis phrase and its ICD-10 code."""

    label: str
    code: str


@dataclass(frozen=True)
class MatchResult:
    """The best-matching code for a diagnosis text."""

    code: str
    confidence: float
    label: str


# ============================================================================
# Reference Data
# ============================================================================

MAX_CONFIDENCE = 0.95
BASE_CONFIDENCE = 0.1
RECALL_WEIGHT = 0.9

FALLBACK_RESULT = MatchResult(
    code="Z00.00",
    confidence=0.3,
    label="General medical examination",
)

SAMPLE_REFERENCES: tuple[ReferenceEntry, ...] = (
    ReferenceEntry(label="Type 2 diabetes mellitus", code="E11.9"),
    ReferenceEntry(label="Essential hypertension", code="I10"),
    ReferenceEntry(label="Acute bronchitis", code="J20.9"),
    ReferenceEntry(label="Migraine", code="G43.9"),
    ReferenceEntry(label="Chronic kidney disease", code="N18.9"),
    ReferenceEntry(label="Asthma", code="J45.9"),
)


# ============================================================================
# Matching
# ============================================================================


def _tokenize(text: str) -> list[str]:
    # Single-space split: repeated spaces yield empty tokens.
    return text.lower().strip().split(" ")


def score_entry(input_words: Sequence[str], entry: ReferenceEntry) -> float:
    """Score one reference entry against already-tokenized input.

    A label word counts as matched when any input word contains it or is
    contained in it.
    """
    label_words = entry.label.lower().split(" ")
    matched = sum(
        1
        for word in label_words
        if any(input_word in word or word in input_word for input_word in input_words)
    )
    return min(MAX_CONFIDENCE, (matched / len(label_words)) * RECALL_WEIGHT + BASE_CONFIDENCE)


def match(
    text: str,
    references: Sequence[ReferenceEntry] = SAMPLE_REFERENCES,
) -> MatchResult:
    """Find the best-matching ICD-10 code for a diagnosis text.

    Entries are scored in table order. An entry replaces the current best
    only when its confidence is strictly greater, starting from the fallback.

    Args:
        text: Free-text diagnosis. Blank input is not rejected here.
        references: Reference table to match against.

    Returns:
        MatchResult for the winning entry, or FALLBACK_RESULT.
    """
    input_words = _tokenize(text)
    best = FALLBACK_RESULT

    for entry in references:
        confidence = score_entry(input_words, entry)
        if confidence > best.confidence:
            best = MatchResult(code=entry.code, confidence=confidence, label=entry.label)

    return best


# ============================================================================
# ICD-10 Matcher Service
# ============================================================================

# Singleton instance and lock for thread safety
_matcher_service: "ICD10MatcherService | None" = None
_matcher_lock = threading.Lock()


def get_icd10_matcher_service() -> "ICD10MatcherService":
    """Get the singleton ICD-10 matcher service instance."""
    global _matcher_service
    if _matcher_service is None:
        with _matcher_lock:
            if _matcher_service is None:
                _matcher_service = ICD10MatcherService()
    return _matcher_service


def reset_icd10_matcher_service() -> None:
    """Reset the singleton instance (for testing)."""
    global _matcher_service
    with _matcher_lock:
        _matcher_service = None


class ICD10MatcherService:
    """Service for predicting ICD-10 codes against a fixed reference table."""

    def __init__(self, references: Sequence[ReferenceEntry] | None = None) -> None:
        """Initialize the matcher with a reference table.

        Args:
            references: Alternative table. Defaults to SAMPLE_REFERENCES.
        """
        self._references: tuple[ReferenceEntry, ...] = tuple(
            SAMPLE_REFERENCES if references is None else references
        )

    @property
    def references(self) -> tuple[ReferenceEntry, ...]:
        return self._references

    def predict(self, text: str) -> MatchResult:
        """Predict the ICD-10 code for a diagnosis text."""
        return match(text, self._references)

    def list_references(self) -> list[ReferenceEntry]:
        """Get the reference entries in table order."""
        return list(self._references)

    def get_code(self, code: str) -> ReferenceEntry | None:
        """Get a reference entry by its code."""
        code_upper = code.upper()
        for entry in self._references:
            if entry.code == code_upper:
                return entry
        return None

    def get_stats(self) -> dict:
        """Get statistics about the reference table."""
        return {
            "total_references": len(self._references),
            "fallback_code": FALLBACK_RESULT.code,
            "fallback_confidence": FALLBACK_RESULT.confidence,
            "max_confidence": MAX_CONFIDENCE,
        }
