"""Tests for ICD-10 Matcher Service.

Tests the keyword-overlap ICD-10 code prediction.
"""

from dataclasses import FrozenInstanceError

import pytest

from icd_predictor.services.icd10_matcher import (
    FALLBACK_RESULT,
    MAX_CONFIDENCE,
    SAMPLE_REFERENCES,
    ICD10MatcherService,
    MatchResult,
    ReferenceEntry,
    get_icd10_matcher_service,
    match,
    reset_icd10_matcher_service,
    score_entry,
)


# ============================================================================
# Service Tests
# ============================================================================


class TestServiceInit:
    """Test service initialization."""

    def test_service_creation(self):
        """Test basic service creation."""
        service = ICD10MatcherService()
        assert service is not None
        assert service.references == SAMPLE_REFERENCES

    def test_singleton_pattern(self):
        """Test singleton pattern works."""
        service1 = get_icd10_matcher_service()
        service2 = get_icd10_matcher_service()
        assert service1 is service2

    def test_singleton_reset(self):
        """Test singleton can be reset."""
        service1 = get_icd10_matcher_service()
        reset_icd10_matcher_service()
        service2 = get_icd10_matcher_service()
        assert service1 is not service2

    def test_custom_references_copied_to_tuple(self):
        """Test a supplied table is stored immutably."""
        table = [ReferenceEntry(label="Heart failure", code="I50.9")]
        service = ICD10MatcherService(table)
        table.append(ReferenceEntry(label="Asthma", code="J45.9"))
        assert service.references == (ReferenceEntry(label="Heart failure", code="I50.9"),)


# ============================================================================
# Reference Data Tests
# ============================================================================


class TestReferenceData:
    """Test the reference table content."""

    def test_six_entries(self):
        """Test the default table has six entries."""
        assert len(SAMPLE_REFERENCES) == 6

    def test_entries_have_required_fields(self):
        """Test that all entries have a label and a code."""
        for entry in SAMPLE_REFERENCES:
            assert entry.label
            assert entry.code

    def test_known_pairs(self):
        """Test the expected diagnosis/code pairs are present."""
        pairs = {(e.label, e.code) for e in SAMPLE_REFERENCES}
        assert ("Type 2 diabetes mellitus", "E11.9") in pairs
        assert ("Essential hypertension", "I10") in pairs
        assert ("Acute bronchitis", "J20.9") in pairs
        assert ("Migraine", "G43.9") in pairs
        assert ("Chronic kidney disease", "N18.9") in pairs
        assert ("Asthma", "J45.9") in pairs

    def test_entries_are_frozen(self):
        """Test reference entries cannot be mutated."""
        with pytest.raises(FrozenInstanceError):
            SAMPLE_REFERENCES[0].code = "X00"

    def test_fallback(self):
        """Test the fallback result constant."""
        assert FALLBACK_RESULT == MatchResult(
            code="Z00.00", confidence=0.3, label="General medical examination"
        )

    def test_get_code(self):
        """Test looking up an entry by code."""
        service = ICD10MatcherService()
        assert service.get_code("i10").label == "Essential hypertension"
        assert service.get_code("ZZZ999") is None

    def test_list_references_order(self):
        """Test references are listed in table order."""
        service = ICD10MatcherService()
        codes = [e.code for e in service.list_references()]
        assert codes == ["E11.9", "I10", "J20.9", "G43.9", "N18.9", "J45.9"]

    def test_stats(self):
        """Test statistics about the table."""
        stats = ICD10MatcherService().get_stats()
        assert stats["total_references"] == 6
        assert stats["fallback_code"] == "Z00.00"
        assert stats["max_confidence"] == 0.95


# ============================================================================
# Matching Tests
# ============================================================================


class TestMatch:
    """Test code prediction."""

    def test_exact_match(self):
        """Test a full label match reaches the confidence cap."""
        result = match("Type 2 diabetes mellitus")
        assert result.code == "E11.9"
        assert result.label == "Type 2 diabetes mellitus"
        assert result.confidence == pytest.approx(0.95)

    def test_no_overlap_returns_fallback(self):
        """Test unrelated text returns the fallback."""
        result = match("unrelated text with no keywords")
        assert result == FALLBACK_RESULT

    def test_partial_overlap(self):
        """Test one of four label words matching beats the fallback."""
        result = match("diabetes")
        assert result.code == "E11.9"
        assert result.confidence == pytest.approx(0.325)
        assert 0.1 < result.confidence < 0.95

    def test_half_label_match(self):
        """Test one of two label words matching."""
        result = match("hypertension")
        assert result.code == "I10"
        assert result.label == "Essential hypertension"
        assert result.confidence == pytest.approx(0.55)

    def test_case_insensitive(self):
        """Test matching ignores case."""
        assert match("ASTHMA") == match("asthma")
        assert match("ASTHMA").code == "J45.9"

    def test_surrounding_whitespace_trimmed(self):
        """Test surrounding whitespace is ignored."""
        assert match("  acute bronchitis  ") == match("acute bronchitis")
        assert match("  acute bronchitis  ").code == "J20.9"

    def test_idempotent(self):
        """Test repeated calls give identical results."""
        assert match("chronic kidney disease stage 3") == match("chronic kidney disease stage 3")
        assert match("chronic kidney disease stage 3").code == "N18.9"

    def test_extra_words_not_penalized(self):
        """Test unmatched input words do not lower confidence."""
        result = match("asthma with many extra unrelated words")
        assert result.code == "J45.9"
        assert result.confidence == pytest.approx(0.95)

    def test_substring_match_either_direction(self):
        """Test an input word inside a label word counts as a match."""
        # "a" is contained in "migraine", the first single-word label.
        result = match("a")
        assert result.code == "G43.9"
        assert result.confidence == pytest.approx(0.95)

    def test_label_word_inside_input_word(self):
        """Test a label word inside a longer input word counts as a match."""
        result = match("asthmatic")
        assert result.code == "J45.9"

    def test_tie_keeps_earlier_entry(self):
        """Test equal scores keep the entry seen first."""
        result = match("asthma migraine")
        assert result.code == "G43.9"

    def test_repeated_spaces_produce_empty_tokens(self):
        """Test an empty token matches every label word."""
        result = match("asthma  x")
        assert result.code == "E11.9"
        assert result.confidence == pytest.approx(0.95)

    def test_empty_input_does_not_raise(self):
        """Test blank input is scored rather than rejected."""
        result = match("")
        assert isinstance(result, MatchResult)

    def test_confidence_bounds(self):
        """Test confidence stays within bounds for assorted inputs."""
        inputs = [
            "", " ", "x", "diabetes", "kidney", "acute", "migraine headache",
            "type 2 diabetes mellitus with chronic kidney disease",
            "unrelated text with no keywords", "2",
        ]
        for text in inputs:
            result = match(text)
            assert 0 <= result.confidence <= MAX_CONFIDENCE
            if result != FALLBACK_RESULT:
                assert result.confidence > FALLBACK_RESULT.confidence


class TestCustomReferences:
    """Test matching against injected tables."""

    def test_custom_table(self):
        """Test a supplied table is used instead of the default."""
        table = [ReferenceEntry(label="Heart failure", code="I50.9")]
        result = match("heart", table)
        assert result == MatchResult(code="I50.9", confidence=pytest.approx(0.55), label="Heart failure")

    def test_empty_table_returns_fallback(self):
        """Test an empty table always yields the fallback."""
        assert match("type 2 diabetes mellitus", []) == FALLBACK_RESULT

    def test_low_score_loses_to_fallback(self):
        """Test an entry scoring below 0.3 is not reported."""
        table = [ReferenceEntry(label="alpha beta gamma delta epsilon", code="X1")]
        assert match("alpha", table) == FALLBACK_RESULT

    def test_service_predict_uses_table(self):
        """Test the service predicts against its own table."""
        service = ICD10MatcherService([ReferenceEntry(label="Otitis media", code="H66.90")])
        assert service.predict("otitis media").code == "H66.90"
        assert service.predict("asthma") == FALLBACK_RESULT


class TestScoreEntry:
    """Test per-entry scoring."""

    def test_zero_matches_floor(self):
        """Test an entry with no matches scores the 0.1 floor."""
        entry = ReferenceEntry(label="Migraine", code="G43.9")
        assert score_entry(["xyz"], entry) == pytest.approx(0.1)

    def test_full_match_capped(self):
        """Test a full match is capped at 0.95."""
        entry = ReferenceEntry(label="Acute bronchitis", code="J20.9")
        assert score_entry(["acute", "bronchitis"], entry) == pytest.approx(0.95)

    def test_partial_ratio(self):
        """Test score scales with the share of matched label words."""
        entry = ReferenceEntry(label="Chronic kidney disease", code="N18.9")
        assert score_entry(["kidney"], entry) == pytest.approx((1 / 3) * 0.9 + 0.1)
