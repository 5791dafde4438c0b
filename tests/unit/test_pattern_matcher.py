"""Unit tests for PatternMatcher."""

import pytest

from autoscope.contexts.analysis.data_structures import TaskPattern
from autoscope.contexts.analysis.pattern_matcher import PatternMatcher, keyword_coverage
from autoscope.contexts.analysis.task_patterns import (
    DOMAIN_PRIORITY_FAMILIES,
    FINANCE_FAMILY,
    GENERAL_PATTERN_ID,
    MARKETING_FAMILY,
    TASK_PATTERNS,
    get_all_patterns,
    get_pattern_details,
)


@pytest.mark.unit
def test_keyword_coverage():
    """Test coverage is the share of keywords found as substrings."""
    assert keyword_coverage("belege erfassen", ("beleg", "konto")) == 0.5
    assert keyword_coverage("belege erfassen", ("konto",)) == 0.0
    assert keyword_coverage("anything", ()) == 0.0


@pytest.mark.unit
def test_recruitment_example():
    """Test a typical recruiting bullet is classified as recruitment."""
    matcher = PatternMatcher()
    match = matcher.match("Stellenanzeigen analysieren, Kandidaten recherchieren, Interviews koordinieren")

    assert match.pattern == "recruitment"
    assert match.category == "hr"
    # 3 of 8 keywords (stellenanzeige, kandidat, interview) x base 60
    assert match.score == pytest.approx(22.5)
    assert match.confidence == 0.85


@pytest.mark.unit
def test_empty_text_returns_general():
    """Test that a text without any keyword falls back to the general pattern."""
    match = PatternMatcher().match("")

    assert match.pattern == GENERAL_PATTERN_ID
    assert match.score == 50
    assert match.confidence == 0.5
    assert match.complexity == "medium"
    assert match.category == GENERAL_PATTERN_ID


@pytest.mark.unit
def test_unrelated_text_returns_general():
    match = PatternMatcher().match("Zzz qqq")
    assert match.pattern == GENERAL_PATTERN_ID


@pytest.mark.unit
def test_matching_is_case_insensitive():
    lower = PatternMatcher().match("logistik und versand")
    upper = PatternMatcher().match("LOGISTIK UND VERSAND")

    assert lower.pattern == upper.pattern == "logistics"
    assert lower.score == upper.score


@pytest.mark.unit
def test_finance_override_prefers_narrow_pattern():
    """Test finance triggers rank the accounting family above the broad finance pattern."""
    match = PatternMatcher().match("Belege erfassen und Buchungen in DATEV vornehmen")

    # accounting: beleg + buchung = 2/8 of 75, x1.5 domain multiplier
    assert match.pattern == "accounting"
    assert match.category == "finance"
    assert match.score == pytest.approx(28.125)


@pytest.mark.unit
def test_override_skips_full_catalog_scan():
    """Test that a family winner is kept even if a non-family pattern would score higher."""
    # "routine" would win an unweighted full scan (90 x 1/5 = 18) but it is not
    # in the finance family, and the family produced a match.
    match = PatternMatcher().match("Routine Buchung")

    assert match.pattern in FINANCE_FAMILY.pattern_ids


@pytest.mark.unit
def test_marketing_override():
    match = PatternMatcher().match("Social Media Kampagne auf Instagram planen")

    assert match.pattern in MARKETING_FAMILY.pattern_ids
    assert match.category == "marketing"


@pytest.mark.unit
def test_reported_score_is_clamped():
    """Test the domain multiplier cannot push the reported score above 100."""
    match = PatternMatcher().match("Mahnwesen und Zahlungsverkehr")

    # payment-processing: all 3 keywords x 85 x 1.5 = 127.5 before clamping
    assert match.pattern == "payment-processing"
    assert match.score == 100


@pytest.mark.unit
def test_ties_keep_catalog_order():
    """Test that the earlier pattern wins a tie."""
    patterns = {
        "first": TaskPattern("first", "First", ("alpha",), 50, "low", 0.5, "a"),
        "second": TaskPattern("second", "Second", ("alpha",), 50, "low", 0.5, "b"),
    }
    matcher = PatternMatcher(patterns=patterns, families=())

    assert matcher.match("alpha").pattern == "first"


@pytest.mark.unit
@pytest.mark.parametrize("pattern_id", list(TASK_PATTERNS))
def test_every_pattern_matches_its_own_keywords(pattern_id):
    """Test a text made of all keywords of a pattern selects it at full coverage."""
    pattern = TASK_PATTERNS[pattern_id]
    text = " ".join(pattern.keywords)

    if any(family.is_triggered(text) for family in DOMAIN_PRIORITY_FAMILIES):
        pytest.skip("domain-priority triggers re-weight this text")

    match = PatternMatcher().match(text)

    assert match.pattern == pattern_id
    assert match.score == pytest.approx(pattern.automation_score)


@pytest.mark.unit
def test_catalog_lookup():
    assert get_pattern_details("bookkeeping").name == "Buchführung"
    assert get_pattern_details(GENERAL_PATTERN_ID) is None
    assert len(get_all_patterns()) == len(TASK_PATTERNS) == 34
    assert get_all_patterns()[0].id == "data-entry"
