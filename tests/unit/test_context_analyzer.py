"""Unit tests for ContextAnalyzer and industry detection."""

import pytest

from autoscope.contexts.analysis.context_analyzer import ContextAnalyzer, detect_industry
from autoscope.contexts.analysis.data_structures import AutomationSignals


@pytest.mark.unit
def test_detect_systems_in_table_order():
    """Test systems are reported in keyword table order, not text order."""
    analyzer = ContextAnalyzer()
    systems = analyzer.detect_systems("daten per api an das crm und nach excel übertragen")

    assert systems == ("excel", "crm", "api")


@pytest.mark.unit
def test_job_context_only_feeds_system_detection():
    """Test the job context adds systems but leaves the industry untouched."""
    analyzer = ContextAnalyzer()
    without_context = analyzer.analyze_context("Rechnungen prüfen")
    with_context = analyzer.analyze_context("Rechnungen prüfen", job_context="Buchhalter mit DATEV")

    assert "accounting-software" not in without_context.systems
    assert "accounting-software" in with_context.systems
    assert with_context.industry == without_context.industry == "general"
    assert with_context.complexity == without_context.complexity


@pytest.mark.unit
def test_signals_count_keyword_hits():
    """Test each keyword hit adds 20 points to its signal."""
    signals = ContextAnalyzer().calculate_signals("wiederkehrende standard-berichte")

    # "standard" counts towards three signals at once
    assert signals.repetitive == 40
    assert signals.structured == 20
    assert signals.routine == 20
    assert signals.creative == 0
    assert signals.human == 0


@pytest.mark.unit
def test_signal_is_capped():
    text = "wiederkehrend repetitive routine standard regelmäßig täglich wöchentlich"
    assert ContextAnalyzer().calculate_signals(text).repetitive == 100


@pytest.mark.unit
def test_assess_complexity():
    analyzer = ContextAnalyzer()

    assert analyzer.assess_complexity("strategie und planung der api-integration", ()) == "high"
    assert analyzer.assess_complexity("berichte und dokumentation", ()) == "medium"
    assert analyzer.assess_complexity("daten eingabe", ()) == "low"


@pytest.mark.unit
def test_systems_raise_complexity():
    analyzer = ContextAnalyzer()
    systems = ("excel", "crm", "api")

    # 3 systems x 8 = 24 reaches the medium threshold on their own
    assert analyzer.assess_complexity("akten", systems) == "medium"


@pytest.mark.unit
def test_assess_trend():
    analyzer = ContextAnalyzer()

    assert analyzer.assess_trend("automatisierung von prozessen mit cloud-software", ()) == "increasing"
    assert analyzer.assess_trend("persönliche beratung vor ort", ()) == "decreasing"
    assert analyzer.assess_trend("akten sortieren", ()) == "stable"


@pytest.mark.unit
def test_only_automation_systems_raise_trend():
    """Test that automation systems push the trend, other systems don't."""
    analyzer = ContextAnalyzer()

    assert analyzer.assess_trend("akten", ("api", "cloud", "analytics")) == "increasing"
    assert analyzer.assess_trend("akten", ("excel", "crm", "email")) == "stable"


@pytest.mark.unit
def test_final_score_is_clamped():
    analyzer = ContextAnalyzer()

    high = AutomationSignals(repetitive=100, structured=100, digital=100, routine=100)
    low = AutomationSignals(creative=100, human=100)

    assert analyzer.calculate_final_score(high, "low") == 100
    assert analyzer.calculate_final_score(low, "high") == 0
    assert analyzer.calculate_final_score(AutomationSignals(), "medium") == 50


@pytest.mark.unit
def test_empty_text():
    """Test that an empty text yields neutral defaults."""
    analysis = ContextAnalyzer().analyze_context("")

    assert analysis.systems == ()
    assert analysis.complexity == "low"
    assert analysis.trend == "stable"
    assert analysis.final_score == 60
    assert analysis.industry == "general"


@pytest.mark.unit
@pytest.mark.parametrize(
    "text,industry",
    [
        ("Python software development", "tech"),
        ("Budget planning", "finance"),
        ("Social media content", "marketing"),
        ("Training courses", "hr"),
        ("Patient treatment", "healthcare"),
        ("Contract compliance", "legal"),
        ("", "general"),
    ],
)
def test_detect_industry(text, industry):
    """Test industries are checked in table order, first hit wins."""
    assert detect_industry(text) == industry
