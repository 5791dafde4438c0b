"""
Integration tests for the full analysis pipeline.
Tests: text -> PatternMatcher -> ContextAnalyzer -> SubtaskSynthesizer -> AnalysisResult.
"""

import pytest

from autoscope.contexts.analysis import (
    AnalysisEngine,
    AutomationLabel,
    analyze_task,
    analyze_tasks,
    get_analysis_stats,
)
from autoscope.contexts.analysis.scoring_config import ScoringConfig

POSTING = """# Buchhalter (m/w/d)

**Ihre Aufgaben:**
* Belege erfassen und Buchungen in DATEV vornehmen
* Mahnwesen und Zahlungsverkehr
* Kreative Konzepte in persönlicher Beratung entwickeln

**Ihr Profil:**
* Abgeschlossene kaufmännische Ausbildung
"""


@pytest.mark.integration
def test_empty_text():
    """Test the empty string goes through the general fallback end to end."""
    result = analyze_task("")

    assert result.pattern == "general"
    assert result.category == "general"
    # 50 x 0.6 + 60 x 0.4
    assert result.automation_potential == 54
    # 0.5 x 0.7 + (0 + 0.5 x 0.4) x 0.3
    assert result.confidence == 41
    assert result.label == AutomationLabel.PARTIALLY_AUTOMATABLE
    assert result.reasoning == "Pattern: general (50%)"
    assert len(result.subtasks) == 4


@pytest.mark.integration
def test_accounting_task():
    result = analyze_task("Belege erfassen und Buchungen in DATEV vornehmen")

    assert result.pattern == "accounting"
    assert result.category == "finance"
    assert result.systems == ["accounting-software"]
    assert result.reasoning == "Pattern: Buchhaltung (28%) | Systems: accounting-software"
    assert result.subtasks[0].title.startswith("Datenaufbereitung & Eingabe")
    assert 0 <= result.automation_potential <= 100
    assert 0 <= result.confidence <= 100


@pytest.mark.integration
def test_strong_signals_appear_in_reasoning():
    result = analyze_task("Wiederkehrende Standard-Routine täglich und wöchentlich")

    assert "Strong signals: repetitive: 100%" in result.reasoning


@pytest.mark.integration
def test_analyze_tasks_preserves_order():
    texts = ["Mahnwesen und Zahlungsverkehr", "", "Stellenanzeigen schalten und Kandidaten anrufen"]
    results = analyze_tasks(texts)

    assert [result.text for result in results] == texts
    assert [result.pattern for result in results] == ["payment-processing", "general", "recruitment"]


@pytest.mark.integration
def test_analysis_is_deterministic():
    """Test everything except timing and subtask ids is stable across calls."""
    first = analyze_task("Reports in Excel erstellen und per E-Mail versenden")
    second = analyze_task("Reports in Excel erstellen und per E-Mail versenden")

    assert first.automation_potential == second.automation_potential
    assert first.confidence == second.confidence
    assert first.reasoning == second.reasoning
    assert [s.title for s in first.subtasks] == [s.title for s in second.subtasks]


@pytest.mark.integration
def test_context_changes_systems_only():
    with_context = analyze_task("Rechnungen prüfen", context="Buchhalter mit DATEV")
    without_context = analyze_task("Rechnungen prüfen")

    assert "accounting-software" in with_context.systems
    assert with_context.pattern == without_context.pattern


@pytest.mark.integration
def test_label_thresholds():
    engine = AnalysisEngine()

    assert engine.determine_label(70) == AutomationLabel.AUTOMATABLE
    assert engine.determine_label(69.9) == AutomationLabel.PARTIALLY_AUTOMATABLE
    assert engine.determine_label(30) == AutomationLabel.PARTIALLY_AUTOMATABLE
    assert engine.determine_label(29.9) == AutomationLabel.HUMAN


@pytest.mark.integration
def test_custom_config_changes_labels():
    config = ScoringConfig()
    config.combination.partially_automatable_threshold = 60
    engine = AnalysisEngine(config=config)

    assert engine.analyze_task("").label == AutomationLabel.HUMAN


@pytest.mark.integration
def test_stats_for_empty_batch():
    stats = get_analysis_stats([])

    assert stats.total_tasks == 0
    assert stats.distribution == {"Automatable": 0, "Partially Automatable": 0, "Human": 0}
    assert stats.averages == {"automation_potential": 0, "confidence": 0, "analysis_time_ms": 0}
    assert stats.category_counts == {}


@pytest.mark.integration
def test_stats_for_batch():
    results = analyze_tasks(["", "", "Mahnwesen und Zahlungsverkehr"])
    stats = get_analysis_stats(results)

    assert stats.total_tasks == 3
    assert sum(stats.distribution.values()) in (99, 100, 101)
    assert stats.category_counts == {"general": 2, "finance": 1}


@pytest.mark.integration
def test_analyze_posting():
    """Test a posting is split into task lines and each is analyzed with the title as context."""
    results = AnalysisEngine().analyze_posting(POSTING)

    assert [result.text for result in results] == [
        "Belege erfassen und Buchungen in DATEV vornehmen",
        "Mahnwesen und Zahlungsverkehr",
        "Kreative Konzepte in persönlicher Beratung entwickeln",
    ]
    assert results[0].pattern == "accounting"
    assert results[1].pattern == "payment-processing"


@pytest.mark.integration
def test_result_to_dict():
    data = analyze_task("Mahnwesen und Zahlungsverkehr").to_dict()

    assert data["label"] in ("Automatable", "Partially Automatable", "Human")
    assert isinstance(data["subtasks"], list)
    assert set(data["subtasks"][0]) >= {"id", "title", "dependencies", "risks", "opportunities"}
