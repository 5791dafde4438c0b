"""Unit tests for SubtaskSynthesizer."""

import pytest

from autoscope.contexts.analysis.data_structures import AutomationSignals, ContextAnalysis, PatternMatch
from autoscope.contexts.analysis.scoring_config import ScoringConfig
from autoscope.contexts.analysis.subtask_synthesizer import SubtaskSynthesizer, make_subtask_id

TIMESTAMP = 1700000000000


def _pattern(pattern="accounting", score=28.125, complexity="medium"):
    return PatternMatch(pattern=pattern, score=score, confidence=0.9, category="finance", complexity=complexity)


def _context(systems=(), complexity="low"):
    return ContextAnalysis(
        complexity=complexity,
        trend="stable",
        systems=tuple(systems),
        signals=AutomationSignals(),
        final_score=60,
    )


@pytest.mark.unit
@pytest.mark.parametrize(
    "length,score,expected",
    [
        (0, 50, 4),
        (101, 50, 5),
        (151, 50, 6),
        (201, 50, 7),
        (301, 50, 8),
        (250, 95, 8),
        (0, 25, 5),
        (0, 10, 6),
    ],
)
def test_subtask_count_by_length_and_score(length, score, expected):
    assert SubtaskSynthesizer().calculate_subtask_count("x" * length, score) == expected


@pytest.mark.unit
def test_subtask_count_keyword_groups_are_capped():
    """Test a long text mentioning api, integration and workflow is capped at 10."""
    text = "API Integration und Workflow " + "x" * 300
    assert SubtaskSynthesizer().calculate_subtask_count(text, 60) == 10


@pytest.mark.unit
def test_subtask_count_each_group_counts_once():
    # api and integration are one group
    assert SubtaskSynthesizer().calculate_subtask_count("api integration", 50) == 5


@pytest.mark.unit
def test_generate_subtasks_for_accounting_task():
    """Test the full subtask batch of a short bookkeeping task."""
    synthesizer = SubtaskSynthesizer()
    subtasks = synthesizer.generate_subtasks(
        "Belege erfassen und Buchungen in DATEV vornehmen",
        _pattern(),
        _context(systems=("accounting-software",)),
        timestamp=TIMESTAMP,
    )

    assert len(subtasks) == 5
    first = subtasks[0]

    assert first.id == "subtask-1700000000000-0"
    assert first.title == "Datenaufbereitung & Eingabe: belege erfassen von Belege"
    assert first.description.endswith("mit accounting-software - Detaillierte Bearbeitung mit spezifischen Anforderungen")
    # 28.125 + 10 (first position) + 15 (entry verb)
    assert first.automation_potential == 53
    assert first.priority == "critical"
    assert first.estimated_time == 60
    assert first.complexity == "low"
    assert first.systems == ["accounting-software"]
    assert first.dependencies == []
    assert first.risks == ["Eingabefehler", "Datenqualität"]
    assert first.opportunities == ["Teilautomatisierung", "Qualitätsverbesserung", "Batch-Verarbeitung"]

    assert subtasks[1].title == "Buchung & Kontierung: buchungen vornehmen von Buchungen"
    assert subtasks[1].dependencies == ["subtask-1700000000000-0"]


@pytest.mark.unit
def test_generate_subtasks_is_deterministic():
    synthesizer = SubtaskSynthesizer()
    args = ("Reports in Excel erstellen", _pattern("reporting", 75.0), _context(("excel",)))

    first = synthesizer.generate_subtasks(*args, timestamp=TIMESTAMP)
    second = synthesizer.generate_subtasks(*args, timestamp=TIMESTAMP)

    assert first == second


@pytest.mark.unit
def test_ids_share_one_timestamp():
    subtasks = SubtaskSynthesizer().generate_subtasks("Aufgabe", _pattern("general", 50), _context())

    timestamps = {subtask.id.split("-")[1] for subtask in subtasks}
    assert len(timestamps) == 1
    assert [subtask.index for subtask in subtasks] == list(range(len(subtasks)))


@pytest.mark.unit
def test_dependencies_reference_earlier_subtasks():
    """Test every dependency id belongs to an earlier subtask of the same batch."""
    text = "API Integration und Workflow mit Excel und CRM " + "x" * 300
    subtasks = SubtaskSynthesizer().generate_subtasks(
        text,
        _pattern("data-entry", 85.0, "low"),
        _context(("excel", "crm", "api")),
        timestamp=TIMESTAMP,
    )

    assert len(subtasks) == 10
    for subtask in subtasks:
        earlier = {make_subtask_id(TIMESTAMP, i) for i in range(subtask.index)}
        assert set(subtask.dependencies) <= earlier


@pytest.mark.unit
def test_subtask_fields_stay_in_bounds():
    for score in (0, 5, 50, 100):
        subtasks = SubtaskSynthesizer().generate_subtasks(
            "Daten sammeln", _pattern("data-entry", score), _context(("excel", "api")), timestamp=TIMESTAMP
        )
        for subtask in subtasks:
            assert 10 <= subtask.automation_potential <= 95
            assert subtask.estimated_time > 0
            assert subtask.priority in ("critical", "high", "medium")
            assert subtask.complexity in ("low", "medium", "high")
            assert len(subtask.systems) <= 2
            assert len(subtask.risks) <= 3
            assert len(subtask.opportunities) <= 3


@pytest.mark.unit
def test_general_pattern_uses_routine_templates():
    subtasks = SubtaskSynthesizer().generate_subtasks("", _pattern("general", 50), _context(), timestamp=TIMESTAMP)

    assert len(subtasks) == 4
    assert subtasks[0].title == "Analyse & Planung: aufgabe vorbereiten von Arbeitsschritte"


@pytest.mark.unit
def test_estimated_time():
    synthesizer = SubtaskSynthesizer()

    assert synthesizer.calculate_estimated_time(0, "medium", 50) == 60
    assert synthesizer.calculate_estimated_time(1, "high", 50) == 180
    assert synthesizer.calculate_estimated_time(0, "low", 90) == 9
    assert synthesizer.calculate_estimated_time(0, "medium", 20) == 90


@pytest.mark.unit
def test_priority():
    synthesizer = SubtaskSynthesizer()

    assert synthesizer.calculate_priority(0, 10) == "critical"
    assert synthesizer.calculate_priority(1, 81) == "high"
    assert synthesizer.calculate_priority(1, 80) == "medium"


@pytest.mark.unit
def test_complexity():
    synthesizer = SubtaskSynthesizer()

    assert synthesizer.calculate_complexity(0, 0, "low") == "low"
    assert synthesizer.calculate_complexity(0, 1, "medium") == "medium"
    assert synthesizer.calculate_complexity(4, 3, "high") == "high"


@pytest.mark.unit
def test_automation_variation():
    synthesizer = SubtaskSynthesizer()

    assert synthesizer.calculate_automation_variation(0, "daten eingeben", ()) == 25
    assert synthesizer.calculate_automation_variation(1, "konzept bewerten", ()) == -15
    assert synthesizer.calculate_automation_variation(5, "prozess ausführen", ("excel", "email")) == 0


@pytest.mark.unit
@pytest.mark.parametrize("score", [10, 25, 50, 95])
def test_subtask_count_never_drops_with_longer_text(score):
    """Test that for a fixed score a longer text never yields fewer subtasks."""
    synthesizer = SubtaskSynthesizer()
    counts = [synthesizer.calculate_subtask_count("y" * length, score) for length in range(401)]

    assert all(earlier <= later for earlier, later in zip(counts, counts[1:]))
    assert all(3 <= count <= 10 for count in counts)


@pytest.mark.unit
def test_complexity_and_time_follow_config():
    """Test that complexity points and middle positions come from the scoring config."""
    config = ScoringConfig()
    config.subtasks.any_system_points = 3
    config.subtasks.late_complexity_points = 0
    config.subtasks.middle_positions = [3]
    synthesizer = SubtaskSynthesizer(config=config)

    assert synthesizer.calculate_complexity(0, 1, "low") == "medium"
    assert synthesizer.calculate_complexity(5, 0, "medium") == "low"
    assert synthesizer.calculate_estimated_time(1, "medium", 50) == 60
    assert synthesizer.calculate_estimated_time(3, "medium", 50) == 90
