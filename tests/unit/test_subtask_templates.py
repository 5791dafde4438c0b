"""Unit tests for the subtask TemplateRegistry and stage profiles."""

import pytest

from autoscope.contexts.analysis.exceptions import TemplateConfigurationError
from autoscope.contexts.analysis.subtask_templates import (
    FINANCE_STAGES,
    MARKETING_STAGES,
    STANDARD_STAGES,
    TASK_VERBS,
    TemplateRegistry,
    extract_specific_terms,
    system_modifier,
)


@pytest.mark.unit
def test_registry_resolves_own_family():
    registry = TemplateRegistry()
    family = registry.resolve("accounting")

    assert family.id == "accounting"
    assert family.verbs == TASK_VERBS["accounting"]
    assert family.stages is FINANCE_STAGES


@pytest.mark.unit
@pytest.mark.parametrize(
    "pattern_id,family_id",
    [
        ("general", "routine"),
        ("unknown-pattern", "routine"),
        ("marketing-something-new", "marketing"),
        ("tax-something-new", "finance"),
        ("payment-something-new", "finance"),
    ],
)
def test_registry_fallbacks(pattern_id, family_id):
    """Test unknown ids fall back to their domain family, else to routine."""
    assert TemplateRegistry().resolve(pattern_id).id == family_id


@pytest.mark.unit
def test_family_without_objects_borrows_default():
    """Test a family with verbs but no objects uses the routine objects."""
    registry = TemplateRegistry()
    family = registry.resolve("account-reconciliation")

    assert family.verbs == TASK_VERBS["account-reconciliation"]
    assert family.objects == registry.resolve("routine").objects


@pytest.mark.unit
def test_every_family_has_templates():
    """Test that no resolved family can have an empty list."""
    registry = TemplateRegistry()
    for family_id in registry.family_ids():
        family = registry.resolve(family_id)
        assert family.verbs
        assert family.objects


@pytest.mark.unit
def test_empty_default_family_raises():
    """Test that an empty routine list is rejected when the registry is built."""
    with pytest.raises(TemplateConfigurationError) as exc_info:
        TemplateRegistry(verbs={"routine": ()}, objects={"routine": ("Abläufe",)})

    assert exc_info.value.family_id == "routine"


@pytest.mark.unit
def test_missing_default_family_raises():
    with pytest.raises(TemplateConfigurationError):
        TemplateRegistry(verbs={"sales": ("leads qualifizieren",)}, objects={"sales": ("Leads",)})


@pytest.mark.unit
def test_verbs_and_objects_cycle():
    family = TemplateRegistry().resolve("routine")

    assert family.verb_at(len(family.verbs)) == family.verbs[0]
    assert family.object_at(len(family.objects) + 1) == family.objects[1]


@pytest.mark.unit
def test_render_title():
    registry = TemplateRegistry()

    assert registry.render_title("Analyse & Planung", "daten sammeln", "Daten") == (
        "Analyse & Planung: daten sammeln von Daten"
    )
    assert registry.render_title("Dokumentation", "daten sichern", "Listen", term="crm", modifier="in Excel") == (
        "Dokumentation: daten sichern von crm-Listen in Excel"
    )


@pytest.mark.unit
def test_render_description():
    registry = TemplateRegistry()
    description = registry.render_description("Titel", term="excel", systems=("excel", "api"))

    assert description == "Titel für excel mit excel und api - Detaillierte Bearbeitung mit spezifischen Anforderungen"
    assert registry.render_description("Titel") == "Titel - Detaillierte Bearbeitung mit spezifischen Anforderungen"


@pytest.mark.unit
def test_stage_labels():
    assert FINANCE_STAGES.stage_label(0) == "Datenaufbereitung & Eingabe"
    assert MARKETING_STAGES.stage_label(0) == "Strategie & Planung"
    assert STANDARD_STAGES.stage_label(9) == "Wartung"
    assert STANDARD_STAGES.stage_label(10) == "Step 11"


@pytest.mark.unit
def test_refinement_replaces_first_occurrence_only():
    title = "Analyse & Planung: daten sammeln von Daten daten sammeln"
    refined = STANDARD_STAGES.refine(title, 0)

    assert refined == "Analyse & Planung: anforderungen analysieren und daten sammeln von Daten daten sammeln"


@pytest.mark.unit
def test_refinement_only_applies_at_its_position():
    title = "Datenaufbereitung: daten strukturieren von Daten"
    assert STANDARD_STAGES.refine(title, 2) == title


@pytest.mark.unit
def test_extract_specific_terms():
    assert extract_specific_terms("CRM-Daten nach Excel exportieren") == ["crm", "excel"]
    assert extract_specific_terms("") == []


@pytest.mark.unit
def test_system_modifier():
    assert system_modifier(("excel", "crm"), 0) == "in Excel"
    assert system_modifier(("excel",), 4) == "mit Formeln"
    assert system_modifier(("jira",), 0) == ""
    assert system_modifier((), 0) == ""
