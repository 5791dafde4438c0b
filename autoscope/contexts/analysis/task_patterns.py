"""
Static task pattern catalog and domain-priority families.

The catalog maps pattern ids to TaskPattern entries. Keywords are lowercase
substrings (German and English) matched against the lowercased task text.
Catalog order matters: when two patterns score equally, the earlier one wins.

Pattern classes follow the convention from intake/section_patterns.py:
- Dataclasses with frozen=True for immutability
- Module-level constants built once at import time
- Helper functions that use these constants
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from autoscope.contexts.analysis.data_structures import TaskPattern

GENERAL_PATTERN_ID = "general"

# =============================================================================
# PATTERN CATALOG
# =============================================================================

_CATALOG: Tuple[TaskPattern, ...] = (
    TaskPattern(
        id="data-entry",
        name="Dateneingabe",
        keywords=("eingabe", "erfassung", "daten", "excel", "tabelle", "input", "data entry", "dateneingabe"),
        automation_score=85,
        complexity="low",
        confidence=0.8,
        category="administrative",
    ),
    TaskPattern(
        id="reporting",
        name="Berichtserstellung",
        keywords=("bericht", "report", "dashboard", "kpi", "auswertung", "reporting", "statistik"),
        automation_score=75,
        complexity="medium",
        confidence=0.7,
        category="analytical",
    ),
    TaskPattern(
        id="communication",
        name="Kommunikation",
        keywords=("email", "meeting", "präsentation", "kommunikation", "gespräch", "verhandlung"),
        automation_score=45,
        complexity="medium",
        confidence=0.6,
        category="communication",
    ),
    TaskPattern(
        id="planning",
        name="Planung",
        keywords=("planung", "planning", "organisation", "koordination", "scheduling"),
        automation_score=60,
        complexity="medium",
        confidence=0.7,
        category="administrative",
    ),
    TaskPattern(
        id="analysis",
        name="Datenanalyse",
        keywords=("analyse", "analysis", "auswertung", "evaluation", "forschung", "research"),
        automation_score=70,
        complexity="high",
        confidence=0.8,
        category="analytical",
    ),
    TaskPattern(
        id="documentation",
        name="Dokumentation",
        keywords=("dokumentation", "documentation", "protokoll", "minutes", "notizen"),
        automation_score=80,
        complexity="low",
        confidence=0.8,
        category="administrative",
    ),
    TaskPattern(
        id="quality-control",
        name="Qualitätskontrolle",
        keywords=("qualität", "quality", "kontrolle", "prüfung", "review", "testing"),
        automation_score=65,
        complexity="medium",
        confidence=0.7,
        category="analytical",
    ),
    TaskPattern(
        id="creative",
        name="Kreative Arbeit",
        keywords=("design", "kreativ", "creative", "content", "marketing", "werbung"),
        automation_score=35,
        complexity="high",
        confidence=0.6,
        category="creative",
    ),
    TaskPattern(
        id="management",
        name="Management",
        keywords=("führung", "management", "leitung", "strategie", "decision", "entscheidung"),
        automation_score=25,
        complexity="high",
        confidence=0.5,
        category="management",
    ),
    # Finance & accounting
    TaskPattern(
        id="finance",
        name="Finanzwesen",
        keywords=("finanz", "finance", "buchhaltung", "accounting", "buchung", "konto", "account"),
        automation_score=70,
        complexity="medium",
        confidence=0.8,
        category="finance",
    ),
    TaskPattern(
        id="accounting",
        name="Buchhaltung",
        keywords=(
            "buchhaltung",
            "accounting",
            "beleg",
            "buchung",
            "konto",
            "steuer",
            "jahresabschluss",
            "finanzen",
        ),
        automation_score=75,
        complexity="medium",
        confidence=0.9,
        category="finance",
    ),
    TaskPattern(
        id="bookkeeping",
        name="Buchführung",
        keywords=("buchführung", "bookkeeping", "finanzbuchhaltung", "führung der finanzbuchhaltung"),
        automation_score=80,
        complexity="medium",
        confidence=0.9,
        category="finance",
    ),
    TaskPattern(
        id="financial-reporting",
        name="Finanzberichte",
        keywords=(
            "monatsabschluss",
            "jahresabschluss",
            "erstellung von monats- und jahresabschlüssen",
            "abschluss",
        ),
        automation_score=65,
        complexity="high",
        confidence=0.8,
        category="finance",
    ),
    TaskPattern(
        id="tax-accounting",
        name="Steuerwesen",
        keywords=("umsatzsteuervoranmeldung", "umsatzsteuervoranmeldungen", "steuer", "tax", "steuerberater"),
        automation_score=60,
        complexity="high",
        confidence=0.7,
        category="finance",
    ),
    TaskPattern(
        id="budget-control",
        name="Budget & Controlling",
        keywords=("budgetplanung", "budgetplanung und controlling", "controlling", "budget"),
        automation_score=70,
        complexity="medium",
        confidence=0.8,
        category="finance",
    ),
    TaskPattern(
        id="payment-processing",
        name="Zahlungsverkehr",
        keywords=("mahnwesen", "zahlungsverkehr", "mahnwesen und zahlungsverkehr"),
        automation_score=85,
        complexity="low",
        confidence=0.9,
        category="finance",
    ),
    TaskPattern(
        id="account-reconciliation",
        name="Kontenabstimmung",
        keywords=("abstimmung", "abstimmung von konten", "kontenabstimmung"),
        automation_score=80,
        complexity="medium",
        confidence=0.8,
        category="finance",
    ),
    TaskPattern(
        id="routine",
        name="Routineaufgaben",
        keywords=("routine", "wiederkehrend", "repetitive", "standard", "prozess"),
        automation_score=90,
        complexity="low",
        confidence=0.9,
        category="administrative",
    ),
    # Common job posting task families
    TaskPattern(
        id="recruitment",
        name="Recruiting",
        keywords=("recruiting", "stellenanzeige", "bewerbung", "kandidat", "interview", "onboarding", "personal", "hr"),
        automation_score=60,
        complexity="medium",
        confidence=0.85,
        category="hr",
    ),
    TaskPattern(
        id="sales",
        name="Vertrieb",
        keywords=("vertrieb", "sales", "verkauf", "lead", "kunde", "angebot", "vertrag", "umsatz", "akquise"),
        automation_score=50,
        complexity="medium",
        confidence=0.8,
        category="sales",
    ),
    TaskPattern(
        id="marketing",
        name="Marketing",
        keywords=("marketing", "kampagne", "content", "social media", "werbung", "branding", "seo", "roi"),
        automation_score=55,
        complexity="medium",
        confidence=0.8,
        category="marketing",
    ),
    TaskPattern(
        id="marketing-strategy",
        name="Marketing-Strategie",
        keywords=(
            "strategie",
            "strategic",
            "planung",
            "planning",
            "konzept",
            "concept",
            "zielgruppe",
            "target audience",
            "positionierung",
        ),
        automation_score=35,
        complexity="high",
        confidence=0.85,
        category="marketing",
    ),
    TaskPattern(
        id="marketing-campaign",
        name="Marketing-Kampagne",
        keywords=("kampagne", "campaign", "werbung", "advertising", "promotion", "launch", "rollout", "aktivierung"),
        automation_score=60,
        complexity="medium",
        confidence=0.8,
        category="marketing",
    ),
    TaskPattern(
        id="content-marketing",
        name="Content Marketing",
        keywords=("content", "blog", "artikel", "article", "whitepaper", "ebook", "video", "podcast", "storytelling"),
        automation_score=50,
        complexity="medium",
        confidence=0.8,
        category="marketing",
    ),
    TaskPattern(
        id="social-media",
        name="Social Media Marketing",
        keywords=(
            "social media",
            "facebook",
            "instagram",
            "linkedin",
            "twitter",
            "xing",
            "post",
            "community",
            "engagement",
        ),
        automation_score=65,
        complexity="medium",
        confidence=0.85,
        category="marketing",
    ),
    TaskPattern(
        id="digital-marketing",
        name="Digital Marketing",
        keywords=("digital", "online", "web", "seo", "sem", "ppc", "google ads", "facebook ads", "remarketing"),
        automation_score=70,
        complexity="medium",
        confidence=0.85,
        category="marketing",
    ),
    TaskPattern(
        id="brand-marketing",
        name="Brand Marketing",
        keywords=("brand", "branding", "marke", "identity", "image", "reputation", "positioning", "messaging"),
        automation_score=40,
        complexity="high",
        confidence=0.8,
        category="marketing",
    ),
    TaskPattern(
        id="performance-marketing",
        name="Performance Marketing",
        keywords=("performance", "roi", "conversion", "ctr", "cpc", "cpa", "attribution", "tracking", "optimization"),
        automation_score=75,
        complexity="medium",
        confidence=0.9,
        category="marketing",
    ),
    TaskPattern(
        id="customer-service",
        name="Kundenservice",
        keywords=("kundenservice", "support", "ticket", "anfrage", "problem", "lösung", "kunde", "sla"),
        automation_score=65,
        complexity="medium",
        confidence=0.85,
        category="service",
    ),
    TaskPattern(
        id="project-management",
        name="Projektmanagement",
        keywords=("projekt", "projektmanagement", "pm", "team", "milestone", "deliverable", "risiko", "agile"),
        automation_score=45,
        complexity="high",
        confidence=0.8,
        category="management",
    ),
    TaskPattern(
        id="hr",
        name="Personalwesen",
        keywords=("hr", "personal", "mitarbeiter", "vertrag", "entwicklung", "konflikt", "compliance", "strategie"),
        automation_score=50,
        complexity="medium",
        confidence=0.8,
        category="hr",
    ),
    TaskPattern(
        id="it-support",
        name="IT-Support",
        keywords=("it", "support", "ticket", "system", "problem", "lösung", "update", "wartung", "schulung"),
        automation_score=70,
        complexity="medium",
        confidence=0.85,
        category="it",
    ),
    TaskPattern(
        id="research",
        name="Forschung",
        keywords=("forschung", "research", "analyse", "studie", "umfrage", "daten", "ergebnis", "bericht"),
        automation_score=40,
        complexity="high",
        confidence=0.75,
        category="research",
    ),
    TaskPattern(
        id="logistics",
        name="Logistik",
        keywords=("logistik", "lieferung", "transport", "lager", "route", "versand", "supply chain", "warehouse"),
        automation_score=70,
        complexity="medium",
        confidence=0.85,
        category="logistics",
    ),
)

TASK_PATTERNS: Mapping[str, TaskPattern] = MappingProxyType({p.id: p for p in _CATALOG})


# =============================================================================
# DOMAIN-PRIORITY FAMILIES
# =============================================================================


@dataclass(frozen=True)
class DomainFamily:
    """
    A curated subset of patterns scanned first, with a score multiplier,
    whenever one of the family's trigger terms occurs in the text.

    Lets a narrow pattern (e.g. "bookkeeping") outrank a broader one
    ("finance") that shares keywords with it.
    """

    name: str
    triggers: Tuple[str, ...]
    pattern_ids: Tuple[str, ...]

    def is_triggered(self, lower_text: str) -> bool:
        return any(trigger in lower_text for trigger in self.triggers)


FINANCE_FAMILY = DomainFamily(
    name="finance",
    triggers=(
        "buchhaltung",
        "finanz",
        "buchung",
        "konto",
        "beleg",
        "abschluss",
        "steuer",
        "budget",
        "controlling",
        "zahlung",
        "mahnwesen",
        "abstimmung",
    ),
    pattern_ids=(
        "bookkeeping",
        "financial-reporting",
        "accounting",
        "tax-accounting",
        "budget-control",
        "payment-processing",
        "account-reconciliation",
        "finance",
    ),
)

MARKETING_FAMILY = DomainFamily(
    name="marketing",
    triggers=("marketing", "kampagne", "content", "social", "brand", "performance"),
    pattern_ids=(
        "marketing-strategy",
        "marketing-campaign",
        "content-marketing",
        "social-media",
        "digital-marketing",
        "brand-marketing",
        "performance-marketing",
        "marketing",
    ),
)

# Scanned in this order, sharing one running maximum
DOMAIN_PRIORITY_FAMILIES: Tuple[DomainFamily, ...] = (FINANCE_FAMILY, MARKETING_FAMILY)


# =============================================================================
# HELPERS
# =============================================================================


def get_pattern_details(pattern_id: str) -> Optional[TaskPattern]:
    """
    Look up a catalog pattern by id.

    Returns:
        TaskPattern, or None for unknown ids (including "general")
    """
    return TASK_PATTERNS.get(pattern_id)


def get_all_patterns() -> List[TaskPattern]:
    """Return all catalog patterns in catalog order."""
    return list(TASK_PATTERNS.values())
