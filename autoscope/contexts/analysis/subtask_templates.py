"""
Subtask templates: verb/object lists, stage labels and title refinements.

Subtask titles are assembled from a template family, i.e. the verb phrases
and object nouns for one pattern, plus a stage profile that labels each
position in the batch:

    "{stage}: {verb} von [{term}-]{object}[ {modifier}]"

The TemplateRegistry resolves a pattern id to its family once per lookup and
is validated at construction: every family ends up with non-empty verb and
object lists (borrowing the routine lists where its own are missing), so the
synthesizer never has to deal with a missing template.

Examples:
    >>> registry = TemplateRegistry()
    >>> registry.resolve("general").id
    'routine'
    >>> registry.resolve("marketing-foo").id
    'marketing'
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from jinja2 import Environment, Template

from autoscope.contexts.analysis.exceptions import TemplateConfigurationError
from autoscope.contexts.analysis.task_patterns import FINANCE_FAMILY, MARKETING_FAMILY

DEFAULT_FAMILY_ID = "routine"

# =============================================================================
# VERB PHRASES (lowercase, used verbatim in titles)
# =============================================================================

TASK_VERBS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "data-entry": (
            "daten sammeln",
            "daten strukturieren",
            "daten validieren",
            "daten eingeben",
            "daten formatieren",
            "daten übertragen",
            "daten archivieren",
            "daten sichern",
        ),
        "reporting": (
            "daten sammeln",
            "daten analysieren",
            "berichte vorbereiten",
            "berichte erstellen",
            "visualisierungen erstellen",
            "berichte überprüfen",
            "berichte freigeben",
            "berichte verteilen",
        ),
        "communication": (
            "kontakte identifizieren",
            "nachrichten vorbereiten",
            "kommunikation durchführen",
            "antworten verarbeiten",
            "follow-ups planen",
            "kommunikation dokumentieren",
        ),
        "planning": (
            "anforderungen analysieren",
            "ziele definieren",
            "ressourcen planen",
            "zeitpläne erstellen",
            "risiken bewerten",
            "pläne kommunizieren",
        ),
        "analysis": (
            "daten sammeln",
            "daten bereinigen",
            "muster identifizieren",
            "trends analysieren",
            "erkenntnisse bewerten",
            "empfehlungen entwickeln",
            "ergebnisse dokumentieren",
        ),
        "documentation": (
            "inhalt recherchieren",
            "struktur planen",
            "dokument erstellen",
            "inhalt überprüfen",
            "feedback einarbeiten",
            "dokument finalisieren",
        ),
        "quality-control": (
            "standards definieren",
            "prozesse prüfen",
            "ergebnisse bewerten",
            "fehler identifizieren",
            "korrekturen durchführen",
            "qualität freigeben",
        ),
        "creative": (
            "konzept entwickeln",
            "ideen sammeln",
            "design entwerfen",
            "feedback einholen",
            "design überarbeiten",
            "ergebnis finalisieren",
        ),
        "management": (
            "ziele definieren",
            "ressourcen zuweisen",
            "prozesse überwachen",
            "entscheidungen treffen",
            "fortschritt bewerten",
            "ergebnisse kommunizieren",
        ),
        "routine": (
            "aufgabe vorbereiten",
            "prozess ausführen",
            "ergebnis kontrollieren",
            "dokumentation erstellen",
            "daten archivieren",
            "prozess optimieren",
        ),
        "recruitment": (
            "stellenanzeigen analysieren",
            "kandidaten recherchieren",
            "bewerbungen sichten",
            "interviews koordinieren",
            "feedback sammeln",
            "entscheidungen treffen",
            "onboarding vorbereiten",
        ),
        "sales": (
            "leads generieren",
            "kontakte qualifizieren",
            "gespräche führen",
            "angebote erstellen",
            "verhandlungen führen",
            "verträge abschließen",
            "kundenbeziehung pflegen",
        ),
        "marketing": (
            "zielgruppen analysieren",
            "kampagnen konzipieren",
            "content erstellen",
            "kanäle bespielen",
            "performance messen",
            "optimierungen durchführen",
            "ergebnisse analysieren",
        ),
        "marketing-strategy": (
            "marktanalyse durchführen",
            "zielgruppen definieren",
            "positionierung entwickeln",
            "strategie konzipieren",
            "budget planen",
            "roadmap erstellen",
            "kpis definieren",
        ),
        "marketing-campaign": (
            "kampagnenkonzept entwickeln",
            "kanäle auswählen",
            "content planen",
            "timeline erstellen",
            "kampagne launchen",
            "performance tracken",
            "optimierungen durchführen",
        ),
        "content-marketing": (
            "content-strategie entwickeln",
            "themen recherchieren",
            "content erstellen",
            "redaktionsplan erstellen",
            "content publizieren",
            "engagement messen",
            "content optimieren",
        ),
        "social-media": (
            "social media strategie entwickeln",
            "content kalender erstellen",
            "posts erstellen",
            "community managen",
            "engagement tracken",
            "hashtags optimieren",
            "influencer koordinieren",
        ),
        "digital-marketing": (
            "digital strategie entwickeln",
            "kanäle analysieren",
            "ads konfigurieren",
            "landing pages optimieren",
            "conversion tracking einrichten",
            "remarketing kampagnen",
            "roi optimieren",
        ),
        "brand-marketing": (
            "brand identity entwickeln",
            "messaging definieren",
            "brand guidelines erstellen",
            "brand awareness messen",
            "brand positioning kommunizieren",
            "brand experience gestalten",
            "brand equity aufbauen",
        ),
        "performance-marketing": (
            "performance strategie entwickeln",
            "attribution model einrichten",
            "conversion tracking",
            "a/b tests durchführen",
            "roi optimieren",
            "budget allocation",
            "performance reporting",
        ),
        "finance": (
            "finanzdaten sammeln",
            "buchungen kontieren",
            "konten abstimmen",
            "berichte erstellen",
            "steuern berechnen",
            "budget überwachen",
            "controlling durchführen",
        ),
        "accounting": (
            "belege erfassen",
            "buchungen vornehmen",
            "konten abstimmen",
            "berichte erstellen",
            "prüfungen durchführen",
            "steuern berechnen",
            "jahresabschluss vorbereiten",
        ),
        "bookkeeping": (
            "belege sammeln und kategorisieren",
            "buchungen vorbereiten und kontieren",
            "konten führen und überwachen",
            "monatsabschlüsse vorbereiten und erstellen",
            "jahresabschlüsse strukturieren und validieren",
            "steuervoranmeldungen erstellen und einreichen",
            "mahnwesen koordinieren und verfolgen",
        ),
        "financial-reporting": (
            "finanzdaten sammeln und validieren",
            "berichte strukturieren und vorbereiten",
            "abschlüsse erstellen und validieren",
            "finanzanalysen durchführen und interpretieren",
            "berichte prüfen und freigeben",
            "berichte freigeben und verteilen",
            "berichte archivieren und dokumentieren",
        ),
        "tax-accounting": (
            "steuerrelevante daten sammeln und kategorisieren",
            "steuerberechnungen durchführen und prüfen",
            "steuererklärungen vorbereiten und strukturieren",
            "steuervoranmeldungen erstellen und einreichen",
            "steuerberater koordinieren und abstimmen",
            "steuerprüfungen vorbereiten und dokumentieren",
            "steuerdokumentation erstellen und archivieren",
        ),
        "budget-control": (
            "budget planen und strukturieren",
            "ausgaben überwachen und kontrollieren",
            "abweichungen analysieren und bewerten",
            "forecasts erstellen und validieren",
            "budget anpassungen koordinieren und umsetzen",
            "controlling berichte erstellen und prüfen",
            "budget kommunikation führen und dokumentieren",
        ),
        "payment-processing": (
            "zahlungseingänge überwachen und erfassen",
            "zahlungsausgänge koordinieren und freigeben",
            "mahnwesen automatisieren und verfolgen",
            "zahlungsabstimmungen durchführen und prüfen",
            "zahlungsberichte erstellen und analysieren",
            "zahlungsprozesse optimieren und dokumentieren",
            "zahlungskommunikation führen und koordinieren",
        ),
        "account-reconciliation": (
            "kontenabstimmungen vorbereiten und strukturieren",
            "abstimmungsdifferenzen analysieren und klären",
            "kontenabstimmungen durchführen und validieren",
            "abstimmungsberichte erstellen und prüfen",
            "abstimmungsprozesse optimieren und dokumentieren",
            "abstimmungskommunikation führen und koordinieren",
            "abstimmungsarchivierung sicherstellen",
        ),
        "customer-service": (
            "anfragen bearbeiten",
            "probleme analysieren",
            "lösungen entwickeln",
            "kommunikation führen",
            "escalations handhaben",
            "feedback sammeln",
            "prozesse optimieren",
        ),
        "project-management": (
            "projektanforderungen definieren",
            "ressourcen planen",
            "zeitpläne erstellen",
            "teams koordinieren",
            "fortschritt überwachen",
            "risiken managen",
            "projekt abschließen",
        ),
        "hr": (
            "personalplanung durchführen",
            "recruiting koordinieren",
            "verträge verwalten",
            "entwicklung fördern",
            "konflikte lösen",
            "compliance sicherstellen",
            "strategie entwickeln",
        ),
        "it-support": (
            "tickets bearbeiten",
            "probleme diagnostizieren",
            "lösungen implementieren",
            "systeme warten",
            "updates durchführen",
            "dokumentation erstellen",
            "schulungen durchführen",
        ),
        "research": (
            "fragestellungen definieren",
            "quellen recherchieren",
            "daten sammeln",
            "analysen durchführen",
            "ergebnisse interpretieren",
            "berichte schreiben",
            "präsentationen erstellen",
        ),
        "logistics": (
            "lieferungen planen",
            "routen optimieren",
            "lager verwalten",
            "transport koordinieren",
            "qualität kontrollieren",
            "kosten optimieren",
            "prozesse verbessern",
        ),
    }
)

# =============================================================================
# OBJECT NOUNS
# =============================================================================

# account-reconciliation has no object list and borrows the routine one
TASK_OBJECTS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "data-entry": ("Daten", "Formulare", "Listen", "Tabellen", "Datensätze", "Eingabefelder", "Validierungsregeln"),
        "reporting": (
            "Berichte",
            "Dashboards",
            "Präsentationen",
            "Auswertungen",
            "Statistiken",
            "Visualisierungen",
            "KPIs",
        ),
        "communication": ("E-Mails", "Meetings", "Termine", "Nachrichten", "Gespräche", "Präsentationen", "Follow-ups"),
        "planning": ("Pläne", "Terminkalender", "Ressourcen", "Budgets", "Zeitpläne", "Milestones", "Abhängigkeiten"),
        "analysis": ("Daten", "Trends", "Muster", "Erkenntnisse", "Empfehlungen", "Metriken", "Benchmarks"),
        "documentation": (
            "Dokumente",
            "Handbücher",
            "Protokolle",
            "Anleitungen",
            "Spezifikationen",
            "Templates",
            "Versionen",
        ),
        "quality-control": ("Standards", "Prozesse", "Ergebnisse", "Qualitätskriterien", "Tests", "Audits", "Compliance"),
        "creative": ("Konzepte", "Designs", "Inhalte", "Kampagnen", "Materialien", "Mockups", "Prototypen"),
        "management": ("Teams", "Projekte", "Strategien", "Entscheidungen", "Prozesse", "Ressourcen", "Stakeholder"),
        "routine": ("Arbeitsschritte", "Checklisten", "Standardprozesse", "Routinen", "Abläufe", "Templates", "Workflows"),
        "recruitment": (
            "Stellenanzeigen",
            "Bewerbungen",
            "Kandidaten",
            "Interviews",
            "Feedback",
            "Entscheidungen",
            "Onboarding",
        ),
        "sales": ("Leads", "Kontakte", "Gespräche", "Angebote", "Verträge", "Kunden", "Umsätze"),
        "marketing": ("Zielgruppen", "Kampagnen", "Content", "Kanäle", "Performance", "ROI", "Marken"),
        "marketing-strategy": ("Marktanalyse", "Zielgruppen", "Positionierung", "Strategie", "Budget", "Roadmap", "KPIs"),
        "marketing-campaign": (
            "Kampagnenkonzept",
            "Kanäle",
            "Content",
            "Timeline",
            "Launch",
            "Performance",
            "Optimierung",
        ),
        "content-marketing": (
            "Content-Strategie",
            "Themen",
            "Content",
            "Redaktionsplan",
            "Publikation",
            "Engagement",
            "Optimierung",
        ),
        "social-media": (
            "Social Media Strategie",
            "Content Kalender",
            "Posts",
            "Community",
            "Engagement",
            "Hashtags",
            "Influencer",
        ),
        "digital-marketing": (
            "Digital Strategie",
            "Kanäle",
            "Ads",
            "Landing Pages",
            "Conversion Tracking",
            "Remarketing",
            "ROI",
        ),
        "brand-marketing": (
            "Brand Identity",
            "Messaging",
            "Brand Guidelines",
            "Brand Awareness",
            "Positioning",
            "Brand Experience",
            "Brand Equity",
        ),
        "performance-marketing": (
            "Performance Strategie",
            "Attribution",
            "Conversion",
            "A/B Tests",
            "ROI",
            "Budget",
            "Reporting",
        ),
        "finance": ("Finanzdaten", "Buchungen", "Konten", "Berichte", "Steuern", "Budget", "Controlling"),
        "accounting": ("Belege", "Buchungen", "Konten", "Berichte", "Prüfungen", "Steuern", "Jahresabschluss"),
        "bookkeeping": (
            "Belege",
            "Buchungen",
            "Konten",
            "Monatsabschlüsse",
            "Jahresabschlüsse",
            "Steuervoranmeldungen",
            "Mahnwesen",
        ),
        "financial-reporting": ("Daten", "Berichte", "Abschlüsse", "Analysen", "Prüfungen", "Freigaben", "Verteilungen"),
        "tax-accounting": (
            "Steuerdaten",
            "Steuerberechnungen",
            "Steuererklärungen",
            "Steuervoranmeldungen",
            "Steuerberater",
            "Steuerprüfungen",
            "Steuerdokumentation",
        ),
        "budget-control": (
            "Budget",
            "Ausgaben",
            "Abweichungen",
            "Forecasts",
            "Anpassungen",
            "Controlling-Berichte",
            "Kommunikation",
        ),
        "payment-processing": (
            "Zahlungseingänge",
            "Zahlungsausgänge",
            "Mahnwesen",
            "Zahlungsabstimmungen",
            "Zahlungsberichte",
            "Zahlungsprozesse",
            "Zahlungskommunikation",
        ),
        "customer-service": ("Anfragen", "Tickets", "Probleme", "Lösungen", "Kunden", "Feedback", "SLA"),
        "project-management": ("Projekte", "Teams", "Ressourcen", "Zeitpläne", "Milestones", "Risiken", "Deliverables"),
        "hr": ("Personal", "Recruiting", "Verträge", "Entwicklung", "Konflikte", "Compliance", "Strategie"),
        "it-support": ("Tickets", "Systeme", "Probleme", "Lösungen", "Updates", "Dokumentation", "Schulungen"),
        "research": ("Fragestellungen", "Quellen", "Daten", "Analysen", "Ergebnisse", "Berichte", "Präsentationen"),
        "logistics": ("Lieferungen", "Routen", "Lager", "Transport", "Qualität", "Kosten", "Prozesse"),
    }
)

# =============================================================================
# STAGE PROFILES
# =============================================================================


@dataclass(frozen=True)
class StageProfile:
    """
    Stage labels and title refinements for one domain.

    Attributes:
        name: Profile name ("finance", "marketing", "standard")
        stages: Stage label per position; later positions get "Step {n}"
        refinements: Position -> (old phrase, new phrase) substitutions,
                     applied in order to the rendered title
    """

    name: str
    stages: Tuple[str, ...]
    refinements: Mapping[int, Tuple[Tuple[str, str], ...]] = field(default_factory=dict)

    def stage_label(self, index: int) -> str:
        if index < len(self.stages):
            return self.stages[index]
        return f"Step {index + 1}"

    def refine(self, title: str, index: int) -> str:
        """Apply this position's phrase substitutions (first occurrence each)."""
        for old, new in self.refinements.get(index, ()):
            title = title.replace(old, new, 1)
        return title


FINANCE_STAGES = StageProfile(
    name="finance",
    stages=(
        "Datenaufbereitung & Eingabe",
        "Buchung & Kontierung",
        "Abstimmung & Prüfung",
        "Berichterstattung & Abschluss",
        "Steuer & Compliance",
        "Controlling & Analyse",
        "Dokumentation & Archivierung",
        "Freigabe & Kommunikation",
        "Monitoring & Überwachung",
        "Optimierung & Prozessverbesserung",
    ),
    refinements=MappingProxyType(
        {
            0: (
                ("belege sammeln", "belege sammeln und kategorisieren"),
                ("buchungen kontieren", "buchungen vorbereiten und kontieren"),
                ("finanzdaten sammeln", "finanzdaten sammeln und validieren"),
            ),
            1: (
                ("buchungen kontieren", "buchungen kontieren und erfassen"),
                ("konten abstimmen", "konten führen und überwachen"),
                ("belege erfassen", "belege erfassen und buchen"),
            ),
            2: (
                ("konten abstimmen", "konten abstimmen und prüfen"),
                ("abschlüsse erstellen", "abschlüsse vorbereiten und erstellen"),
                ("berichte erstellen", "berichte erstellen und validieren"),
            ),
            3: (
                ("abschlüsse erstellen", "abschlüsse erstellen und freigeben"),
                ("berichte erstellen", "berichte erstellen und verteilen"),
                ("steuern berechnen", "steuern berechnen und prüfen"),
            ),
            4: (
                ("steuern berechnen", "steuererklärungen vorbereiten"),
                ("steuervoranmeldungen", "steuervoranmeldungen erstellen und einreichen"),
            ),
        }
    ),
)

MARKETING_STAGES = StageProfile(
    name="marketing",
    stages=(
        "Strategie & Planung",
        "Konzeption & Design",
        "Umsetzung & Launch",
        "Performance & Optimierung",
        "Analyse & Reporting",
        "Optimierung & Iteration",
        "Skalierung & Expansion",
        "Monitoring & Maintenance",
        "Evaluation & Learnings",
        "Strategie-Anpassung",
    ),
    refinements=MappingProxyType(
        {
            0: (
                ("zielgruppen analysieren", "zielgruppen und markt analysieren"),
                ("kampagnen konzipieren", "kampagnenstrategie entwickeln"),
                ("content erstellen", "content-strategie entwickeln"),
            ),
            1: (
                ("kampagnen konzipieren", "kampagnenkonzept und design erstellen"),
                ("content erstellen", "content konzipieren und designen"),
            ),
            2: (
                ("kanäle bespielen", "kampagne launchen und kanäle bespielen"),
                ("content erstellen", "content produzieren und publizieren"),
            ),
            3: (
                ("performance messen", "performance tracken und optimieren"),
                ("optimierungen durchführen", "kampagne optimieren und anpassen"),
            ),
        }
    ),
)

_STANDARD_LATE_REFINEMENTS = (
    ("daten übertragen", "daten übertragen und synchronisieren"),
    ("berichte verteilen", "berichte freigeben und verteilen"),
)

STANDARD_STAGES = StageProfile(
    name="standard",
    stages=(
        "Analyse & Planung",
        "Datenaufbereitung",
        "Hauptausführung",
        "Qualitätskontrolle",
        "Integration & Test",
        "Dokumentation",
        "Optimierung",
        "Freigabe & Deployment",
        "Monitoring",
        "Wartung",
    ),
    refinements=MappingProxyType(
        {
            0: (
                ("daten sammeln", "anforderungen analysieren und daten sammeln"),
                ("kontakte identifizieren", "zielgruppe analysieren und kontakte identifizieren"),
            ),
            1: (
                ("daten strukturieren", "daten bereinigen und strukturieren"),
                ("daten analysieren", "daten validieren und analysieren"),
            ),
            3: _STANDARD_LATE_REFINEMENTS,
            4: _STANDARD_LATE_REFINEMENTS,
        }
    ),
)


def stage_profile_for(family_id: str) -> StageProfile:
    """Pick the stage profile for a template family by its domain."""
    if family_id in FINANCE_FAMILY.pattern_ids:
        return FINANCE_STAGES
    if family_id in MARKETING_FAMILY.pattern_ids:
        return MARKETING_STAGES
    return STANDARD_STAGES


# =============================================================================
# TITLE AND DESCRIPTION TEMPLATES
# =============================================================================

TITLE_TEMPLATE = (
    "{{ stage }}: {{ verb }} von "
    "{% if term %}{{ term }}-{% endif %}{{ object }}"
    "{% if modifier %} {{ modifier }}{% endif %}"
)

DESCRIPTION_TEMPLATE = (
    "{{ title }}"
    "{% if term %} für {{ term }}{% endif %}"
    "{% if systems %} mit {{ systems | join(' und ') }}{% endif %}"
    " - Detaillierte Bearbeitung mit spezifischen Anforderungen"
)

# =============================================================================
# SYSTEM MODIFIERS AND DOMAIN TERMS
# =============================================================================

# Picked by position (index % 3) for the first detected system
SYSTEM_MODIFIERS: Mapping[str, Tuple[str, str, str]] = MappingProxyType(
    {
        "excel": ("in Excel", "mit Formeln", "automatisiert"),
        "crm": ("im CRM-System", "kundenspezifisch", "datengetrieben"),
        "email": ("per E-Mail", "automatisch", "termingesteuert"),
        "api": ("über Schnittstellen", "automatisiert", "in Echtzeit"),
        "cloud": ("in der Cloud", "kollaborativ", "synchronisiert"),
    }
)

SPECIFIC_TERMS: Tuple[str, ...] = (
    # Data
    "crm", "excel", "datenbank", "csv", "api", "sql",
    # Process
    "automatisierung", "workflow", "integration", "migration",
    # Business
    "kunde", "projekt", "budget", "termin", "deadline",
    # Systems
    "software", "tool", "platform", "system", "dashboard",
    # Marketing
    "kampagne", "campaign", "content", "social media", "seo", "sem", "ppc",
    "google ads", "facebook ads", "linkedin ads", "branding", "positionierung",
    "zielgruppe", "target audience", "conversion", "roi", "ctr", "cpc",
    "remarketing", "attribution", "landing page", "email marketing", "influencer",
    "hashtag", "engagement", "reach", "impression", "click", "lead", "qualification",
    "nurturing", "funnel", "pipeline", "analytics", "tracking", "optimization",
    "a/b test", "split test", "performance", "brand awareness", "brand equity",
    "messaging", "storytelling", "visual", "video", "podcast", "webinar",
    "whitepaper", "ebook", "case study", "testimonial", "referral", "affiliate",
)


def extract_specific_terms(text: str) -> List[str]:
    """Domain terms found in text, in SPECIFIC_TERMS order."""
    lower_text = text.lower()
    return [term for term in SPECIFIC_TERMS if term in lower_text]


def system_modifier(systems: Tuple[str, ...], index: int) -> str:
    """Modifier for the first detected system at this position, or ''."""
    if not systems:
        return ""
    modifiers = SYSTEM_MODIFIERS.get(systems[0])
    if not modifiers:
        return ""
    return modifiers[index % len(modifiers)]


# =============================================================================
# VERB CLASSES AND PHRASES FOR RISKS / OPPORTUNITIES
# =============================================================================


@dataclass(frozen=True)
class VerbClasses:
    """Substrings that put a verb phrase into a class."""

    HIGH_AUTOMATION: tuple = ("erfassen", "eingeben", "sammeln", "übertragen", "formatieren")
    LOW_AUTOMATION: tuple = ("konzipieren", "entscheiden", "bewerten", "gestalten")
    ENTRY: tuple = ("eingeben", "erfassen")
    EVALUATION: tuple = ("analysieren", "bewerten")
    COLLECTION: tuple = ("sammeln", "erfassen")


@dataclass(frozen=True)
class RiskPhrases:
    ENTRY: tuple = ("Eingabefehler", "Datenqualität")
    EVALUATION: tuple = ("Fehlinterpretation", "Unvollständige Daten")
    API: tuple = ("API-Ausfälle", "Rate-Limits")
    SPREADSHEET: tuple = ("Formel-Fehler", "Versionskonflikte")
    OVER_AUTOMATION: tuple = ("Überautomatisierung", "Fehlende Kontrolle")
    MANUAL: tuple = ("Manuelle Fehler", "Zeitaufwand")


@dataclass(frozen=True)
class OpportunityPhrases:
    FULL_AUTOMATION: tuple = ("Vollautomatisierung möglich", "Zeitersparnis von 80%+")
    PARTIAL_AUTOMATION: tuple = ("Teilautomatisierung", "Qualitätsverbesserung")
    API: tuple = ("Echtzeit-Integration", "Skalierbarkeit")
    SPREADSHEET: tuple = ("Formel-Automatisierung", "Template-Nutzung")
    COLLECTION: tuple = ("Batch-Verarbeitung", "Datenvalidierung")


def verb_in_class(verb: str, verb_class: tuple) -> bool:
    return any(marker in verb for marker in verb_class)


# =============================================================================
# TEMPLATE REGISTRY
# =============================================================================

_FINANCE_PREFIXES = (
    "finance",
    "accounting",
    "bookkeeping",
    "tax",
    "budget",
    "payment",
    "account-reconciliation",
)
_MARKETING_PREFIX = "marketing-"


@dataclass(frozen=True)
class TemplateFamily:
    """Resolved verbs, objects and stage profile for one pattern family."""

    id: str
    verbs: Tuple[str, ...]
    objects: Tuple[str, ...]
    stages: StageProfile

    def verb_at(self, index: int) -> str:
        return self.verbs[index % len(self.verbs)]

    def object_at(self, index: int) -> str:
        return self.objects[index % len(self.objects)]


class TemplateRegistry:
    """
    Registry mapping pattern ids to validated template families.

    All families are built once in __init__. A family without its own verb or
    object list takes the default family's list for that slot, so lookups
    cannot fail afterwards.

    Raises:
        TemplateConfigurationError: If the default family is missing or has
                                    an empty verb or object list
    """

    def __init__(
        self,
        verbs: Mapping[str, Tuple[str, ...]] = TASK_VERBS,
        objects: Mapping[str, Tuple[str, ...]] = TASK_OBJECTS,
        default_family: str = DEFAULT_FAMILY_ID,
    ):
        default_verbs = tuple(verbs.get(default_family) or ())
        default_objects = tuple(objects.get(default_family) or ())
        if not default_verbs:
            raise TemplateConfigurationError("Default template family has no verbs", family_id=default_family)
        if not default_objects:
            raise TemplateConfigurationError("Default template family has no objects", family_id=default_family)

        self.default_family = default_family
        self._families: Dict[str, TemplateFamily] = {}

        for family_id in list(verbs) + [k for k in objects if k not in verbs]:
            family_verbs = tuple(verbs.get(family_id) or ()) or default_verbs
            family_objects = tuple(objects.get(family_id) or ()) or default_objects
            self._families[family_id] = TemplateFamily(
                id=family_id,
                verbs=family_verbs,
                objects=family_objects,
                stages=stage_profile_for(family_id),
            )

        self.env = Environment()
        self.title_template: Template = self.env.from_string(TITLE_TEMPLATE)
        self.description_template: Template = self.env.from_string(DESCRIPTION_TEMPLATE)

    def resolve(self, pattern_id: str) -> TemplateFamily:
        """
        Resolve a pattern id to its template family.

        Finance-prefixed ids fall back to "finance", "marketing-*" ids to
        "marketing", everything else (including "general") to the default.

        Args:
            pattern_id: Pattern id from a PatternMatch

        Returns:
            TemplateFamily (never None)
        """
        for candidate in (pattern_id, self._domain_fallback(pattern_id)):
            if candidate and candidate in self._families:
                return self._families[candidate]
        return self._families[self.default_family]

    @staticmethod
    def _domain_fallback(pattern_id: str) -> Optional[str]:
        if pattern_id.startswith(_FINANCE_PREFIXES):
            return "finance"
        if pattern_id.startswith(_MARKETING_PREFIX):
            return "marketing"
        return None

    def family_ids(self) -> List[str]:
        return list(self._families)

    def render_title(self, stage: str, verb: str, obj: str, term: str = "", modifier: str = "") -> str:
        return self.title_template.render(stage=stage, verb=verb, object=obj, term=term, modifier=modifier)

    def render_description(self, title: str, term: str = "", systems: Tuple[str, ...] = ()) -> str:
        return self.description_template.render(title=title, term=term, systems=list(systems))
