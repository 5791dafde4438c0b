"""
Keyword tables for context analysis.

This module holds the lowercase substring lists the ContextAnalyzer scans for:
software systems, the six automation signals, trend and complexity indicators,
domain bonus terms, and industries.

Pattern classes follow the convention from task_patterns.py:
- Dataclasses with frozen=True for immutability
- Class-level constants for keyword tuples
- Helper functions that use these constants
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, List, Mapping, Tuple

# =============================================================================
# SYSTEM KEYWORDS
# =============================================================================

# Detection order is the order systems are reported in
SYSTEM_KEYWORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "excel": ("excel", "spreadsheet", "tabelle", "formel", "pivot", "vlookup"),
        "crm": ("crm", "customer", "kunde", "salesforce", "hubspot", "pipedrive"),
        "erp": ("erp", "sap", "oracle", "enterprise", "business software", "prozess"),
        "email": ("email", "outlook", "gmail", "mail", "newsletter", "kampagne"),
        "calendar": ("calendar", "kalender", "termin", "meeting", "appointment"),
        "database": ("database", "datenbank", "sql", "mysql", "postgresql"),
        "api": ("api", "integration", "webhook", "schnittstelle", "rest", "json"),
        "cloud": ("cloud", "aws", "azure", "google cloud", "saas", "online"),
        "social": ("social media", "linkedin", "facebook", "twitter", "xing", "instagram"),
        "cms": ("cms", "wordpress", "content management", "website", "blog"),
        "ats": ("ats", "bewerbermanagement", "recruiting software", "workday", "bamboo", "greenhouse"),
        "jobboard": ("jobboard", "indeed", "stepstone", "monster", "stellenanzeige", "job posting"),
        "slack": ("slack", "teams", "chat", "kommunikation", "messaging", "collaboration"),
        "jira": ("jira", "ticket", "project management", "agile", "scrum", "kanban"),
        "confluence": ("confluence", "wiki", "dokumentation", "wissen", "knowledge base"),
        "marketing-automation": ("marketing automation", "hubspot", "mailchimp", "campaign", "lead nurturing"),
        "accounting-software": ("sap", "datev", "lexware", "buchhaltung", "accounting", "finanzen"),
        "hr-software": ("hr software", "personio", "bamboo", "workday", "personal", "hr"),
        "helpdesk": ("helpdesk", "zendesk", "freshdesk", "support", "ticket", "service"),
        "analytics": ("analytics", "google analytics", "tableau", "power bi", "datenanalyse", "reporting"),
    }
)

# Systems that push the trend towards automation. "workflow" and
# "integration" are not system ids, so only api, cloud and analytics count.
AUTOMATION_SYSTEMS: Tuple[str, ...] = ("api", "cloud", "workflow", "integration", "analytics")


# =============================================================================
# AUTOMATION SIGNAL KEYWORDS
# =============================================================================


@dataclass(frozen=True)
class SignalKeywords:
    """
    Keyword lists for the six automation-orientation signals.

    REPETITIVE, STRUCTURED, DIGITAL and ROUTINE favor automation;
    CREATIVE and HUMAN favor manual work.
    """

    REPETITIVE: tuple = (
        "wiederkehrend",
        "repetitive",
        "routine",
        "standard",
        "regelmäßig",
        "täglich",
        "wöchentlich",
        "monatlich",
        "automatisch",
        "systematisch",
    )

    STRUCTURED: tuple = (
        "strukturiert",
        "structured",
        "format",
        "template",
        "vorlage",
        "standard",
        "protokoll",
        "formular",
        "checkliste",
        "workflow",
    )

    DIGITAL: tuple = (
        "digital",
        "online",
        "software",
        "system",
        "tool",
        "app",
        "computer",
        "internet",
        "web",
        "platform",
        "portal",
    )

    ROUTINE: tuple = (
        "routine",
        "alltäglich",
        "gewöhnlich",
        "normal",
        "standard",
        "prozess",
        "ablauf",
        "verfahren",
        "methode",
        "praxis",
    )

    CREATIVE: tuple = (
        "kreativ",
        "creative",
        "design",
        "konzept",
        "idee",
        "innovation",
        "gestaltung",
        "entwicklung",
        "erfindung",
        "original",
        "einzigartig",
    )

    HUMAN: tuple = (
        "menschlich",
        "human",
        "persönlich",
        "face-to-face",
        "gespräch",
        "beratung",
        "coaching",
        "training",
        "interaktion",
        "kommunikation",
    )


# =============================================================================
# TREND KEYWORDS
# =============================================================================


@dataclass(frozen=True)
class TrendKeywords:
    """Indicators of whether a kind of work is becoming more or less automated."""

    INCREASING: tuple = (
        "ai",
        "automatisierung",
        "automatisch",
        "digitalisierung",
        "digital",
        "software",
        "system",
        "tool",
        "platform",
        "online",
        "cloud",
        "api",
        "integration",
        "workflow",
        "prozess",
        "optimierung",
        "machine learning",
        "robotic",
        "rpa",
        "chatbot",
        "assistant",
    )

    DECREASING: tuple = (
        "manuell",
        "handschriftlich",
        "papier",
        "analog",
        "physisch",
        "persönlich",
        "face-to-face",
        "vor ort",
        "kreativ",
        "innovativ",
        "strategisch",
        "entscheidung",
        "führung",
        "management",
        "beratung",
    )


# =============================================================================
# COMPLEXITY KEYWORDS
# =============================================================================


@dataclass(frozen=True)
class ComplexityKeywords:
    """
    Complexity indicators. HIGH and MEDIUM raise the complexity score,
    LOW lowers it. "abstimmung" is deliberately in both HIGH and MEDIUM.
    """

    HIGH: tuple = (
        "strategie",
        "strategy",
        "planung",
        "planning",
        "entwicklung",
        "development",
        "integration",
        "api",
        "database",
        "analysis",
        "analysieren",
        "beratung",
        "consulting",
        "führung",
        "leadership",
        "management",
        "koordination",
        "coordination",
        "abstimmung",
        "steuerung",
        "controlling",
        "optimierung",
        "optimization",
        "architektur",
        "architecture",
    )

    MEDIUM: tuple = (
        "bericht",
        "report",
        "dokumentation",
        "documentation",
        "überwachung",
        "monitoring",
        "verwaltung",
        "administration",
        "organisation",
        "organization",
        "kommunikation",
        "communication",
        "abstimmung",
        "reconciliation",
        "prüfung",
        "review",
        "validierung",
        "validation",
    )

    LOW: tuple = (
        "eingabe",
        "input",
        "erfassung",
        "entry",
        "sortierung",
        "sorting",
        "filterung",
        "filtering",
        "kopieren",
        "copy",
        "verschieben",
        "move",
        "archivierung",
        "archiving",
        "drucken",
        "printing",
    )


# =============================================================================
# DOMAIN BONUS TERMS
# =============================================================================


@dataclass(frozen=True)
class DomainTerms:
    """Terms that mark a text as belonging to a fast-automating domain."""

    FINANCE: tuple = ("finanz", "finance", "buchhaltung", "accounting")
    MARKETING: tuple = ("marketing", "kampagne", "campaign")
    HR: tuple = ("hr", "personal", "recruiting")


# =============================================================================
# INDUSTRY KEYWORDS
# =============================================================================

# Checked in order; first industry with a keyword hit wins
INDUSTRY_KEYWORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "tech": ("software", "development", "programming", "api", "system"),
        "finance": ("finance", "accounting", "banking", "investment", "budget"),
        "marketing": ("marketing", "advertising", "campaign", "social media", "content"),
        "hr": ("hr", "human resources", "recruitment", "personnel", "training"),
        "healthcare": ("healthcare", "medical", "patient", "clinical", "treatment"),
        "education": ("education", "teaching", "learning", "training", "course"),
        "legal": ("legal", "law", "contract", "compliance", "regulation"),
        "sales": ("sales", "customer", "client", "deal", "negotiation"),
    }
)

GENERAL_INDUSTRY = "general"


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def find_keywords(lower_text: str, keywords: Iterable[str]) -> List[str]:
    """
    Return the keywords that occur as substrings of lower_text, in list order.

    Args:
        lower_text: Already lowercased text
        keywords: Lowercase keywords to look for

    Returns:
        Matching keywords (may be empty)
    """
    return [keyword for keyword in keywords if keyword in lower_text]


def contains_any(lower_text: str, keywords: Iterable[str]) -> bool:
    """Check if any keyword occurs in lower_text."""
    return any(keyword in lower_text for keyword in keywords)
