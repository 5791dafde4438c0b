"""
Pattern matching for job posting sections and task lines.

This module provides regex patterns and helper functions to find section
headers, recognize the responsibilities section (German and English) and
pick bullet lines out of section bodies.

Pattern classes follow the convention used across the project:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass

# =============================================================================
# MARKDOWN HEADER PATTERNS (for section extraction)
# =============================================================================


@dataclass(frozen=True)
class MarkdownHeaderPatterns:
    """
    Regex patterns for detecting section headers.

    Supports bold markdown (**Header**) and ATX headers (# Header).
    """

    # **Section Name** or **Section Name:**, at start of line
    BOLD_HEADER: str = r"\*\*([^*]+?):?\*\*"

    # # Header through #### Header
    HASH_HEADER: str = r"^#{1,4}\s+(.+?):?\s*$"

    # Top-level title: a single hash
    TITLE_HEADER: str = r"^#\s+(.+?)\s*$"


# =============================================================================
# TASK LINE PATTERNS
# =============================================================================


@dataclass(frozen=True)
class TaskLinePatterns:
    """Patterns for bullet lines and markdown residue."""

    # "* text", "- text", "+ text", "1. text", "1) text"
    BULLET: str = r"^\s*(?:[-*+]|\d+[.)])\s+(.+)$"

    # Emphasis/code/quote markers left inside a line
    MARKDOWN_RESIDUE: str = r"[*_`#>]+"

    # Minimum length of a bullet to count as a task
    MIN_BULLET_LENGTH: int = 6

    # Fallback (no bullets): non-empty lines longer than this
    MIN_LINE_LENGTH: int = 10

    # Safety limit on tasks per posting
    MAX_TASKS: int = 30


# =============================================================================
# SECTION PATTERNS
# =============================================================================


@dataclass(frozen=True)
class SectionPatterns:
    """
    Regex patterns matched against normalized section names.

    RESPONSIBILITIES sections hold the task bullets. NON_TASK sections
    (profile, requirements, benefits...) never do, even without a
    responsibilities header in the posting.
    """

    RESPONSIBILITIES: tuple = (
        # EN
        r"what you'?ll (?:be )?do(?:ing)?",
        r"what you will do",
        r"responsibilit(?:y|ies)",
        r"your (?:role|responsibilities|tasks)",
        r"\bduties\b",
        r"\btasks\b",
        # DE
        r"\baufgaben",
        r"ihre aufgaben",
        r"deine aufgaben",
        r"tätigkeite?n?",
        r"verantwortlichkeiten",
        r"zuständigkeiten",
        r"was dich erwartet",
        r"was sie erwartet",
        r"zur rolle",
    )

    NON_TASK: tuple = (
        # EN
        r"requirements?",
        r"qualifications?",
        r"about you",
        r"what you('ll)? bring",
        r"benefits",
        r"perks",
        r"what we offer",
        r"about (?:the )?(?:company|us)",
        r"contact",
        # DE
        r"\bprofil\b",
        r"dein profil",
        r"ihr profil",
        r"anforderungen",
        r"qualifikationen",
        r"was (?:wir|sie) (?:dir |ihnen )?bieten",
        r"wir bieten",
        r"leistungen",
        r"hard facts",
        r"details zum jobangebot",
        r"kontakt",
        r"über uns",
    )


# =============================================================================
# BOILERPLATE DETECTION
# =============================================================================

KNOWN_BOILERPLATE_SECTIONS = {
    "equal opportunity employer",
    "equal employment opportunity",
    "eeo statement",
    "diversity and inclusion",
    "reasonable accommodation",
    "how to apply",
    "application process",
    "privacy policy",
    "datenschutz",
    "disclaimer",
    "bewerbung",
    "so bewirbst du dich",
    "salary",
    "gehalt",
    "location",
    "standort",
}


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def normalize_section_name(name: str) -> str:
    """
    Normalize section name for matching.

    Args:
        name: Raw section name from markdown

    Returns:
        Lowercase, stripped name with single spaces
    """
    normalized = name.lower().strip()
    return re.sub(r"\s+", " ", normalized)


def is_responsibility_section(section_name: str) -> bool:
    normalized = normalize_section_name(section_name)
    return any(re.search(pattern, normalized) for pattern in SectionPatterns.RESPONSIBILITIES)


def is_non_task_section(section_name: str) -> bool:
    """Check if a section is boilerplate or otherwise never holds tasks."""
    normalized = normalize_section_name(section_name)
    if normalized in KNOWN_BOILERPLATE_SECTIONS:
        return True
    return any(re.search(pattern, normalized) for pattern in SectionPatterns.NON_TASK)


def clean_task_line(line: str) -> str:
    """
    Strip markdown residue and tidy whitespace in a task line.

    Examples:
        >>> clean_task_line("**Pflege** der   Kundendaten ;")
        'Pflege der Kundendaten'
    """
    line = re.sub(TaskLinePatterns.MARKDOWN_RESIDUE, " ", line)
    line = re.sub(r"\s{2,}", " ", line)
    line = re.sub(r"\s*[,;]$", "", line.strip())
    return line.strip()
