"""
Task line extraction for the Intake context.

Turns a whole job posting into the individual task lines the analysis
context scores one by one:

1. Normalize unicode (bullets, quotes, invisible characters)
2. Split into sections on **Bold** or ## Hash headers
3. Prefer responsibilities sections ("Ihre Aufgaben", "What you'll do", ...);
   otherwise use every section that is not boilerplate, profile or benefits;
   a posting without headers is one big section
4. Bullet lines become tasks; without bullets, every non-empty line longer
   than 10 characters does

Tasks are deduplicated case-insensitively and capped at 30 per posting.
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from autoscope.contexts.intake.logger import _log_debug, _log_warning
from autoscope.contexts.intake.normalizer import preprocess_posting
from autoscope.contexts.intake.section_patterns import (
    MarkdownHeaderPatterns,
    TaskLinePatterns,
    clean_task_line,
    is_non_task_section,
    is_responsibility_section,
)

# Section name used for text outside of any header
UNTITLED_SECTION = ""

MAX_TITLE_LENGTH = 120


@dataclass
class ExtractedTask:
    """
    One task line taken from a posting.

    Attributes:
        text: Cleaned task text
        section: Name of the section it came from ("" when the posting has no headers)
        line_number: 1-based line number within that section
    """

    text: str
    section: str
    line_number: int


def extract_sections(text: str) -> Tuple[Dict[str, str], str]:
    """
    Split posting text into sections.

    Sections identified by:
    - Bold markdown: **Section Name** or **Section Name:**
    - Hash headers: # Header through #### Header

    Args:
        text: Posting text (should be preprocessed first)

    Returns:
        Tuple of (sections dict in document order, preamble before the first header)
    """
    sections: Dict[str, str] = {}
    preamble: List[str] = []
    current_section: Optional[str] = None
    current_content: List[str] = []

    for line in text.split("\n"):
        stripped = line.strip()

        bold_match = re.match(MarkdownHeaderPatterns.BOLD_HEADER, stripped)
        hash_match = re.match(MarkdownHeaderPatterns.HASH_HEADER, stripped)

        if bold_match or hash_match:
            if current_section is not None:
                _store_section(sections, current_section, current_content)
            current_content = []

            if bold_match:
                current_section = bold_match.group(1).strip()
                remainder = stripped[bold_match.end() :].strip()
                if remainder:
                    current_content.append(remainder)
            else:
                current_section = hash_match.group(1).strip()
        elif current_section is None:
            preamble.append(line)
        else:
            current_content.append(line)

    if current_section is not None:
        _store_section(sections, current_section, current_content)

    return sections, "\n".join(preamble).strip()


def _store_section(sections: Dict[str, str], name: str, content: List[str]) -> None:
    # Repeated headers (e.g. two "Aufgaben" blocks) are merged
    body = "\n".join(content).strip()
    if name in sections and sections[name]:
        sections[name] = f"{sections[name]}\n{body}" if body else sections[name]
    else:
        sections[name] = body


def select_task_sections(sections: Dict[str, str], preamble: str) -> Dict[str, str]:
    """
    Pick the sections that hold task lines.

    Args:
        sections: Output of extract_sections()
        preamble: Text before the first header

    Returns:
        Section name -> content, in document order
    """
    responsibilities = {name: body for name, body in sections.items() if is_responsibility_section(name)}
    if responsibilities:
        return responsibilities

    candidates = {name: body for name, body in sections.items() if not is_non_task_section(name)}
    if candidates:
        return candidates

    if sections:
        _log_warning("Posting has headers but no usable sections, using the text before the first header")
        return {UNTITLED_SECTION: preamble} if preamble else {}

    return {UNTITLED_SECTION: preamble}


def parse_bullets(text: str) -> List[Tuple[int, str]]:
    """
    Parse bullet lines (*, -, +, 1., 1)) from section content.

    Args:
        text: Section content

    Returns:
        List of (1-based line number, cleaned bullet text)
    """
    if not text:
        return []

    bullets = []
    for line_number, line in enumerate(text.split("\n"), start=1):
        match = re.match(TaskLinePatterns.BULLET, line)
        if match:
            bullet_text = clean_task_line(match.group(1))
            if len(bullet_text) >= TaskLinePatterns.MIN_BULLET_LENGTH:
                bullets.append((line_number, bullet_text))

    return bullets


def parse_plain_lines(text: str) -> List[Tuple[int, str]]:
    """Fallback for sections without bullets: every line longer than the minimum."""
    lines = []
    for line_number, line in enumerate(text.split("\n"), start=1):
        cleaned = clean_task_line(line)
        if len(cleaned) > TaskLinePatterns.MIN_LINE_LENGTH:
            lines.append((line_number, cleaned))
    return lines


def extract_task_lines(posting_text: str) -> List[ExtractedTask]:
    """
    Extract task lines from a job posting.

    Args:
        posting_text: Raw posting (markdown or plain text)

    Returns:
        ExtractedTask list in document order (possibly empty)

    Examples:
        >>> tasks = extract_task_lines("**Ihre Aufgaben**\\n* Pflege der Kundendaten im CRM")
        >>> [t.text for t in tasks]
        ['Pflege der Kundendaten im CRM']
    """
    text = preprocess_posting(posting_text)
    sections, preamble = extract_sections(text)
    selected = select_task_sections(sections, preamble)

    found: List[ExtractedTask] = []
    for name, body in selected.items():
        for line_number, line in parse_bullets(body):
            found.append(ExtractedTask(text=line, section=name, line_number=line_number))

    if not found:
        _log_debug("No bullet lines found, falling back to plain lines")
        for name, body in selected.items():
            for line_number, line in parse_plain_lines(body):
                found.append(ExtractedTask(text=line, section=name, line_number=line_number))

    tasks: List[ExtractedTask] = []
    seen = set()
    for task in found:
        key = task.text.lower()
        if key in seen:
            continue
        seen.add(key)
        tasks.append(task)

    if len(tasks) > TaskLinePatterns.MAX_TASKS:
        _log_warning(f"Posting has {len(tasks)} task lines, keeping the first {TaskLinePatterns.MAX_TASKS}")
        tasks = tasks[: TaskLinePatterns.MAX_TASKS]

    _log_debug(f"Extracted {len(tasks)} task lines from {len(selected)} sections")
    return tasks


def derive_posting_title(posting_text: str) -> str:
    """
    Derive a short title for a posting, used as job context during analysis.

    Uses the first "# Title" header if there is one, else the first non-empty
    line, cleaned of markdown and truncated.

    Args:
        posting_text: Raw posting

    Returns:
        Title string ("" for an empty posting)
    """
    text = preprocess_posting(posting_text)

    for line in text.split("\n"):
        match = re.match(MarkdownHeaderPatterns.TITLE_HEADER, line.strip())
        if match:
            return clean_task_line(match.group(1))[:MAX_TITLE_LENGTH]

    for line in text.split("\n"):
        cleaned = clean_task_line(line)
        if cleaned:
            return cleaned[:MAX_TITLE_LENGTH]

    return ""
