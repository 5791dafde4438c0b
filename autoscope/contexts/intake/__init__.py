"""
Intake Context

Responsibilities:
- Ingests job postings as markdown or plain text
- Normalizes unicode and bullet glyphs
- Locates the responsibilities section (German and English headers)
- Extracts individual task lines and a posting title

Owns: Posting normalization, section detection, task line extraction
Never: Scores tasks or decides how automatable they are
"""

from autoscope.contexts.intake.task_extractor import (
    ExtractedTask,
    derive_posting_title,
    extract_sections,
    extract_task_lines,
)

__all__ = [
    "ExtractedTask",
    "extract_task_lines",
    "extract_sections",
    "derive_posting_title",
]
