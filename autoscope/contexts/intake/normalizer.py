"""
Job posting normalizer for the Intake context.

Postings are pasted from web pages, PDFs and ATS exports, so they arrive with
non-breaking spaces, zero-width characters, smart quotes and a zoo of bullet
glyphs. Normalizing first lets the section and bullet patterns stay simple.
"""

import unicodedata

# Unicode replacements: problematic char -> ASCII equivalent
UNICODE_REPLACEMENTS = {
    # Spaces
    "\u00a0": " ",  # non-breaking space
    "\u202f": " ",  # narrow no-break space
    # Zero-width characters -> remove
    "\u200b": "",  # zero-width space
    "\u200c": "",  # zero-width non-joiner
    "\u200d": "",  # zero-width joiner
    "\u2060": "",  # word joiner
    "\ufeff": "",  # BOM
    # Quotes (German low quotes included)
    "\u2018": "'",
    "\u2019": "'",
    "\u201a": "'",
    "\u201c": '"',
    "\u201d": '"',
    "\u201e": '"',
    # Dashes
    "\u2013": "-",  # en dash
    "\u2014": "-",  # em dash, often used as a bullet
    # Bullets
    "\u2022": "*",  # bullet
    "\u00b7": "*",  # middle dot
    "\u25aa": "*",  # small black square
    "\u25cf": "*",  # black circle
    "\u25e6": "*",  # white bullet
    "\u2023": "*",  # triangular bullet
    "\u2043": "*",  # hyphen bullet
    "\u2026": "...",
}


def normalize_unicode(text: str) -> str:
    """
    Normalize unicode characters that break section and bullet parsing.

    Applies NFC normalization (keeps umlauts composed) and replaces common
    problematic characters with ASCII equivalents.

    Args:
        text: Raw posting text

    Returns:
        Text with normalized unicode
    """
    text = unicodedata.normalize("NFC", text)

    for char, replacement in UNICODE_REPLACEMENTS.items():
        text = text.replace(char, replacement)

    return text


def preprocess_posting(text: str) -> str:
    """
    Preprocess a posting before section extraction.

    Handles:
    - Unicode normalization (spaces, quotes, bullet glyphs)
    - Windows/Mac line endings

    Args:
        text: Raw posting text (markdown or plain)

    Returns:
        Normalized text with "\\n" line endings
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return normalize_unicode(text)
