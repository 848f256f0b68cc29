"""
Job posting text normalizer for the Intake context.

Postings are usually copied out of web pages and carry typographic characters
(smart quotes, non-breaking spaces, unicode bullets) that break literal phrase
matching. Normalize BEFORE extraction so every later step sees plain text.
"""

import re
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
    "\ufeff": "",  # BOM / zero-width no-break space
    # Quotes
    "\u2018": "'",  # left single quote
    "\u2019": "'",  # right single quote
    "\u201c": '"',  # left double quote
    "\u201d": '"',  # right double quote
    # Dashes
    "\u2013": "-",  # en dash
    "\u2014": "-",  # em dash
    # Bullets and misc
    "\u2022": "- ",  # bullet
    "\u25aa": "- ",  # small black square
    "\u25cf": "- ",  # black circle
    "\u00b7": "- ",  # middle dot (used as bullet)
    "\u2026": "...",  # ellipsis
}


def normalize_unicode(text: str) -> str:
    """
    Normalize unicode characters that cause matching issues.

    Applies NFKC normalization and replaces common problematic characters
    with ASCII equivalents. Unicode bullets become "- " so they read as
    ordinary list items downstream.

    Args:
        text: Raw posting text

    Returns:
        Text with problematic characters replaced
    """
    text = unicodedata.normalize("NFKC", text)
    for char, replacement in UNICODE_REPLACEMENTS.items():
        text = text.replace(char, replacement)
    return text


def normalize_line_endings(text: str) -> str:
    """Convert CRLF / CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def preprocess_posting_text(text) -> str:
    """
    Prepare raw posting text for extraction.

    Never raises: None and non-string values are treated as empty / coerced to str.

    Args:
        text: Raw posting text (may be None)

    Returns:
        Normalized text with LF line endings and trailing whitespace stripped per line
    """
    if text is None:
        return ""
    if not isinstance(text, str):
        text = str(text)

    text = normalize_line_endings(normalize_unicode(text))
    return "\n".join(re.sub(r"[ \t]+$", "", line) for line in text.split("\n"))
