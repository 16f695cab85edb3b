"""Text helpers shared by the extraction steps.

Comments arrive as short, loosely written Hinglish with a mix of Latin and
Devanagari script. :func:`normalize_text` prepares a copy for number matching
(no currency symbols, no thousands separators, single spaces) while keeping
the original casing, because the need phrase shown back to the user is cut
from the same text.
"""
from __future__ import annotations

import logging
import re
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")
# Rupee sign and thousands separators ("₹49,990" -> "49990").
_CURRENCY_AND_SEPARATORS_RE = re.compile(r"[₹,]")

# Phrases removed from a need candidate. Multi-word entries come first so
# "ke under" is stripped as a unit before "under" alone.
FILLER_PHRASES: tuple[str, ...] = (
    "ke under",
    "bata dijiye",
    "bata do",
    "suggest karo",
    "tell me",
    "bataiye",
    "batao",
    "under",
    "please",
    "kindly",
    "plz",
    "pls",
    "pl",
)


def collapse_whitespace(text: str) -> str:
    """Collapse whitespace runs to a single space and trim."""
    return _WHITESPACE_RE.sub(" ", text or "").strip()


def normalize_text(text: Optional[str]) -> str:
    """Normalize raw comment text before budget matching.

    1. Collapse every whitespace run to one space.
    2. Drop the rupee sign and thousands-separator commas.
    3. Trim.

    Casing is left untouched and the function is idempotent.
    """

    if not text:
        return ""
    collapsed = _WHITESPACE_RE.sub(" ", text)
    stripped = _CURRENCY_AND_SEPARATORS_RE.sub("", collapsed)
    normalized = collapse_whitespace(stripped)
    logger.debug("normalize_text raw=%r normalized=%r", text, normalized)
    return normalized


def _word_pattern(phrase: str) -> re.Pattern[str]:
    parts = [re.escape(part) for part in phrase.split()]
    return re.compile(r"\b" + r"\s+".join(parts) + r"\b", re.IGNORECASE)


_FILLER_PATTERNS = tuple(_word_pattern(phrase) for phrase in FILLER_PHRASES)


def remove_words(text: str, phrases: Iterable[str]) -> str:
    """Remove whole-word, case-insensitive occurrences of ``phrases``."""
    cleaned = text
    for phrase in phrases:
        cleaned = _word_pattern(phrase).sub(" ", cleaned)
    return collapse_whitespace(cleaned)


def strip_fillers(text: str) -> str:
    cleaned = text
    for pattern in _FILLER_PATTERNS:
        cleaned = pattern.sub(" ", cleaned)
    return collapse_whitespace(cleaned)
