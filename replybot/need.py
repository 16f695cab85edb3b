"""Need extraction: what the commenter wants once the budget is cut out.

Comments are short and grammatically loose, so removing the budget phrase and
a handful of filler words often leaves nothing behind ("under 5000 pls"). In
that case :func:`capture_window` looks at the words around the budget phrase
in the normalized text and keeps whatever describes the product.
"""
from __future__ import annotations

import logging
import re
from typing import Optional

from .normalize import collapse_whitespace, remove_words, strip_fillers

logger = logging.getLogger(__name__)

MIN_NEED_LENGTH = 2
WORDS_BEFORE = 4
WORDS_AFTER = 6

_TOKEN_RE = re.compile(r"[A-Za-z0-9\u0900-\u097F]+")
_PARTICLES = ("ke", "under")


def _remove_first(text: str, phrase: str) -> Optional[str]:
    """Remove the first case-insensitive ``phrase``; ``None`` when absent."""
    match = re.search(re.escape(phrase), text, re.IGNORECASE)
    if not match:
        return None
    return text[: match.start()] + " " + text[match.end():]


def capture_window(normalized: str, raw_match: str) -> str:
    """Words around ``raw_match`` without the budget phrase and its particles."""

    match = re.search(re.escape(raw_match), normalized, re.IGNORECASE)
    if not match:
        return ""
    before = _TOKEN_RE.findall(normalized[: match.start()])[-WORDS_BEFORE:]
    after = _TOKEN_RE.findall(normalized[match.end():])[:WORDS_AFTER]
    candidate = " ".join(before + after)
    return remove_words(candidate, _PARTICLES)


def extract_need(original: str, normalized: str, raw_match: Optional[str] = None) -> str:
    """Return the need phrase, or ``""`` when nothing usable is left.

    ``raw_match`` is the budget phrase as it appears in ``normalized``. It is
    removed from the original text so the user's casing and script survive;
    when normalization changed the phrase (``₹5,000``) the normalized text is
    used instead.
    """

    if not raw_match:
        return strip_fillers(original or "")

    residual = _remove_first(original or "", raw_match)
    if residual is None:
        residual = _remove_first(normalized, raw_match) or ""
    need = strip_fillers(residual)

    if len(need) < MIN_NEED_LENGTH:
        candidate = capture_window(normalized, raw_match)
        logger.debug("need %r too short, window candidate=%r", need, candidate)
        if candidate and len(candidate) > len(need):
            need = candidate

    return collapse_whitespace(need)
