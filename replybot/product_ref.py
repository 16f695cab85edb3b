"""Marketplace product references pasted into comments."""
from __future__ import annotations

import logging
import re
from typing import Optional

from .normalize import collapse_whitespace

logger = logging.getLogger(__name__)

# /dp/B0C1X2Y3Z4 or /gp/product/B0C1X2Y3Z4; the reference keeps its case.
PRODUCT_REF_RE = re.compile(r"/(?:dp|gp/product)/([A-Za-z0-9]{10})(?![A-Za-z0-9])", re.IGNORECASE)
PRODUCT_URL_RE = re.compile(r"\S*/(?:dp|gp/product)/[A-Za-z0-9]{10}(?![A-Za-z0-9])\S*", re.IGNORECASE)


def extract_product_ref(text: Optional[str]) -> Optional[str]:
    if not text:
        return None
    match = PRODUCT_REF_RE.search(text)
    if not match:
        return None
    logger.debug("product reference %s found", match.group(1))
    return match.group(1)


def strip_product_urls(text: str) -> str:
    """Drop pasted product URLs so their digits never read as a budget."""
    return collapse_whitespace(PRODUCT_URL_RE.sub(" ", text or ""))
