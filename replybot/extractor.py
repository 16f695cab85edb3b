"""Combined extraction step: raw comment -> :class:`ParsedRequest`."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .budget import parse_number_with_unit
from .need import extract_need
from .normalize import normalize_text
from .product_ref import extract_product_ref, strip_product_urls

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedRequest:
    need: Optional[str]
    budget: Optional[int]
    product_ref: Optional[str] = None


def extract_request(text: Optional[str]) -> Optional[ParsedRequest]:
    """Parse a comment into need, budget and product reference.

    Returns ``None`` when neither a need nor a product reference survives
    extraction; a budget on its own ("under 5000") is not actionable.
    """

    if not text or not text.strip():
        return None

    product_ref = extract_product_ref(text)
    original = strip_product_urls(text) if product_ref else text
    normalized = normalize_text(original)

    number = parse_number_with_unit(normalized)
    budget = number.amount if number else None
    need = extract_need(original, normalized, number.raw_match if number else None)

    if not need and product_ref:
        need = f"product {product_ref}"
    if not need:
        logger.debug("no need or product reference in %r", text)
        return None

    parsed = ParsedRequest(need=need, budget=budget, product_ref=product_ref)
    logger.debug("extract_request text=%r parsed=%s", text, parsed)
    return parsed
