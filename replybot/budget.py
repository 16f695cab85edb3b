"""Budget detection for normalized comment text.

Budgets are written in many ways: ``2500``, ``2.5k``, ``2 K``, ``2k ke under``,
``under 2500``, ``2 हज़ार``, ``1.5 lakh``. The matcher rules below are tried in
a fixed order and the first one that matches wins; the generic rule accepts
the first standalone number anywhere in the text, so a stray model number can
still be taken as the budget.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

logger = logging.getLogger(__name__)

THOUSAND = 1000
LAKH = 100000

# "हज़ार" is written either with the precomposed nukta letter or with a
# separate nukta sign; both spellings are accepted.
UNIT_MULTIPLIERS: dict[str, int] = {
    "k": THOUSAND,
    "thousand": THOUSAND,
    "thousands": THOUSAND,
    "\u0939\u091c\u093c\u093e\u0930": THOUSAND,
    "\u0939\u095b\u093e\u0930": THOUSAND,
    "lakh": LAKH,
    "lakhs": LAKH,
    "lac": LAKH,
    "lacs": LAKH,
    "\u0932\u093e\u0916": LAKH,
}

_NUMBER = r"(?P<number>[0-9]+(?:\.[0-9]+)?)"
_UNIT = r"(?:\s*(?P<unit>{}))?".format(
    "|".join(re.escape(unit) for unit in sorted(UNIT_MULTIPLIERS, key=len, reverse=True))
)
_AMOUNT = _NUMBER + _UNIT


@dataclass(frozen=True)
class NumberMatch:
    raw_match: str
    value: Decimal
    multiplier: int
    rule: str = "generic"

    @property
    def amount(self) -> int:
        """Budget in whole rupees, rounded half up."""
        return int((self.value * self.multiplier).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class MatcherRule:
    name: str
    pattern: re.Pattern[str]

    def match(self, text: str) -> Optional[NumberMatch]:
        found = self.pattern.search(text)
        if not found:
            return None
        return NumberMatch(
            raw_match=found.group(0),
            value=Decimal(found.group("number")),
            multiplier=unit_multiplier(found.group("unit")),
            rule=self.name,
        )


MATCHER_RULES: tuple[MatcherRule, ...] = (
    MatcherRule("under_prefix", re.compile(r"\bunder\s+" + _AMOUNT + r"\b", re.IGNORECASE)),
    MatcherRule("ke_under_suffix", re.compile(r"\b" + _AMOUNT + r"\s+ke\s+under\b", re.IGNORECASE)),
    MatcherRule("ke_suffix", re.compile(r"\b" + _AMOUNT + r"\s+ke\b", re.IGNORECASE)),
    MatcherRule("generic", re.compile(r"\b" + _AMOUNT + r"\b", re.IGNORECASE)),
)


def unit_multiplier(unit_token: Optional[str]) -> int:
    if not unit_token:
        return 1
    return UNIT_MULTIPLIERS.get(unit_token.lower(), 1)


def parse_number_with_unit(normalized: str) -> Optional[NumberMatch]:
    """Return the best budget expression in ``normalized`` or ``None``."""

    if not normalized:
        return None
    for rule in MATCHER_RULES:
        match = rule.match(normalized)
        if match is not None:
            logger.debug(
                "budget rule=%s raw=%r value=%s multiplier=%s",
                rule.name,
                match.raw_match,
                match.value,
                match.multiplier,
            )
            return match
    logger.debug("no budget expression in %r", normalized)
    return None
