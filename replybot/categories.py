"""Product categories, the recommendation knowledge base and the classifier.

The knowledge base is a small static table: each category owns an ordered
list of recommendations that are rendered in stored order. It can be replaced
at process start from a JSON file of the form::

    {"earphones": [{"display_name": "...", "reason_phrase": "..."}], ...}

and is never mutated afterwards.
"""
from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

logger = logging.getLogger(__name__)


class ProductCategory(str, Enum):
    PHONE = "phone"
    EARPHONES = "earphones"
    LAPTOP = "laptop"
    CLOTHES = "clothes"
    HOME = "home"
    UNKNOWN = "unknown"


KNOWN_CATEGORIES: tuple[ProductCategory, ...] = tuple(
    category for category in ProductCategory if category is not ProductCategory.UNKNOWN
)


@dataclass(frozen=True)
class Recommendation:
    display_name: str
    reason_phrase: str


KnowledgeBase = Mapping[ProductCategory, tuple[Recommendation, ...]]

# Evaluation order matters: "earphones" contains "phone", so audio goes first.
CATEGORY_CUES: tuple[tuple[ProductCategory, tuple[str, ...]], ...] = (
    (
        ProductCategory.EARPHONES,
        (
            "earphone",
            "earbud",
            "headphone",
            "headset",
            "neckband",
            "airpods",
            "tws",
            "ईयरफोन",
            "हेडफोन",
        ),
    ),
    (
        ProductCategory.PHONE,
        ("phone", "smartphone", "iphone", "mobile", "फोन", "मोबाइल"),
    ),
    (
        ProductCategory.LAPTOP,
        ("laptop", "notebook", "macbook", "chromebook", "लैपटॉप"),
    ),
    (
        ProductCategory.CLOTHES,
        (
            "clothes",
            "shirt",
            "t-shirt",
            "tshirt",
            "jeans",
            "kurta",
            "kurti",
            "saree",
            "dress",
            "jacket",
            "hoodie",
            "shoe",
            "kapde",
            "कपड़े",
        ),
    ),
    (
        ProductCategory.HOME,
        (
            "home",
            "kitchen",
            "mixer",
            "cooker",
            "bedsheet",
            "curtain",
            "lamp",
            "fan",
            "ghar",
            "घर",
        ),
    ),
)


def _cue_pattern(cues: tuple[str, ...]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(cue) for cue in sorted(cues, key=len, reverse=True))
    return re.compile(r"(?<!\w)(?:" + alternatives + r")(?:s|es)?(?!\w)")


_CATEGORY_PATTERNS = tuple((category, _cue_pattern(cues)) for category, cues in CATEGORY_CUES)


def classify_need(need: Optional[str]) -> ProductCategory:
    """Map a need phrase to a category; ``UNKNOWN`` when no cue matches."""

    if not need:
        return ProductCategory.UNKNOWN
    lowered = need.lower()
    for category, pattern in _CATEGORY_PATTERNS:
        if pattern.search(lowered):
            logger.debug("classify_need need=%r category=%s", need, category.value)
            return category
    logger.debug("classify_need need=%r category=unknown", need)
    return ProductCategory.UNKNOWN


DEFAULT_KNOWLEDGE_BASE: KnowledgeBase = MappingProxyType(
    {
        ProductCategory.PHONE: (
            Recommendation("Redmi Note series", "value for money, bada battery backup"),
            Recommendation("Samsung Galaxy M series", "reliable brand, achha display"),
            Recommendation("Realme Narzo series", "gaming ke liye smooth performance"),
        ),
        ProductCategory.EARPHONES: (
            Recommendation("boAt Airdopes", "budget TWS, punchy bass"),
            Recommendation("Noise Buds", "lambi battery life, low latency"),
            Recommendation("OnePlus Nord Buds", "clear calls, balanced sound"),
        ),
        ProductCategory.LAPTOP: (
            Recommendation("Lenovo IdeaPad", "students aur office work ke liye solid"),
            Recommendation("HP Victus", "entry level gaming ke liye best"),
            Recommendation("ASUS VivoBook", "light weight, achhi build quality"),
        ),
        ProductCategory.CLOTHES: (
            Recommendation("Allen Solly shirts", "office wear ke liye classy"),
            Recommendation("Levi's jeans", "durable aur comfortable fit"),
            Recommendation("Biba kurta", "festive aur daily wear dono ke liye"),
        ),
        ProductCategory.HOME: (
            Recommendation("Prestige kitchen appliances", "trusted brand, long lasting"),
            Recommendation("Bajaj fans aur mixers", "service network har jagah"),
            Recommendation("Wakefit bedsheets", "soft fabric, value for money"),
        ),
    }
)


def _parse_entries(category: str, entries: object) -> tuple[Recommendation, ...]:
    if not isinstance(entries, list):
        raise ValueError(f"Recommendations for {category!r} must be a list")
    parsed: list[Recommendation] = []
    for entry in entries:
        if not isinstance(entry, dict) or not entry.get("display_name"):
            raise ValueError(f"Invalid recommendation for {category!r}: {entry!r}")
        parsed.append(Recommendation(str(entry["display_name"]), str(entry.get("reason_phrase", ""))))
    return tuple(parsed)


def load_knowledge_base(path: str | Path | None = None) -> KnowledgeBase:
    """Load recommendations from ``path``; the built-in table when no path is given."""

    if not path:
        return DEFAULT_KNOWLEDGE_BASE
    kb_path = Path(path)
    with kb_path.open("r", encoding="utf-8") as fh:
        raw = json.load(fh)
    if not isinstance(raw, dict):
        raise ValueError(f"Knowledge base {kb_path} must be a JSON object")

    knowledge_base: dict[ProductCategory, tuple[Recommendation, ...]] = {}
    for name, entries in raw.items():
        try:
            category = ProductCategory(name)
        except ValueError:
            raise ValueError(f"Unknown category {name!r} in {kb_path}") from None
        if category is ProductCategory.UNKNOWN:
            raise ValueError(f"Category 'unknown' cannot own recommendations ({kb_path})")
        knowledge_base[category] = _parse_entries(name, entries)
    logger.info("Loaded %s categories from %s", len(knowledge_base), kb_path)
    return MappingProxyType(knowledge_base)
