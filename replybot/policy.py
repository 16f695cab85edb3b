"""Reply policy: decide which kind of answer a parsed comment gets.

The checks run as a strict precedence chain:

1. nothing to go on (no parse, or no budget, no product reference and no
   recognizable category) -> ask for category and budget;
2. category unknown -> ask for the category;
3. budget missing -> ask for the budget;
4. ready -> top picks from the knowledge base, or a single search / product
   link when the knowledge base has nothing for the category.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from .categories import KnowledgeBase, ProductCategory, Recommendation, classify_need
from .extractor import ParsedRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AskForCategoryAndBudget:
    kind = "ask_category_and_budget"


@dataclass(frozen=True)
class AskForCategory:
    need: str
    budget: Optional[int] = None
    kind = "ask_category"


@dataclass(frozen=True)
class AskForBudget:
    need: str
    category: ProductCategory
    kind = "ask_budget"


@dataclass(frozen=True)
class SuggestTopN:
    need: str
    category: ProductCategory
    budget: int
    picks: tuple[Recommendation, ...]
    kind = "suggest_top_n"


@dataclass(frozen=True)
class SuggestFallback:
    need: str
    budget: Optional[int] = None
    product_ref: Optional[str] = None
    kind = "suggest_fallback"


ReplyDecision = Union[AskForCategoryAndBudget, AskForCategory, AskForBudget, SuggestTopN, SuggestFallback]


def decide(
    request: Optional[ParsedRequest],
    knowledge_base: KnowledgeBase,
    category: Optional[ProductCategory] = None,
) -> ReplyDecision:
    """Pick the reply strategy for ``request``.

    ``category`` may be passed when the caller already classified the need.
    """

    if request is None:
        return AskForCategoryAndBudget()
    if category is None:
        category = classify_need(request.need)

    need = request.need or ""
    if category is ProductCategory.UNKNOWN:
        if request.budget is None and request.product_ref is None:
            decision: ReplyDecision = AskForCategoryAndBudget()
        else:
            decision = AskForCategory(need=need, budget=request.budget)
    elif request.budget is None:
        decision = AskForBudget(need=need, category=category)
    else:
        picks = tuple(knowledge_base.get(category, ()))
        if picks:
            decision = SuggestTopN(need=need, category=category, budget=request.budget, picks=picks)
        else:
            logger.warning("No recommendations for category %s; using a single link", category.value)
            decision = SuggestFallback(need=need, budget=request.budget, product_ref=request.product_ref)

    logger.info("decide need=%r budget=%s category=%s -> %s", need, request.budget, category.value, decision.kind)
    return decision
