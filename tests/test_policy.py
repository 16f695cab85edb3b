"""Reply policy precedence."""

from replybot.categories import ProductCategory
from replybot.extractor import ParsedRequest, extract_request
from replybot.policy import (
    AskForBudget,
    AskForCategory,
    AskForCategoryAndBudget,
    SuggestFallback,
    SuggestTopN,
    decide,
)


def test_no_parse_asks_for_both(knowledge_base):
    assert decide(None, knowledge_base) == AskForCategoryAndBudget()


def test_no_number_and_no_reference_asks_for_both(knowledge_base):
    decision = decide(extract_request("kuch achha chahiye"), knowledge_base)
    assert isinstance(decision, AskForCategoryAndBudget)


def test_budget_without_category_asks_for_category(knowledge_base):
    decision = decide(extract_request("kuch achha 5000 mein"), knowledge_base)
    assert decision == AskForCategory(need="kuch achha mein", budget=5000)


def test_reference_without_category_asks_for_category(knowledge_base):
    decision = decide(extract_request("amazon.in/dp/B0C1X2Y3Z4"), knowledge_base)
    assert decision == AskForCategory(need="product B0C1X2Y3Z4", budget=None)


def test_known_category_without_budget_never_suggests(knowledge_base):
    decision = decide(extract_request("phone chahiye"), knowledge_base)
    assert decision == AskForBudget(need="phone chahiye", category=ProductCategory.PHONE)


def test_ready_suggests_top_picks_in_stored_order(knowledge_base):
    decision = decide(extract_request("phone under 15000"), knowledge_base)
    assert isinstance(decision, SuggestTopN)
    assert decision.category is ProductCategory.PHONE
    assert decision.budget == 15000
    assert decision.picks == knowledge_base[ProductCategory.PHONE]


def test_missing_recommendations_fall_back_to_search():
    request = ParsedRequest(need="gaming laptop", budget=50000)
    assert decide(request, {}) == SuggestFallback(need="gaming laptop", budget=50000, product_ref=None)


def test_missing_recommendations_with_reference_keep_it():
    request = ParsedRequest(need="phone B0C1X2Y3Z4", budget=20000, product_ref="B0C1X2Y3Z4")
    decision = decide(request, {ProductCategory.LAPTOP: ()})
    assert decision == SuggestFallback(need="phone B0C1X2Y3Z4", budget=20000, product_ref="B0C1X2Y3Z4")


def test_explicit_category_overrides_classification(knowledge_base):
    request = ParsedRequest(need="something", budget=1000)
    decision = decide(request, knowledge_base, ProductCategory.HOME)
    assert isinstance(decision, SuggestTopN)
    assert decision.category is ProductCategory.HOME


def test_decision_kinds():
    assert AskForCategoryAndBudget().kind == "ask_category_and_budget"
    assert AskForCategory(need="x").kind == "ask_category"
    assert SuggestFallback(need="x").kind == "suggest_fallback"
