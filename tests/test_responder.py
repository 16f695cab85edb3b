"""End-to-end pipeline from comment text to reply."""

from replybot.categories import ProductCategory
from replybot.config import Settings
from replybot.responder import Responder


def test_respond_builds_top_picks(responder):
    reply = responder.respond("gaming laptop under 50000 please")
    assert 'Aapki requirement: "gaming laptop"' in reply
    assert "₹50,000" in reply
    assert "1. Lenovo IdeaPad" in reply


def test_plan_exposes_each_step(responder):
    plan = responder.plan("earphones 1500 ke under")
    assert plan.request.need == "earphones"
    assert plan.request.budget == 1500
    assert plan.category is ProductCategory.EARPHONES
    assert plan.decision.kind == "suggest_top_n"


def test_unparseable_text_gets_clarification(responder):
    plan = responder.plan("please")
    assert plan.request is None
    assert plan.decision.kind == "ask_category_and_budget"
    assert "budget" in responder.render(plan)


def test_from_settings_uses_tag_and_base_url():
    responder = Responder.from_settings(Settings(amazon_tag="abc-21", amazon_base_url="https://example.test"))
    assert responder.links.configured
    assert responder.links.search_link("phone").startswith("https://example.test/s?")
    assert set(responder.knowledge_base) == set(ProductCategory) - {ProductCategory.UNKNOWN}


def test_from_settings_without_tag_still_builds(caplog):
    responder = Responder.from_settings(Settings(amazon_tag="", knowledge_base_path=""))
    assert not responder.links.configured
    assert "AMAZON_TAG missing" in caplog.text
