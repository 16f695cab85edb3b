"""HTTP surface."""

import pytest
from fastapi.testclient import TestClient

from replybot import main
from replybot.config import Settings
from replybot.links import LinkBuilder
from replybot.responder import Responder


@pytest.fixture
def client(monkeypatch, responder):
    monkeypatch.setattr(main, "responder", responder)
    monkeypatch.setattr(main, "settings", Settings(video_ids=()))
    return TestClient(main.app)


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200


def test_health_reports_configuration(client):
    body = client.get("/health").json()
    assert body["status"] == "ok"
    assert body["tag_configured"] is True
    assert "earphones" in body["categories"]


def test_reply_preview(client):
    response = client.post("/reply", json={"text": "gaming laptop under 50000 please"})
    assert response.status_code == 200
    body = response.json()
    assert body["need"] == "gaming laptop"
    assert body["budget"] == 50000
    assert body["category"] == "laptop"
    assert body["decision"] == "suggest_top_n"
    assert "tag=test-21" in body["reply"]


def test_reply_preview_rejects_empty_text(client):
    assert client.post("/reply", json={"text": "   "}).status_code == 400


def test_reply_preview_hides_configuration_details(monkeypatch, knowledge_base):
    monkeypatch.setattr(main, "responder", Responder(links=LinkBuilder(tag=""), knowledge_base=knowledge_base))
    response = TestClient(main.app).post("/reply", json={"text": "phone under 10000"})
    assert response.status_code == 503
    assert response.json()["detail"] == "Reply links are not configured"


def test_check_comments_runs_one_pass(client):
    payload = {
        "videos": {
            "abc": [
                {"id": "c1", "text": "phone under 12k"},
                {"id": "c2", "text": "please"},
                {"id": "c3", "text": "laptop under 40000", "already_answered": True},
            ]
        }
    }
    body = client.post("/check-comments", json=payload).json()
    assert body["status"] == "ok"
    assert body["processedComments"] == 1
    assert body["skippedComments"] == 1
    assert body["failedComments"] == 0
    reply = body["replies"][0]
    assert reply["commentId"] == "c1"
    assert reply["budget"] == 12000
    assert reply["decision"] == "suggest_top_n"
    assert reply["videoId"] == "abc"
    assert reply["affiliateLink"] == "https://www.amazon.in/s?k=Redmi+Note+series+under+12000+rupees&tag=test-21"


def _two_videos():
    return {
        "v1": [{"id": "a1", "text": "earphones 1500 ke under"}],
        "v2": [
            {"id": "b1", "text": "phone chahiye"},
            {"id": "b2", "text": "gaming laptop under 50000"},
        ],
    }


def test_check_comments_covers_every_video_in_payload(client):
    body = client.post("/check-comments", json={"videos": _two_videos()}).json()
    assert body["processedComments"] == 3
    assert [(r["videoId"], r["commentId"]) for r in body["replies"]] == [
        ("v1", "a1"),
        ("v2", "b1"),
        ("v2", "b2"),
    ]
    ask_budget = body["replies"][1]
    assert ask_budget["decision"] == "ask_budget"
    assert ask_budget["affiliateLink"] is None


def test_check_comments_honours_requested_video_ids(client):
    body = client.post("/check-comments", json={"videos": _two_videos(), "video_ids": ["v2"]}).json()
    assert body["processedComments"] == 2
    assert {r["videoId"] for r in body["replies"]} == {"v2"}


def test_check_comments_defaults_to_configured_videos(client, monkeypatch):
    monkeypatch.setattr(main, "settings", Settings(video_ids=("v1", "missing")))
    body = client.post("/check-comments", json={"videos": _two_videos()}).json()
    assert body["processedComments"] == 1
    assert body["replies"][0]["videoId"] == "v1"
