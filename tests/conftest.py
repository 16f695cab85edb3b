"""Shared fixtures for the reply pipeline tests."""

import pytest

from replybot.categories import load_knowledge_base
from replybot.links import LinkBuilder
from replybot.responder import Responder

TEST_TAG = "test-21"


@pytest.fixture
def links() -> LinkBuilder:
    return LinkBuilder(tag=TEST_TAG)


@pytest.fixture
def knowledge_base():
    return load_knowledge_base()


@pytest.fixture
def responder(links, knowledge_base) -> Responder:
    return Responder(links=links, knowledge_base=knowledge_base)
