"""The full text -> reply pipeline."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .categories import KnowledgeBase, ProductCategory, classify_need, load_knowledge_base
from .config import Settings
from .extractor import ParsedRequest, extract_request
from .links import LinkBuilder
from .policy import ReplyDecision, decide
from .replies import compose_reply, primary_link

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReplyPlan:
    text: str
    request: Optional[ParsedRequest]
    category: ProductCategory
    decision: ReplyDecision


@dataclass(frozen=True)
class Responder:
    links: LinkBuilder
    knowledge_base: KnowledgeBase

    @classmethod
    def from_settings(cls, settings: Settings) -> "Responder":
        links = LinkBuilder(tag=settings.amazon_tag, base_url=settings.amazon_base_url)
        if not links.configured:
            logger.warning("AMAZON_TAG missing or placeholder; replies with links will fail")
        return cls(links=links, knowledge_base=load_knowledge_base(settings.knowledge_base_path or None))

    def plan(self, text: str) -> ReplyPlan:
        request = extract_request(text)
        category = classify_need(request.need) if request else ProductCategory.UNKNOWN
        decision = decide(request, self.knowledge_base, category)
        return ReplyPlan(text=text, request=request, category=category, decision=decision)

    def render(self, plan: ReplyPlan) -> str:
        return compose_reply(plan.decision, self.links)

    def respond(self, text: str) -> str:
        """Reply for ``text``; raises ``ConfigurationMissing`` when links cannot be tagged."""
        return self.render(self.plan(text))

    def link_for(self, plan: ReplyPlan) -> Optional[str]:
        return primary_link(plan.decision, self.links)
