"""Affiliate link construction.

Every outbound link carries the tracking tag. A missing tag is a deployment
problem, so :class:`LinkBuilder` raises instead of handing out untagged links.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote, urlencode

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.amazon.in"
# Literal placeholder left behind by copy-pasted env templates.
TAG_PLACEHOLDER = "AMAZON_TAG"


class ConfigurationMissing(RuntimeError):
    """Raised when a link is requested without a usable tracking tag."""


@dataclass(frozen=True)
class LinkBuilder:
    tag: str
    base_url: str = DEFAULT_BASE_URL

    def _require_tag(self) -> str:
        tag = (self.tag or "").strip()
        if not tag or tag == TAG_PLACEHOLDER:
            raise ConfigurationMissing("AMAZON_TAG is not configured; refusing to build an untagged link")
        return tag

    @property
    def configured(self) -> bool:
        tag = (self.tag or "").strip()
        return bool(tag) and tag != TAG_PLACEHOLDER

    def product_link(self, product_ref: str) -> str:
        tag = self._require_tag()
        return f"{self.base_url.rstrip('/')}/dp/{quote(product_ref)}?{urlencode({'tag': tag})}"

    def search_link(self, need: str, budget: Optional[int] = None) -> str:
        tag = self._require_tag()
        query_parts = []
        if need and need.strip():
            query_parts.append(need.strip())
        if budget is not None:
            query_parts.append(f"under {budget} rupees")
        params = {}
        if query_parts:
            params["k"] = " ".join(query_parts)
        params["tag"] = tag
        link = f"{self.base_url.rstrip('/')}/s?{urlencode(params)}"
        logger.debug("search_link need=%r budget=%s -> %s", need, budget, link)
        return link
