"""Application configuration and constants."""
from __future__ import annotations

import os
from dataclasses import dataclass


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value is not None else default


def _split_ids(raw: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in raw.split(",") if part.strip())


@dataclass(frozen=True)
class Settings:
    """Simple settings container with environment variable overrides."""

    amazon_tag: str = _get_env("AMAZON_TAG", "")
    amazon_base_url: str = _get_env("AMAZON_BASE_URL", "https://www.amazon.in")
    video_ids: tuple[str, ...] = _split_ids(_get_env("VIDEO_IDS", _get_env("VIDEO_ID", "")))
    max_results: int = int(_get_env("MAX_RESULTS", "50"))
    knowledge_base_path: str = _get_env("KNOWLEDGE_BASE_PATH", "")
    log_level: str = _get_env("LOG_LEVEL", "INFO")


settings = Settings()
