"""Comment sources and the one-pass reply loop.

The platform client that lists comment threads and posts replies lives
outside this package; anything implementing :class:`CommentSource` can be
plugged in. :class:`InMemoryCommentSource` serves the HTTP endpoint, the CLI
and the tests.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Protocol

from .links import ConfigurationMissing
from .responder import Responder

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommentThread:
    comment_id: str
    text: str
    already_answered: bool = False


class CommentSource(Protocol):
    def fetch_comments(self, video_id: str, max_results: int) -> List[CommentThread]: ...

    def post_reply(self, comment_id: str, text: str) -> None: ...


class InMemoryCommentSource:
    def __init__(self, threads: Optional[Dict[str, Iterable[CommentThread]]] = None) -> None:
        self._threads: Dict[str, List[CommentThread]] = {
            video_id: list(items) for video_id, items in (threads or {}).items()
        }
        self.posted: Dict[str, str] = {}
        self._lock = threading.Lock()

    def add(self, video_id: str, thread: CommentThread) -> None:
        with self._lock:
            self._threads.setdefault(video_id, []).append(thread)

    def fetch_comments(self, video_id: str, max_results: int) -> List[CommentThread]:
        with self._lock:
            return list(self._threads.get(video_id, []))[:max_results]

    def post_reply(self, comment_id: str, text: str) -> None:
        with self._lock:
            self.posted[comment_id] = text
            for video_id, items in self._threads.items():
                self._threads[video_id] = [
                    CommentThread(item.comment_id, item.text, True) if item.comment_id == comment_id else item
                    for item in items
                ]


@dataclass(frozen=True)
class ReplyRecord:
    comment_id: str
    original_comment: str
    need: Optional[str]
    budget: Optional[int]
    decision: str
    reply: str
    link: Optional[str] = None
    video_id: str = ""


@dataclass
class PassResult:
    replies: List[ReplyRecord] = field(default_factory=list)
    skipped: int = 0
    failed: int = 0

    @property
    def processed(self) -> int:
        return len(self.replies)


def _handle_thread(source: CommentSource, responder: Responder, video_id: str, thread: CommentThread) -> Optional[ReplyRecord]:
    plan = responder.plan(thread.text)
    request = plan.request
    if request is None:
        logger.info("Skip (no budget/need found): %r", thread.text)
        return None

    reply = responder.render(plan)
    link = responder.link_for(plan)

    logger.info("Replying to %s need=%r budget=%s", thread.comment_id, request.need, request.budget)
    source.post_reply(thread.comment_id, reply)
    return ReplyRecord(
        comment_id=thread.comment_id,
        original_comment=thread.text,
        need=request.need,
        budget=request.budget,
        decision=plan.decision.kind,
        reply=reply,
        link=link,
        video_id=video_id,
    )


def run_pass(
    source: CommentSource,
    video_ids: Iterable[str],
    responder: Responder,
    max_results: int = 50,
) -> PassResult:
    """Reply once to every unanswered comment of ``video_ids``.

    A failure on one comment or one video is logged and the pass moves on.
    """

    result = PassResult()
    for video_id in video_ids:
        try:
            threads = source.fetch_comments(video_id, max_results)
        except Exception:
            logger.exception("Failed to fetch comments for video %s", video_id)
            continue

        for thread in threads:
            if thread.already_answered:
                continue
            try:
                record = _handle_thread(source, responder, video_id, thread)
            except ConfigurationMissing as exc:
                logger.error("Configuration error for comment %s: %s", thread.comment_id, exc)
                result.failed += 1
                continue
            except Exception:
                logger.exception("Error processing comment %s", thread.comment_id)
                result.failed += 1
                continue
            if record is None:
                result.skipped += 1
            else:
                result.replies.append(record)

    logger.info(
        "Pass finished: replied=%s skipped=%s failed=%s",
        result.processed,
        result.skipped,
        result.failed,
    )
    return result
