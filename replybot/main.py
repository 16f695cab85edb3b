"""FastAPI application wiring the reply pipeline."""
from __future__ import annotations

import logging
from typing import List

from fastapi import FastAPI, HTTPException

from .comments import CommentThread, InMemoryCommentSource, run_pass
from .config import settings
from .links import ConfigurationMissing
from .models import (
    CheckCommentsRequest,
    CheckCommentsResponse,
    ReplyAction,
    ReplyPreviewRequest,
    ReplyPreviewResponse,
)
from .responder import Responder

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVEL = logging.getLevelName(settings.log_level.upper())

# ``force=True`` replaces uvicorn's default handlers so pipeline logs share
# one format.
logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, force=True)
for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
    logging.getLogger(name).setLevel(LOG_LEVEL)

logger = logging.getLogger(__name__)
logger.info("Logging configured at %s", settings.log_level.upper())

app = FastAPI(title="Comment Reply Bot")
responder = Responder.from_settings(settings)


@app.get("/")
async def root() -> str:
    return "Comment reply bot is running."


@app.get("/health")
async def health() -> dict:
    return {
        "status": "ok",
        "tag_configured": responder.links.configured,
        "videos": len(settings.video_ids),
        "categories": sorted(category.value for category in responder.knowledge_base),
    }


@app.post("/check-comments", response_model=CheckCommentsResponse)
async def check_comments(payload: CheckCommentsRequest) -> CheckCommentsResponse:
    source = InMemoryCommentSource(
        {
            video_id: [
                CommentThread(comment.id, comment.text, comment.already_answered)
                for comment in comments
            ]
            for video_id, comments in payload.videos.items()
        }
    )
    video_ids = payload.video_ids or list(settings.video_ids) or list(payload.videos)
    result = run_pass(source, video_ids, responder, max_results=settings.max_results)
    replies: List[ReplyAction] = [
        ReplyAction(
            videoId=record.video_id,
            commentId=record.comment_id,
            originalComment=record.original_comment,
            need=record.need,
            budget=record.budget,
            decision=record.decision,
            reply=record.reply,
            affiliateLink=record.link,
        )
        for record in result.replies
    ]
    return CheckCommentsResponse(
        processedComments=result.processed,
        skippedComments=result.skipped,
        failedComments=result.failed,
        replies=replies,
    )


@app.post("/reply", response_model=ReplyPreviewResponse)
async def preview_reply(payload: ReplyPreviewRequest) -> ReplyPreviewResponse:
    if not payload.text.strip():
        raise HTTPException(status_code=400, detail="Text must not be empty")
    plan = responder.plan(payload.text)
    try:
        reply = responder.render(plan)
    except ConfigurationMissing as exc:
        logger.error("Cannot build reply links: %s", exc)
        raise HTTPException(status_code=503, detail="Reply links are not configured") from None
    request = plan.request
    return ReplyPreviewResponse(
        text=payload.text,
        need=request.need if request else None,
        budget=request.budget if request else None,
        productRef=request.product_ref if request else None,
        category=plan.category.value,
        decision=plan.decision.kind,
        reply=reply,
    )
