"""Pydantic models for request/response payloads."""
from __future__ import annotations

from pydantic import BaseModel, Field


class CommentIn(BaseModel):
    id: str = Field(..., description="Comment identifier on the platform")
    text: str = Field(..., description="Comment text as displayed")
    already_answered: bool = False


class CheckCommentsRequest(BaseModel):
    videos: dict[str, list[CommentIn]] = Field(
        default_factory=dict, description="Comment threads grouped by video id"
    )
    video_ids: list[str] | None = Field(
        None, description="Videos to process; defaults to VIDEO_IDS, then to every video in the payload"
    )


class ReplyAction(BaseModel):
    videoId: str
    commentId: str
    originalComment: str
    need: str | None = None
    budget: int | None = None
    decision: str
    reply: str
    affiliateLink: str | None = None


class CheckCommentsResponse(BaseModel):
    status: str = "ok"
    processedComments: int
    skippedComments: int
    failedComments: int
    replies: list[ReplyAction]


class ReplyPreviewRequest(BaseModel):
    text: str = Field(..., description="Comment text to answer")


class ReplyPreviewResponse(BaseModel):
    text: str
    need: str | None = None
    budget: int | None = None
    productRef: str | None = None
    category: str
    decision: str
    reply: str
