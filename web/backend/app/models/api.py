"""Pydantic models for API request/response serialization.

These models mirror the reviewdesk dataclasses and fix the JSON shapes
exchanged with clients. Server-derived fields (moderation flags, response
threads, response timestamps) are never read from submissions.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Responses (thread entries)
# ---------------------------------------------------------------------------


class CommentResponse(BaseModel):
    """Mirrors reviewdesk.content.models.Comment."""

    user_id: str
    text: str
    timestamp: int
    flagged: bool = False
    moderated: bool = False


class AnswerResponse(BaseModel):
    """Mirrors reviewdesk.content.models.Answer."""

    seller_id: str
    response: str
    timestamp: int
    flagged: bool = False
    moderated: bool = False


# ---------------------------------------------------------------------------
# Items
# ---------------------------------------------------------------------------


class ReviewResponse(BaseModel):
    """Mirrors reviewdesk.content.models.Review."""

    product_id: str
    user_id: str
    rating: int
    comment: str
    comments: Optional[list[CommentResponse]] = None
    flagged: bool = False
    moderated: bool = False


class QuestionResponse(BaseModel):
    """Mirrors reviewdesk.content.models.Question."""

    product_id: str
    user_id: str
    seller_id: str
    query: str
    timestamp: int
    answers: Optional[list[AnswerResponse]] = None
    flagged: bool = False
    moderated: bool = False


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


class CreateReviewRequest(BaseModel):
    """Request body for submitting a review."""

    product_id: str
    user_id: str
    rating: int = 0
    comment: str = ""


class CreateQuestionRequest(BaseModel):
    """Request body for submitting a question.

    ``timestamp`` may be omitted, in which case the server stamps it.
    """

    product_id: str
    user_id: str
    seller_id: str = ""
    query: str = ""
    timestamp: int = 0


class AddCommentRequest(BaseModel):
    """Comment on the first review of ``product_id``, written by ``user_id``."""

    product_id: str
    user_id: str
    text: str


class AddAnswerRequest(BaseModel):
    """Answer identifying its question by all four key fields."""

    product_id: str
    user_id: str
    query: str
    seller_id: str
    response: str


class FlagRequest(BaseModel):
    """Report the item written by ``user_id`` on ``product_id``."""

    product_id: str
    user_id: str


class ModerationRequest(BaseModel):
    """Moderator decision. Values other than approve/remove are ignored."""

    product_id: str
    user_id: str
    action: str = Field(default="", description='"approve" or "remove"')


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str
