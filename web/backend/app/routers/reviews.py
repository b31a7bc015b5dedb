"""Reviews router -- submission, comments, flagging and moderation of reviews."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from reviewdesk.content.models import Review
from reviewdesk.content.queries import all_items, by_author, for_product, moderation_queue
from reviewdesk.content.store import ReviewStore
from reviewdesk.errors import NotFoundError, RejectedError
from web.backend.app.dependencies import get_review_store
from web.backend.app.http_errors import not_found, rejected
from web.backend.app.models.api import (
    AddCommentRequest,
    CreateReviewRequest,
    FlagRequest,
    MessageResponse,
    ModerationRequest,
    ReviewResponse,
)

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.post(
    "",
    response_model=MessageResponse,
    summary="Submit a review",
    status_code=status.HTTP_201_CREATED,
)
def create_review(body: CreateReviewRequest, store: ReviewStore = Depends(get_review_store)):
    """Add a review. Rejected with 400 if the comment contains a banned word."""
    review = Review(
        product_id=body.product_id,
        user_id=body.user_id,
        rating=body.rating,
        comment=body.comment,
    )
    try:
        store.add(review)
    except RejectedError as exc:
        raise rejected(exc)
    return MessageResponse(message="review added")


@router.get(
    "",
    response_model=list[ReviewResponse],
    response_model_exclude_none=True,
    summary="List all reviews",
)
def list_reviews(
    product_id: Optional[str] = Query(None, description="Only reviews of this product"),
    user_id: Optional[str] = Query(None, description="Only reviews written by this user"),
    store: ReviewStore = Depends(get_review_store),
):
    """Return every review in submission order."""
    items = all_items(store)
    if product_id is not None:
        items = for_product(items, product_id)
    if user_id is not None:
        items = by_author(items, user_id)
    return [r.to_dict() for r in items]


@router.post(
    "/comment",
    response_model=MessageResponse,
    summary="Comment on a review",
    status_code=status.HTTP_201_CREATED,
)
def comment_on_review(body: AddCommentRequest, store: ReviewStore = Depends(get_review_store)):
    """Append a comment to the first review of the product."""
    try:
        store.add_comment(body.product_id, body.user_id, body.text)
    except RejectedError as exc:
        raise rejected(exc)
    except NotFoundError as exc:
        raise not_found(exc)
    return MessageResponse(message="comment added")


@router.post(
    "/flag",
    response_model=MessageResponse,
    summary="Flag a review for moderation",
)
def flag_review(body: FlagRequest, store: ReviewStore = Depends(get_review_store)):
    """Report a review so it shows up in the moderation queue."""
    try:
        store.flag(body.product_id, body.user_id)
    except NotFoundError as exc:
        raise not_found(exc)
    return MessageResponse(message="review flagged")


@router.get(
    "/moderate",
    response_model=list[ReviewResponse],
    response_model_exclude_none=True,
    summary="Reviews awaiting moderation",
)
def review_queue(store: ReviewStore = Depends(get_review_store)):
    """Return flagged reviews that no moderator has approved yet."""
    return [r.to_dict() for r in moderation_queue(store)]


@router.post(
    "/moderate",
    response_model=MessageResponse,
    summary="Approve or remove a review",
)
def moderate_review(body: ModerationRequest, store: ReviewStore = Depends(get_review_store)):
    """Apply a moderator decision; unknown actions are accepted and ignored."""
    try:
        store.moderate(body.product_id, body.user_id, body.action)
    except NotFoundError as exc:
        raise not_found(exc)
    return MessageResponse(message="review moderated")
