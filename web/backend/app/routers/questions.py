"""Questions router -- submission, seller answers, flagging and moderation of questions."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from reviewdesk.content.models import Question
from reviewdesk.content.queries import (
    all_items,
    by_author,
    for_product,
    moderation_queue,
    unanswered,
)
from reviewdesk.content.store import QuestionStore
from reviewdesk.errors import NotFoundError, RejectedError
from web.backend.app.dependencies import get_question_store
from web.backend.app.http_errors import not_found, rejected
from web.backend.app.models.api import (
    AddAnswerRequest,
    CreateQuestionRequest,
    FlagRequest,
    MessageResponse,
    ModerationRequest,
    QuestionResponse,
)

router = APIRouter(prefix="/questions", tags=["questions"])


@router.post(
    "",
    response_model=MessageResponse,
    summary="Ask a question about a product",
    status_code=status.HTTP_201_CREATED,
)
def create_question(
    body: CreateQuestionRequest, store: QuestionStore = Depends(get_question_store)
):
    """Add a question. Rejected with 400 if the query contains a banned word."""
    question = Question(
        product_id=body.product_id,
        user_id=body.user_id,
        seller_id=body.seller_id,
        query=body.query,
        timestamp=body.timestamp,
    )
    try:
        store.add(question)
    except RejectedError as exc:
        raise rejected(exc)
    return MessageResponse(message="question added")


@router.get(
    "",
    response_model=list[QuestionResponse],
    response_model_exclude_none=True,
    summary="List all questions",
)
def list_questions(
    product_id: Optional[str] = Query(None, description="Only questions about this product"),
    user_id: Optional[str] = Query(None, description="Only questions asked by this user"),
    only_unanswered: bool = Query(
        False, alias="unanswered", description="Only questions without a seller answer"
    ),
    store: QuestionStore = Depends(get_question_store),
):
    """Return every question in submission order."""
    items = all_items(store)
    if product_id is not None:
        items = for_product(items, product_id)
    if user_id is not None:
        items = by_author(items, user_id)
    if only_unanswered:
        items = unanswered(items)
    return [q.to_dict() for q in items]


@router.post(
    "/answer",
    response_model=MessageResponse,
    summary="Answer a question",
    status_code=status.HTTP_201_CREATED,
)
def answer_question(body: AddAnswerRequest, store: QuestionStore = Depends(get_question_store)):
    """Append a seller answer to the question matching all four key fields."""
    try:
        store.add_answer(
            body.product_id, body.user_id, body.query, body.seller_id, body.response
        )
    except RejectedError as exc:
        raise rejected(exc)
    except NotFoundError as exc:
        raise not_found(exc)
    return MessageResponse(message="answer added")


@router.post(
    "/flag",
    response_model=MessageResponse,
    summary="Flag a question for moderation",
)
def flag_question(body: FlagRequest, store: QuestionStore = Depends(get_question_store)):
    try:
        store.flag(body.product_id, body.user_id)
    except NotFoundError as exc:
        raise not_found(exc)
    return MessageResponse(message="question flagged")


@router.get(
    "/moderate",
    response_model=list[QuestionResponse],
    response_model_exclude_none=True,
    summary="Questions awaiting moderation",
)
def question_queue(store: QuestionStore = Depends(get_question_store)):
    return [q.to_dict() for q in moderation_queue(store)]


@router.post(
    "/moderate",
    response_model=MessageResponse,
    summary="Approve or remove a question",
)
def moderate_question(
    body: ModerationRequest, store: QuestionStore = Depends(get_question_store)
):
    try:
        store.moderate(body.product_id, body.user_id, body.action)
    except NotFoundError as exc:
        raise not_found(exc)
    return MessageResponse(message="question moderated")
