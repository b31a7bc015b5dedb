"""FastAPI dependencies returning the stores owned by the running app."""

from __future__ import annotations

from fastapi import Request

from reviewdesk.content.store import QuestionStore, ReviewStore


def get_review_store(request: Request) -> ReviewStore:
    """Return the ReviewStore created by ``create_app``."""
    return request.app.state.reviews


def get_question_store(request: Request) -> QuestionStore:
    """Return the QuestionStore created by ``create_app``."""
    return request.app.state.questions
