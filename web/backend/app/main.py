"""FastAPI application for the reviewdesk service.

Provides REST endpoints wrapping the reviewdesk core for:
- Product reviews and their comment threads
- Pre-sale questions and seller answers
- Flagging and the moderation queues for both
"""

from __future__ import annotations

from typing import Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from reviewdesk import __version__
from reviewdesk.config import Settings, get_settings
from reviewdesk.content.queries import all_items, average_rating, state_counts
from reviewdesk.content.store import QuestionStore, ReviewStore
from reviewdesk.moderation.word_filter import BannedWordFilter, load_banned_words
from web.backend.app.routers import questions, reviews

logger = structlog.get_logger(__name__)


def create_app(
    word_filter: Optional[BannedWordFilter] = None,
    *,
    strict: Optional[bool] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Build the app with one ReviewStore and one QuestionStore.

    When *word_filter* is omitted the banned-word list is loaded from
    ``settings.banned_words_path``; a ``LoadError`` propagates so that the
    process never serves requests without a filter.
    """
    settings = settings or get_settings()
    if word_filter is None:
        word_filter = load_banned_words(settings.banned_words_path)
    if strict is None:
        strict = settings.strict_not_found

    app = FastAPI(
        title="reviewdesk API",
        description=(
            "REST API for moderated product reviews and pre-sale questions. "
            "Submissions are screened against a banned-word list; any item can "
            "be flagged and then approved or removed by a moderator."
        ),
        version=__version__,
    )

    # -----------------------------------------------------------------------
    # CORS middleware (allow all origins for development)
    # -----------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.word_filter = word_filter
    app.state.reviews = ReviewStore(word_filter, strict=strict)
    app.state.questions = QuestionStore(word_filter, strict=strict)

    app.include_router(reviews.router)
    app.include_router(questions.router)

    # -----------------------------------------------------------------------
    # Root, health-check and stats endpoints
    # -----------------------------------------------------------------------

    @app.get("/", tags=["meta"])
    def root():
        """Return basic API information."""
        return {
            "name": "reviewdesk API",
            "version": __version__,
            "docs": "/docs",
            "openapi": "/openapi.json",
        }

    @app.get("/health", tags=["meta"])
    def health_check(request: Request):
        """Health check endpoint."""
        return {
            "status": "healthy",
            "banned_words": len(request.app.state.word_filter),
            "strict_not_found": request.app.state.reviews.strict,
        }

    @app.get("/stats", tags=["meta"])
    def stats(request: Request):
        """Moderation state counts per item kind, plus the mean review rating."""
        review_items = all_items(request.app.state.reviews)
        question_items = all_items(request.app.state.questions)
        return {
            "reviews": state_counts(review_items),
            "questions": state_counts(question_items),
            "average_rating": average_rating(review_items),
        }

    logger.info("app_created", banned_words=len(word_filter), strict=strict)
    return app
