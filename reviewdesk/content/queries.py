"""Read-only projections derived from store snapshots.

Nothing here holds a store lock beyond the single ``snapshot()`` /
``flagged_queue()`` call that produced its input, and nothing mutates a store.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from typing import Optional, TypeVar

from reviewdesk.content.models import Question, Review
from reviewdesk.content.store import ItemStore
from reviewdesk.moderation.models import ModerationState

T = TypeVar("T", Review, Question)


def all_items(store: ItemStore[T]) -> list[T]:
    """Every item in *store*, in insertion order."""
    return store.snapshot()


def moderation_queue(store: ItemStore[T]) -> list[T]:
    """Items with ``flagged=True, moderated=False``, in insertion order."""
    return store.flagged_queue()


def for_product(items: Iterable[T], product_id: str) -> list[T]:
    return [i for i in items if i.product_id == product_id]


def by_author(items: Iterable[T], user_id: str) -> list[T]:
    return [i for i in items if i.user_id == user_id]


def unanswered(questions: Iterable[Question]) -> list[Question]:
    """Questions that have not received any seller answer yet."""
    return [q for q in questions if not q.answers]


def state_counts(items: Iterable[T]) -> dict[str, int]:
    """Number of items per moderation state (``removed`` is never counted)."""
    counts = Counter(i.state.value for i in items)
    return {
        s.value: counts.get(s.value, 0)
        for s in ModerationState
        if s is not ModerationState.removed
    }


def average_rating(reviews: Sequence[Review]) -> Optional[float]:
    """Mean rating of *reviews*, or ``None`` when there are none."""
    if not reviews:
        return None
    return sum(r.rating for r in reviews) / len(reviews)
