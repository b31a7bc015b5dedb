"""In-memory, lock-protected collections of reviews and questions.

Each store guards its whole collection with one ``threading.Lock``; reads
and writes serialise on it and every operation holds it for its full
read-modify-write. Keyed lookups are linear scans and always act on the first
match in insertion order. Callers only ever receive deep copies.

The banned-word check runs before the lock is taken, so a rejected submission
never touches the collection.
"""

from __future__ import annotations

import copy
import threading
import time
from collections.abc import Callable
from typing import Generic, Optional, TypeVar, Union

import structlog

from reviewdesk.content.models import Answer, Comment, Question, Review
from reviewdesk.errors import NotFoundError, RejectedError
from reviewdesk.moderation.models import ModerationAction
from reviewdesk.moderation.word_filter import BannedWordFilter

logger = structlog.get_logger(__name__)

T = TypeVar("T", Review, Question)

Clock = Callable[[], float]


class ItemStore(Generic[T]):
    """Ordered collection of one item kind.

    ``strict=False`` is the permissive legacy behaviour: append/flag/moderate
    calls that match nothing succeed silently and return ``False``. With
    ``strict=True`` they raise ``NotFoundError``.
    """

    def __init__(
        self,
        word_filter: BannedWordFilter,
        *,
        strict: bool = False,
        clock: Clock = time.time,
    ) -> None:
        self._filter = word_filter
        self._strict = strict
        self._clock = clock
        self._items: list[T] = []
        self._lock = threading.Lock()

    @property
    def strict(self) -> bool:
        return self._strict

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    # -- helpers -------------------------------------------------------------

    def _screen(self, text: str, field: str) -> None:
        if self._filter.contains(text):
            logger.warning("submission_rejected", reason="banned_words", field=field)
            raise RejectedError("banned_words", field)

    def _now(self) -> int:
        return int(self._clock())

    def _first_index(self, match: Callable[[T], bool]) -> Optional[int]:
        for i, item in enumerate(self._items):
            if match(item):
                return i
        return None

    def _missing(self, kind: str, **key: str) -> bool:
        # Called after the lock is released.
        logger.debug("item_not_found", kind=kind, **key)
        if self._strict:
            raise NotFoundError(kind, key)
        return False

    def _append_response(
        self,
        text: str,
        field: str,
        match: Callable[[T], bool],
        build: Callable[[int], Union[Comment, Answer]],
        kind: str,
        key: dict[str, str],
    ) -> bool:
        self._screen(text, field)
        with self._lock:
            index = self._first_index(match)
            if index is not None:
                self._items[index].responses.append(build(self._now()))
        if index is None:
            return self._missing(kind, **key)
        logger.info("response_appended", kind=kind, **key)
        return True

    # -- writes --------------------------------------------------------------

    def add(self, item: T) -> None:
        """Append *item* after screening its primary text.

        Raises ``RejectedError`` if the text contains a banned word.
        """
        self._screen(item.primary_text, item.text_field)
        stored = copy.deepcopy(item)
        with self._lock:
            self._items.append(stored)
            size = len(self._items)
        logger.info(
            "item_added",
            kind=item.kind,
            product_id=item.product_id,
            user_id=item.user_id,
            size=size,
        )

    def flag(self, product_id: str, user_id: str) -> bool:
        """Mark the first item authored by ``(product_id, user_id)`` as flagged."""
        changed = False
        with self._lock:
            index = self._first_index(lambda i: i.is_authored_by(product_id, user_id))
            if index is not None:
                changed = self._items[index].flag()
        if index is None:
            return self._missing("item", product_id=product_id, user_id=user_id)
        if changed:
            logger.info("item_flagged", product_id=product_id, user_id=user_id)
        return True

    def moderate(
        self,
        product_id: str,
        user_id: str,
        action: Union[ModerationAction, str],
    ) -> bool:
        """Approve or remove the first item authored by ``(product_id, user_id)``.

        Unrecognised *action* values leave the store untouched. Returns
        whether a matching item was found.
        """
        parsed = ModerationAction.parse(action)
        with self._lock:
            index = self._first_index(lambda i: i.is_authored_by(product_id, user_id))
            if index is not None:
                if parsed is ModerationAction.remove:
                    del self._items[index]
                elif parsed is ModerationAction.approve:
                    self._items[index].approve()
        if index is None:
            return self._missing("item", product_id=product_id, user_id=user_id)
        if parsed is None:
            logger.info("moderation_action_ignored", action=str(action))
        else:
            logger.info(
                "item_moderated",
                action=parsed.value,
                product_id=product_id,
                user_id=user_id,
            )
        return True

    # -- reads ---------------------------------------------------------------

    def snapshot(self) -> list[T]:
        """Copies of every stored item, in insertion order."""
        with self._lock:
            return copy.deepcopy(self._items)

    def flagged_queue(self) -> list[T]:
        """Copies of items awaiting moderation, in insertion order."""
        with self._lock:
            return [copy.deepcopy(i) for i in self._items if i.awaiting_moderation]


class ReviewStore(ItemStore[Review]):
    """Reviews, with comments threaded by product."""

    def add_comment(self, product_id: str, user_id: str, text: str) -> bool:
        """Append a comment by *user_id* to the first review of *product_id*.

        Reviews are matched on ``product_id`` alone.
        """
        return self._append_response(
            text,
            "text",
            lambda r: r.product_id == product_id,
            lambda ts: Comment(user_id=user_id, text=text, timestamp=ts),
            "review",
            {"product_id": product_id},
        )


class QuestionStore(ItemStore[Question]):
    """Pre-sale questions, with seller answers."""

    def add(self, item: Question) -> None:
        # Questions submitted without a timestamp are stamped on arrival.
        if not item.timestamp:
            item = copy.deepcopy(item)
            item.timestamp = self._now()
        super().add(item)

    def add_answer(
        self,
        product_id: str,
        user_id: str,
        query: str,
        seller_id: str,
        response: str,
    ) -> bool:
        """Append *seller_id*'s answer to the first exactly matching question."""
        return self._append_response(
            response,
            "response",
            lambda q: q.matches_thread(product_id, user_id, query, seller_id),
            lambda ts: Answer(seller_id=seller_id, response=response, timestamp=ts),
            "question",
            {"product_id": product_id, "user_id": user_id, "seller_id": seller_id},
        )
