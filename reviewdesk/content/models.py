"""Data models for reviews, questions and their response threads.

Identity of an item inside one store is the pair ``(product_id, user_id)``.
The pair is not enforced as unique; keyed store operations always act on the
first match in insertion order.

``to_dict`` produces the JSON shapes returned to HTTP clients. Empty response
threads are omitted from the output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from reviewdesk.moderation.models import Moderatable


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


@dataclass
class Comment:
    """A comment appended to a review's thread."""

    user_id: str
    text: str
    timestamp: int = 0
    # Carried through unchanged; no operation mutates these on responses.
    flagged: bool = False
    moderated: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "user_id": self.user_id,
            "text": self.text,
            "timestamp": self.timestamp,
            "flagged": self.flagged,
            "moderated": self.moderated,
        }


@dataclass
class Answer:
    """A seller's answer appended to a question's thread."""

    seller_id: str
    response: str
    timestamp: int = 0
    flagged: bool = False
    moderated: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "seller_id": self.seller_id,
            "response": self.response,
            "timestamp": self.timestamp,
            "flagged": self.flagged,
            "moderated": self.moderated,
        }


# ---------------------------------------------------------------------------
# Items
# ---------------------------------------------------------------------------


@dataclass
class Review(Moderatable):
    """A buyer's review of a product."""

    kind: ClassVar[str] = "review"
    text_field: ClassVar[str] = "comment"

    product_id: str
    user_id: str
    rating: int = 0
    comment: str = ""
    comments: list[Comment] = field(default_factory=list)
    flagged: bool = False
    moderated: bool = False

    @property
    def primary_text(self) -> str:
        return self.comment

    @property
    def responses(self) -> list[Comment]:
        return self.comments

    def is_authored_by(self, product_id: str, user_id: str) -> bool:
        return self.product_id == product_id and self.user_id == user_id

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "product_id": self.product_id,
            "user_id": self.user_id,
            "rating": self.rating,
            "comment": self.comment,
        }
        if self.comments:
            data["comments"] = [c.to_dict() for c in self.comments]
        data["flagged"] = self.flagged
        data["moderated"] = self.moderated
        return data


@dataclass
class Question(Moderatable):
    """A pre-sale question addressed to a product's seller."""

    kind: ClassVar[str] = "question"
    text_field: ClassVar[str] = "query"

    product_id: str
    user_id: str
    seller_id: str = ""
    query: str = ""
    timestamp: int = 0
    answers: list[Answer] = field(default_factory=list)
    flagged: bool = False
    moderated: bool = False

    @property
    def primary_text(self) -> str:
        return self.query

    @property
    def responses(self) -> list[Answer]:
        return self.answers

    def is_authored_by(self, product_id: str, user_id: str) -> bool:
        return self.product_id == product_id and self.user_id == user_id

    def matches_thread(
        self, product_id: str, user_id: str, query: str, seller_id: str
    ) -> bool:
        """Stricter match used for answers: product_id alone is not unique."""
        return (
            self.product_id == product_id
            and self.user_id == user_id
            and self.query == query
            and self.seller_id == seller_id
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "product_id": self.product_id,
            "user_id": self.user_id,
            "seller_id": self.seller_id,
            "query": self.query,
            "timestamp": self.timestamp,
        }
        if self.answers:
            data["answers"] = [a.to_dict() for a in self.answers]
        data["flagged"] = self.flagged
        data["moderated"] = self.moderated
        return data
