"""Reviews, questions and their response threads.

- ``models``: item and response entities with their wire shapes
- ``store``: lock-protected item collections
- ``queries``: read-only projections over store snapshots
"""

from reviewdesk.content.models import Answer, Comment, Question, Review
from reviewdesk.content.store import ItemStore, QuestionStore, ReviewStore

__all__ = [
    "Answer",
    "Comment",
    "ItemStore",
    "Question",
    "QuestionStore",
    "Review",
    "ReviewStore",
]
