"""Proactive and reactive moderation.

- ``word_filter``: banned-word substring filter applied at write time
- ``models``: moderation actions and the flagged/approved/removed lifecycle
"""

from reviewdesk.moderation.models import ModerationAction, ModerationState
from reviewdesk.moderation.word_filter import BannedWordFilter, load_banned_words

__all__ = [
    "BannedWordFilter",
    "ModerationAction",
    "ModerationState",
    "load_banned_words",
]
