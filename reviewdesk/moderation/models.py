"""Moderation actions and the per-item moderation lifecycle.

Every item starts ``clean``. A user report moves it to ``flagged``; a
moderator decision either approves it (terminal) or removes it from its store
entirely. ``removed`` is never stored on an item: it is represented by the
item's absence.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ModerationAction(str, Enum):
    """Decision a moderator can take on an item."""

    approve = "approve"
    remove = "remove"

    @classmethod
    def parse(cls, value: object) -> Optional[ModerationAction]:
        """Return the matching action, or ``None`` for unrecognised values."""
        try:
            return cls(value)
        except ValueError:
            return None


class ModerationState(str, Enum):
    """Observable moderation state of an item."""

    clean = "clean"
    flagged = "flagged"
    approved = "approved"
    removed = "removed"

    @classmethod
    def of(cls, item: Optional[Moderatable]) -> ModerationState:
        """Derive the state of *item*; ``None`` (no longer stored) is ``removed``."""
        if item is None:
            return cls.removed
        if item.moderated:
            return cls.approved
        if item.flagged:
            return cls.flagged
        return cls.clean


class Moderatable:
    """Mixin for dataclasses carrying ``flagged`` and ``moderated`` fields.

    There is no transition back to clean and none out of approved.
    """

    flagged: bool
    moderated: bool

    @property
    def state(self) -> ModerationState:
        return ModerationState.of(self)

    @property
    def awaiting_moderation(self) -> bool:
        """Membership test for the moderation queue."""
        return self.flagged and not self.moderated

    def flag(self) -> bool:
        """Mark the item as reported. Returns True if this changed anything."""
        if self.flagged:
            return False
        self.flagged = True
        return True

    def approve(self) -> bool:
        """Record a moderator approval. Returns True if this changed anything."""
        if self.moderated:
            return False
        self.moderated = True
        return True
