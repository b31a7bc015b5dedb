"""Banned-word filter applied to every submission before it reaches a store.

Matching is a case-insensitive *substring* test, not a word-boundary test: a
banned word embedded inside a longer word ("SPAMtastic") still triggers a
rejection. The word set is frozen at construction time, so a filter can be
shared by any number of stores and request handlers without locking.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Optional

import structlog

from reviewdesk.errors import LoadError

logger = structlog.get_logger(__name__)


class BannedWordFilter:
    """Immutable set of lowercase banned substrings."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        # Entries keep their padding. Whitespace-only entries are dropped.
        self._words: frozenset[str] = frozenset(
            word.lower() for word in words if word.strip()
        )

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> BannedWordFilter:
        """Build a filter from raw lines, one banned word per line."""
        return cls(lines)

    # -- introspection -------------------------------------------------------

    @property
    def words(self) -> frozenset[str]:
        return self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __repr__(self) -> str:
        return f"BannedWordFilter({len(self._words)} words)"

    # -- public API ----------------------------------------------------------

    def find(self, text: str) -> Optional[str]:
        """Return the first banned word (in sorted order) contained in *text*."""
        lowered = text.lower()
        for word in sorted(self._words):
            if word in lowered:
                return word
        return None

    def contains(self, text: str) -> bool:
        """True iff *text* contains any banned word, ignoring case."""
        lowered = text.lower()
        return any(word in lowered for word in self._words)


def load_banned_words(path: str | Path) -> BannedWordFilter:
    """Read a UTF-8 word list (one word per line) into a filter.

    Raises ``LoadError`` when the file cannot be read. The error is not
    retried: a process without a loaded filter must not serve requests.
    """
    source = Path(path)
    try:
        lines = source.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("banned_words_load_failed", path=str(source), error=str(exc))
        raise LoadError(source, exc) from exc

    word_filter = BannedWordFilter.from_lines(lines)
    logger.info("banned_words_loaded", path=str(source), count=len(word_filter))
    return word_filter
