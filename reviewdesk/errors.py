"""Error taxonomy for the review/question store.

Only banned-word rejections are reported on the write paths by default.
``NotFoundError`` is raised exclusively by stores constructed in strict mode.
"""

from __future__ import annotations

from pathlib import Path


class ReviewDeskError(Exception):
    """Base class for all reviewdesk errors."""


class RejectedError(ReviewDeskError):
    """A submission was refused before any mutation took place.

    Recoverable: the submitter may edit the text and resubmit.
    """

    def __init__(self, reason: str = "banned_words", field: str = "") -> None:
        self.reason = reason
        self.field = field
        message = f"submission rejected: {reason}"
        if field:
            message += f" (field '{field}')"
        super().__init__(message)


class NotFoundError(ReviewDeskError):
    """No item matched the key of an append/flag/moderate call (strict mode only)."""

    def __init__(self, kind: str, key: dict[str, str]) -> None:
        self.kind = kind
        self.key = key
        described = ", ".join(f"{k}={v!r}" for k, v in key.items())
        super().__init__(f"no {kind} matches {described}")


class LoadError(ReviewDeskError, OSError):
    """The banned-word source could not be read. Fatal at startup."""

    def __init__(self, path: str | Path, cause: BaseException | None = None) -> None:
        self.path = str(path)
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"failed to load banned words from {self.path}{detail}")
