"""Translation of reviewdesk errors into HTTP errors."""

from __future__ import annotations

from fastapi import HTTPException, status

from reviewdesk.errors import NotFoundError, RejectedError


def rejected(exc: RejectedError) -> HTTPException:
    """400 with a machine-readable reason; the matched word is never echoed."""
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={"reason": exc.reason, "field": exc.field, "message": str(exc)},
    )


def not_found(exc: NotFoundError) -> HTTPException:
    """404, only reachable when the stores run in strict mode."""
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
