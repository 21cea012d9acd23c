"""Helper utilities shared across API route handlers."""

from fastapi import HTTPException, status

from docledger.application.errors import (
    ForbiddenError,
    NotFoundError,
    StoreError,
    ValidationError,
)

APPLICATION_ERRORS = (NotFoundError, ForbiddenError, ValidationError, StoreError)

_STATUS_BY_ERROR: tuple[tuple[type[Exception], int], ...] = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (StoreError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def to_http_exception(exc: Exception) -> HTTPException:
    """Return the HTTP error matching an application error.

    Store errors already carry a generic message; the persistence cause was
    logged where it happened.
    """

    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return HTTPException(status_code=status_code, detail=str(exc))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Unexpected error",
    )
