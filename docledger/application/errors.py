"""Error taxonomy raised by the use cases.

Routes map each error to one stable HTTP status; persistence details never
leave :class:`StoreError`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from docledger.domain.access_policy import AccessDecision

logger = logging.getLogger(__name__)


class NotFoundError(LookupError):
    """The referenced file does not exist."""


class ForbiddenError(PermissionError):
    """The principal is authenticated but the policy disallows the action."""

    def __init__(self, message: str, *, decision: AccessDecision = AccessDecision.FORBIDDEN) -> None:
        super().__init__(message)
        self.decision = decision


class ValidationError(ValueError):
    """A required field is missing or malformed."""


class StoreError(RuntimeError):
    """The persistence layer failed while running an operation."""


@contextmanager
def store_guard(session: Session, message: str) -> Iterator[None]:
    """Translate persistence failures raised in the block into :class:`StoreError`.

    The session is rolled back so nothing from the failed block is committed.
    """

    try:
        yield
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("%s: persistence failure", message)
        raise StoreError(message) from exc


__all__ = [
    "ForbiddenError",
    "NotFoundError",
    "StoreError",
    "ValidationError",
    "store_guard",
]
