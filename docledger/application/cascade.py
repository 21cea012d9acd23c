"""Removal of records that reference a file before the file itself is deleted."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from docledger.infrastructure.repositories import (
    EditRepository,
    NotificationRepository,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DependentPurge:
    """Counts of dependent records removed for one file."""

    file_id: int
    edits: int
    notifications: int


def purge_file_dependents(session: Session, file_id: int) -> DependentPurge:
    """Delete every edit and notification referencing ``file_id``.

    Runs inside the caller's transaction and does not commit: the caller
    removes the file and commits once, or rolls everything back.
    """

    edits = EditRepository(session).delete_by_file_id(file_id, commit=False)
    notifications = NotificationRepository(session).delete_by_file_id(
        file_id, commit=False
    )
    logger.info(
        "Purged %s edits and %s notifications referencing file %s",
        edits,
        notifications,
        file_id,
    )
    return DependentPurge(file_id=file_id, edits=edits, notifications=notifications)


__all__ = ["DependentPurge", "purge_file_dependents"]
