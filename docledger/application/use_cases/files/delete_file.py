"""Use case for deleting files together with the records that reference them."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from docledger.application.authorization import require_role
from docledger.application.cascade import purge_file_dependents
from docledger.application.errors import NotFoundError, store_guard
from docledger.domain.access_policy import FileOperation
from docledger.domain.entities import User
from docledger.infrastructure.repositories import FileRepository

from .get_file import FILE_NOT_FOUND

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileDeletion:
    """Acknowledgement returned once a file and its dependents are gone."""

    file_id: int
    edits_removed: int
    notifications_removed: int


def delete_file(session: Session, file_id: int, *, principal: User) -> FileDeletion:
    """Delete ``file_id`` after purging its edits and notifications.

    Any editor or administrator may delete any file, including files they did
    not author. The purge and the removal share one transaction: if either
    fails, nothing is deleted and :class:`StoreError` is raised.
    """

    require_role(principal, FileOperation.DELETE)
    repository = FileRepository(session)

    with store_guard(session, "Failed to delete file"):
        if not repository.exists(file_id):
            raise NotFoundError(FILE_NOT_FOUND)
        purge = purge_file_dependents(session, file_id)
        repository.delete(file_id, commit=False)
        session.commit()

    logger.info("User %s deleted file %s", principal.id, file_id)
    return FileDeletion(
        file_id=file_id,
        edits_removed=purge.edits,
        notifications_removed=purge.notifications,
    )
