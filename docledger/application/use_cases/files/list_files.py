"""Use cases listing files visible to a principal."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from docledger.application.errors import store_guard
from docledger.domain.entities import FILE_STATUS_APPROVED, File
from docledger.infrastructure.repositories import FileRepository


def list_approved_files(session: Session) -> Sequence[File]:
    """Return every approved file, most recently updated first."""

    with store_guard(session, "Failed to fetch files"):
        return FileRepository(session).list(status=FILE_STATUS_APPROVED)


def list_user_files(session: Session, author_id: int) -> Sequence[File]:
    """Return every file created by ``author_id`` regardless of status."""

    with store_guard(session, "Failed to fetch files"):
        return FileRepository(session).list(author_id=author_id)
