"""Use cases reading a single file and its history."""

from sqlalchemy.orm import Session

from docledger.application.errors import NotFoundError, store_guard
from docledger.domain import version_ledger
from docledger.domain.entities import File, FileVersion
from docledger.infrastructure.repositories import FileRepository

FILE_NOT_FOUND = "File not found"


def get_file(session: Session, file_id: int) -> File:
    """Return the file identified by ``file_id`` or raise :class:`NotFoundError`."""

    with store_guard(session, "Failed to fetch file"):
        file = FileRepository(session).get(file_id)
    if file is None:
        raise NotFoundError(FILE_NOT_FOUND)
    return file


def list_file_versions(session: Session, file_id: int) -> tuple[FileVersion, ...]:
    """Return the ledger of ``file_id``, founding snapshot first."""

    return version_ledger.history(get_file(session, file_id))
