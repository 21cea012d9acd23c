"""Use cases overwriting the content of an existing file."""

from __future__ import annotations

from sqlalchemy.orm import Session

from docledger.application.authorization import require_permission, require_role
from docledger.application.errors import NotFoundError, ValidationError, store_guard
from docledger.application.use_cases.notifications import notify_file_updated
from docledger.domain import version_ledger
from docledger.domain.access_policy import FileOperation
from docledger.domain.entities import File, User
from docledger.infrastructure.repositories import FileRepository
from docledger.utils import now_in_app_timezone

from .get_file import FILE_NOT_FOUND, get_file


def _overwrite(
    session: Session,
    file: File,
    *,
    content: str,
    name: str | None,
    principal: User,
    failure_message: str,
) -> File:
    now = now_in_app_timezone()
    version_ledger.snapshot(file, principal.id, captured_at=now)
    file.content = content
    if name and name.strip():
        file.name = name
    file.updated_at = now

    with store_guard(session, failure_message):
        notify_file_updated(session, file=file, actor=principal, commit=False)
        updated = FileRepository(session).update(file)
        if updated is None:
            session.rollback()
            raise NotFoundError(FILE_NOT_FOUND)
        return updated


def force_update_file(
    session: Session,
    file_id: int,
    *,
    content: str | None,
    principal: User,
) -> File:
    """Overwrite the content of any file; administrators only, no ownership check."""

    require_role(principal, FileOperation.FORCE_UPDATE)
    if content is None:
        raise ValidationError("File content is required")

    file = get_file(session, file_id)
    require_permission(principal, FileOperation.FORCE_UPDATE, owner_id=file.author_id)
    return _overwrite(
        session,
        file,
        content=content,
        name=None,
        principal=principal,
        failure_message="Failed to update file",
    )


def save_file(
    session: Session,
    file_id: int,
    *,
    content: str | None,
    name: str | None = None,
    principal: User,
) -> File:
    """Save new content (and optionally a new name) for a file.

    Editors may only save files they authored; administrators may save any.
    """

    require_role(principal, FileOperation.SAVE)
    if content is None:
        raise ValidationError("File content is required")

    file = get_file(session, file_id)
    require_permission(
        principal,
        FileOperation.SAVE,
        owner_id=file.author_id,
        message="You can only save your own files",
    )
    return _overwrite(
        session,
        file,
        content=content,
        name=name,
        principal=principal,
        failure_message="Failed to save file",
    )
