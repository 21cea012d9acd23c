"""Use case for creating files."""

from sqlalchemy.orm import Session

from docledger.application.authorization import require_role
from docledger.application.errors import ValidationError, store_guard
from docledger.domain import version_ledger
from docledger.domain.access_policy import FileOperation
from docledger.domain.entities import FILE_STATUS_APPROVED, File, User
from docledger.infrastructure.repositories import FileRepository
from docledger.utils import now_in_app_timezone


def create_file(
    session: Session,
    *,
    name: str | None,
    content: str | None,
    principal: User,
) -> File:
    """Create an approved file attributed to ``principal``.

    The ledger is seeded with the founding snapshot of ``content``.
    """

    require_role(principal, FileOperation.CREATE)

    if name is None or not name.strip():
        raise ValidationError("File name is required")
    if content is None:
        raise ValidationError("File content is required")

    now = now_in_app_timezone()
    file = File(
        id=None,
        name=name,
        content=content,
        author_id=principal.id,
        status=FILE_STATUS_APPROVED,
        versions=[
            version_ledger.founding_snapshot(content, principal.id, captured_at=now)
        ],
        created_at=now,
        updated_at=now,
    )

    with store_guard(session, "Failed to create file"):
        return FileRepository(session).create(file)
