"""Use case for proposing an edit to a file."""

from sqlalchemy.orm import Session

from docledger.application.authorization import require_role
from docledger.application.errors import ValidationError, store_guard
from docledger.application.use_cases.files import get_file
from docledger.application.use_cases.notifications import notify_edit_proposed
from docledger.domain.access_policy import FileOperation
from docledger.domain.entities import Edit, User
from docledger.infrastructure.repositories import EditRepository
from docledger.utils import now_in_app_timezone


def propose_edit(
    session: Session,
    file_id: int,
    *,
    content: str | None,
    message: str | None = None,
    principal: User,
) -> Edit:
    """Record a proposed body for ``file_id`` and notify its author."""

    require_role(principal, FileOperation.PROPOSE_EDIT)
    if content is None:
        raise ValidationError("Edit content is required")

    file = get_file(session, file_id)
    edit = Edit(
        id=None,
        file_id=file.id,
        user_id=principal.id,
        content=content,
        message=message or None,
        created_at=now_in_app_timezone(),
    )

    with store_guard(session, "Failed to save edit"):
        notify_edit_proposed(session, file=file, actor=principal, commit=False)
        return EditRepository(session).create(edit)
