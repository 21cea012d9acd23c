"""Use case for listing the edits proposed against a file."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from docledger.application.authorization import require_permission
from docledger.application.errors import store_guard
from docledger.application.use_cases.files import get_file
from docledger.domain.access_policy import FileOperation
from docledger.domain.entities import Edit, User
from docledger.infrastructure.repositories import EditRepository


def list_file_edits(session: Session, file_id: int, *, principal: User) -> Sequence[Edit]:
    """Return the edits for ``file_id``; only its author or an administrator may look."""

    file = get_file(session, file_id)
    require_permission(
        principal,
        FileOperation.LIST_EDITS,
        owner_id=file.author_id,
        message="Only the author can review edits of this file",
    )
    with store_guard(session, "Failed to fetch edits"):
        return EditRepository(session).list_for_file(file_id)
