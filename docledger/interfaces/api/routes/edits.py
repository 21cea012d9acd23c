"""Routes for edits proposed against files."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from docledger.application.use_cases.edits import (
    list_file_edits as list_file_edits_uc,
    propose_edit as propose_edit_uc,
)
from docledger.domain.entities import User
from docledger.infrastructure.database import get_db
from docledger.interfaces.api.dependencies import get_current_active_user
from docledger.interfaces.api.routes_helpers import (
    APPLICATION_ERRORS,
    to_http_exception,
)
from docledger.interfaces.api.schemas import EditCreate, EditRead

router = APIRouter(prefix="/files/{file_id}/edits", tags=["edits"])


@router.post("/", response_model=EditRead, status_code=status.HTTP_201_CREATED)
def propose_edit(
    file_id: int,
    payload: EditCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> EditRead:
    """Propose new content for a file; its author is notified."""

    try:
        edit = propose_edit_uc(
            db,
            file_id,
            content=payload.content,
            message=payload.message,
            principal=current_user,
        )
    except APPLICATION_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return EditRead.model_validate(edit)


@router.get("/", response_model=list[EditRead])
def list_file_edits(
    file_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> list[EditRead]:
    """Return the edits proposed for a file to its author or an administrator."""

    try:
        edits = list_file_edits_uc(db, file_id, principal=current_user)
    except APPLICATION_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return [EditRead.model_validate(edit) for edit in edits]
