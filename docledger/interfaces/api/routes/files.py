"""Routes for shared files and their version history."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from docledger.application.use_cases.files import (
    create_file as create_file_uc,
    delete_file as delete_file_uc,
    force_update_file as force_update_file_uc,
    get_file as get_file_uc,
    list_approved_files as list_approved_files_uc,
    list_file_versions as list_file_versions_uc,
    list_user_files as list_user_files_uc,
    save_file as save_file_uc,
)
from docledger.domain.access_policy import FileOperation
from docledger.domain.entities import File, User
from docledger.infrastructure.database import get_db
from docledger.interfaces.api.dependencies import (
    get_current_active_user,
    require_operation,
)
from docledger.interfaces.api.routes_helpers import (
    APPLICATION_ERRORS,
    to_http_exception,
)
from docledger.interfaces.api.schemas import (
    FileCreate,
    FileDeleteResponse,
    FileForceUpdate,
    FileRead,
    FileSave,
    FileVersionRead,
)

router = APIRouter(prefix="/files", tags=["files"])
logger = logging.getLogger(__name__)


def _to_read_model(file: File) -> FileRead:
    return FileRead.model_validate(file)


@router.get("/", response_model=list[FileRead])
def list_approved_files(
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
) -> list[FileRead]:
    """Return every approved file, most recently updated first."""

    try:
        files = list_approved_files_uc(db)
    except APPLICATION_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return [_to_read_model(file) for file in files]


# Declared before "/{file_id}" so the literal path wins.
@router.get("/my/files", response_model=list[FileRead])
def list_my_files(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> list[FileRead]:
    """Return the files created by the authenticated user, drafts included."""

    try:
        files = list_user_files_uc(db, current_user.id)
    except APPLICATION_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return [_to_read_model(file) for file in files]


@router.get("/{file_id}", response_model=FileRead)
def read_file(
    file_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
) -> FileRead:
    """Return the file identified by ``file_id``."""

    try:
        file = get_file_uc(db, file_id)
    except APPLICATION_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(file)


@router.get("/{file_id}/versions", response_model=list[FileVersionRead])
def read_file_versions(
    file_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
) -> list[FileVersionRead]:
    """Return the version ledger of ``file_id``, founding snapshot first."""

    try:
        versions = list_file_versions_uc(db, file_id)
    except APPLICATION_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return [FileVersionRead.model_validate(version) for version in versions]


@router.post("/", response_model=FileRead, status_code=status.HTTP_201_CREATED)
def create_file(
    payload: FileCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_operation(FileOperation.CREATE)),
) -> FileRead:
    """Create an approved file owned by the authenticated editor or admin."""

    try:
        file = create_file_uc(
            db,
            name=payload.name,
            content=payload.content,
            principal=current_user,
        )
    except APPLICATION_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(file)


@router.put("/{file_id}", response_model=FileRead)
def force_update_file(
    file_id: int,
    payload: FileForceUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_operation(FileOperation.FORCE_UPDATE)),
) -> FileRead:
    """Overwrite the content of any file without an ownership check."""

    try:
        file = force_update_file_uc(
            db, file_id, content=payload.content, principal=current_user
        )
    except APPLICATION_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(file)


@router.put("/{file_id}/save", response_model=FileRead)
def save_file(
    file_id: int,
    payload: FileSave,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_operation(FileOperation.SAVE)),
) -> FileRead:
    """Save a file owned by the caller; administrators may save any file."""

    try:
        file = save_file_uc(
            db,
            file_id,
            content=payload.content,
            name=payload.name,
            principal=current_user,
        )
    except APPLICATION_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(file)


@router.delete("/{file_id}", response_model=FileDeleteResponse)
def delete_file(
    file_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_operation(FileOperation.DELETE)),
) -> FileDeleteResponse:
    """Delete a file together with its edits and notifications.

    Editors may delete files they did not author.
    """

    try:
        deletion = delete_file_uc(db, file_id, principal=current_user)
    except APPLICATION_ERRORS as exc:
        raise to_http_exception(exc) from exc
    logger.debug(
        "File %s removed with %s edits and %s notifications",
        deletion.file_id,
        deletion.edits_removed,
        deletion.notifications_removed,
    )
    return FileDeleteResponse(message="File deleted successfully")
