"""Routes for the authenticated user's notifications."""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from docledger.application.use_cases.notifications import (
    list_notifications as list_notifications_uc,
    mark_notifications_read as mark_notifications_read_uc,
)
from docledger.domain.entities import User
from docledger.infrastructure.database import get_db
from docledger.interfaces.api.dependencies import get_current_active_user
from docledger.interfaces.api.routes_helpers import (
    APPLICATION_ERRORS,
    to_http_exception,
)
from docledger.interfaces.api.schemas import NotificationMarkRead, NotificationRead

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("/", response_model=list[NotificationRead])
def list_notifications(
    unread_only: bool = False,
    limit: int = Query(50, ge=1, le=200),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> list[NotificationRead]:
    try:
        notifications = list_notifications_uc(
            db, principal=current_user, unread_only=unread_only, limit=limit
        )
    except APPLICATION_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return [NotificationRead.model_validate(item) for item in notifications]


@router.post("/read", status_code=status.HTTP_204_NO_CONTENT)
def mark_notifications_read(
    payload: NotificationMarkRead,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Response:
    """Mark the given notifications of the current user as read."""

    try:
        mark_notifications_read_uc(db, payload.ids, principal=current_user)
    except APPLICATION_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
