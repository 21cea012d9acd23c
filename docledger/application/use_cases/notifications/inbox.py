"""Use cases for reading and acknowledging the current user's notifications."""

from collections.abc import Iterable, Sequence

from sqlalchemy.orm import Session

from docledger.application.errors import store_guard
from docledger.domain.entities import Notification, User
from docledger.infrastructure.repositories import NotificationRepository


def list_notifications(
    session: Session,
    *,
    principal: User,
    unread_only: bool = False,
    limit: int | None = 50,
) -> Sequence[Notification]:
    """Return the notifications addressed to ``principal``, newest first."""

    with store_guard(session, "Failed to fetch notifications"):
        return NotificationRepository(session).list_for_user(
            principal.id, unread_only=unread_only, limit=limit
        )


def mark_notifications_read(
    session: Session, notification_ids: Iterable[int], *, principal: User
) -> int:
    """Mark the given notifications as read; ids owned by other users are ignored."""

    with store_guard(session, "Failed to update notifications"):
        return NotificationRepository(session).mark_as_read(
            notification_ids, user_id=principal.id
        )
