"""Helpers to generate notifications about file activity."""

from __future__ import annotations

from sqlalchemy.orm import Session

from docledger.domain.entities import (
    EVENT_EDIT_PROPOSED,
    EVENT_FILE_UPDATED,
    File,
    Notification,
    User,
)
from docledger.infrastructure.repositories import NotificationRepository
from docledger.utils import now_in_app_timezone


def _persist_notification(
    session: Session,
    *,
    recipient_id: int,
    file_id: int | None,
    event_type: str,
    title: str,
    message: str,
    commit: bool,
) -> Notification:
    notification = Notification(
        id=None,
        recipient_id=recipient_id,
        event_type=event_type,
        title=title,
        message=message,
        file_id=file_id,
        created_at=now_in_app_timezone(),
        read_at=None,
    )
    return NotificationRepository(session).create(notification, commit=commit)


def notify_file_updated(
    session: Session, *, file: File, actor: User, commit: bool = False
) -> Notification | None:
    """Tell the author that someone else overwrote their file."""

    if actor.id == file.author_id:
        return None
    return _persist_notification(
        session,
        recipient_id=file.author_id,
        file_id=file.id,
        event_type=EVENT_FILE_UPDATED,
        title="File updated",
        message=f"{actor.name} updated '{file.name}'.",
        commit=commit,
    )


def notify_edit_proposed(
    session: Session, *, file: File, actor: User, commit: bool = False
) -> Notification | None:
    """Tell the author that an edit was proposed for their file."""

    if actor.id == file.author_id:
        return None
    return _persist_notification(
        session,
        recipient_id=file.author_id,
        file_id=file.id,
        event_type=EVENT_EDIT_PROPOSED,
        title="Edit proposed",
        message=f"{actor.name} proposed an edit to '{file.name}'.",
        commit=commit,
    )
