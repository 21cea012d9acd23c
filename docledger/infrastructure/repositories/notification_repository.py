"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy.orm import Session

from docledger.domain.entities import Notification
from docledger.infrastructure.models import NotificationModel
from docledger.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(
        self,
        user_id: int,
        *,
        unread_only: bool = False,
        limit: int | None = 50,
    ) -> Sequence[Notification]:
        query = self.session.query(NotificationModel).filter(
            NotificationModel.user_id == user_id
        )
        if unread_only:
            query = query.filter(NotificationModel.read_at.is_(None))
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def create(self, notification: Notification, *, commit: bool = True) -> Notification:
        model = NotificationModel(
            user_id=notification.recipient_id,
            file_id=notification.file_id,
            event_type=notification.event_type,
            title=notification.title,
            message=notification.message,
            created_at=ensure_app_naive_datetime(notification.created_at)
            or ensure_app_naive_datetime(now_in_app_timezone()),
            read_at=ensure_app_naive_datetime(notification.read_at),
        )
        self.session.add(model)
        if commit:
            self.session.commit()
            self.session.refresh(model)
        else:
            self.session.flush()
        return self._to_entity(model)

    def mark_as_read(self, notification_ids: Iterable[int], *, user_id: int) -> int:
        ids = [notification_id for notification_id in notification_ids if notification_id is not None]
        if not ids:
            return 0
        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.id.in_(ids),
                NotificationModel.user_id == user_id,
                NotificationModel.read_at.is_(None),
            )
            .update(
                {
                    NotificationModel.read_at: ensure_app_naive_datetime(
                        now_in_app_timezone()
                    )
                },
                synchronize_session=False,
            )
        )
        self.session.commit()
        return updated

    def count_for_file(self, file_id: int) -> int:
        return (
            self.session.query(NotificationModel)
            .filter(NotificationModel.file_id == file_id)
            .count()
        )

    def delete_by_file_id(self, file_id: int, *, commit: bool = True) -> int:
        """Remove every notification referencing ``file_id``; return the count."""

        removed = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.file_id == file_id)
            .delete(synchronize_session=False)
        )
        if commit:
            self.session.commit()
        return removed

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            recipient_id=model.user_id,
            event_type=model.event_type,
            title=model.title,
            message=model.message,
            file_id=model.file_id,
            created_at=ensure_app_timezone(model.created_at),
            read_at=ensure_app_timezone(model.read_at),
        )


__all__ = ["NotificationRepository"]
