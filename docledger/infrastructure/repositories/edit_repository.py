"""Persistence helpers for proposed edits."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from docledger.domain.entities import Edit
from docledger.infrastructure.models import EditModel
from docledger.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class EditRepository:
    """Provide CRUD operations for :class:`Edit` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_file(self, file_id: int) -> Sequence[Edit]:
        query = (
            self.session.query(EditModel)
            .filter(EditModel.file_id == file_id)
            .order_by(EditModel.created_at.desc(), EditModel.id.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, edit: Edit, *, commit: bool = True) -> Edit:
        model = EditModel(
            file_id=edit.file_id,
            user_id=edit.user_id,
            content=edit.content,
            message=edit.message,
            created_at=ensure_app_naive_datetime(edit.created_at)
            or ensure_app_naive_datetime(now_in_app_timezone()),
        )
        self.session.add(model)
        if commit:
            self.session.commit()
            self.session.refresh(model)
        else:
            self.session.flush()
        return self._to_entity(model)

    def count_for_file(self, file_id: int) -> int:
        return (
            self.session.query(EditModel).filter(EditModel.file_id == file_id).count()
        )

    def delete_by_file_id(self, file_id: int, *, commit: bool = True) -> int:
        """Remove every edit referencing ``file_id`` and return how many were removed."""

        removed = (
            self.session.query(EditModel)
            .filter(EditModel.file_id == file_id)
            .delete(synchronize_session=False)
        )
        if commit:
            self.session.commit()
        return removed

    @staticmethod
    def _to_entity(model: EditModel) -> Edit:
        return Edit(
            id=model.id,
            file_id=model.file_id,
            user_id=model.user_id,
            content=model.content,
            message=model.message,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["EditRepository"]
