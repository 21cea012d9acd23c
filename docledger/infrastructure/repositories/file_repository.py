"""Persistence helpers for shared files and their version ledger."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from docledger.domain.entities import File, FileAuthor, FileVersion
from docledger.infrastructure.models import FileModel, FileVersionModel
from docledger.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class FileRepository:
    """Provide CRUD operations for :class:`File` objects.

    Ledger entries are written once and never updated: :meth:`update` only
    inserts the entries that are not yet persisted.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        status: str | None = None,
        author_id: int | None = None,
    ) -> Sequence[File]:
        query = self.session.query(FileModel)
        if status is not None:
            query = query.filter(FileModel.status == status)
        if author_id is not None:
            query = query.filter(FileModel.author_id == author_id)
        query = query.order_by(FileModel.updated_at.desc(), FileModel.id.desc())
        return [self._to_entity(model) for model in query.all()]

    def get(self, file_id: int) -> File | None:
        model = self.session.get(FileModel, file_id)
        return self._to_entity(model) if model else None

    def exists(self, file_id: int) -> bool:
        return (
            self.session.query(FileModel.id).filter(FileModel.id == file_id).first()
            is not None
        )

    def create(self, file: File) -> File:
        now = ensure_app_naive_datetime(now_in_app_timezone())
        model = FileModel(
            name=file.name,
            content=file.content,
            author_id=file.author_id,
            status=file.status,
            created_at=ensure_app_naive_datetime(file.created_at) or now,
            updated_at=ensure_app_naive_datetime(file.updated_at) or now,
        )
        self._append_new_versions(model, file.versions)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, file: File) -> File | None:
        model = self.session.get(FileModel, file.id)
        if model is None:
            return None
        model.name = file.name
        model.content = file.content
        model.status = file.status
        model.updated_at = ensure_app_naive_datetime(
            file.updated_at or now_in_app_timezone()
        )
        self._append_new_versions(model, file.versions)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, file_id: int, *, commit: bool = True) -> bool:
        """Remove the file and its ledger; return ``False`` when it did not exist."""

        model = self.session.get(FileModel, file_id)
        if model is None:
            return False
        self.session.delete(model)
        if commit:
            self.session.commit()
        else:
            self.session.flush()
        return True

    @staticmethod
    def _append_new_versions(
        model: FileModel, versions: Sequence[FileVersion]
    ) -> None:
        persisted = len(model.versions)
        for version in versions[persisted:]:
            model.versions.append(
                FileVersionModel(
                    position=version.position,
                    content=version.content,
                    updated_by=version.updated_by,
                    captured_at=ensure_app_naive_datetime(version.captured_at)
                    or ensure_app_naive_datetime(now_in_app_timezone()),
                )
            )

    @staticmethod
    def _to_entity(model: FileModel) -> File:
        author = None
        if model.author is not None:
            author = FileAuthor(
                id=model.author.id, name=model.author.name, email=model.author.email
            )
        return File(
            id=model.id,
            name=model.name,
            content=model.content,
            author_id=model.author_id,
            status=model.status,
            versions=[
                FileVersion(
                    position=version.position,
                    content=version.content,
                    updated_by=version.updated_by,
                    captured_at=ensure_app_timezone(version.captured_at),
                )
                for version in model.versions
            ],
            author=author,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["FileRepository"]
