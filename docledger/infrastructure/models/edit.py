"""SQLAlchemy model for edits proposed against files."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from docledger.infrastructure.database import Base
from docledger.utils import now_in_app_naive_datetime


class EditModel(Base):
    """Database representation of a proposed edit.

    ``file_id`` deliberately has no foreign key; dependents are purged by the
    file deletion use case.
    """

    __tablename__ = "edit"

    id = Column(Integer, primary_key=True, index=True)
    file_id = Column(Integer, nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    message = Column(String(255), nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["EditModel"]
