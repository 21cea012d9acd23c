"""SQLAlchemy models for shared files and their version ledger."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from docledger.infrastructure.database import Base
from docledger.utils import now_in_app_naive_datetime


class FileModel(Base):
    """Database representation of a shared text file."""

    __tablename__ = "file"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    content = Column(Text, nullable=False, default="")
    author_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    status = Column(String(20), nullable=False, default="approved", index=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime(),
        nullable=False,
        default=now_in_app_naive_datetime,
        index=True,
    )

    author = relationship("UserModel", lazy="joined")
    versions = relationship(
        "FileVersionModel",
        back_populates="file",
        order_by=lambda: [FileVersionModel.position, FileVersionModel.id],
        cascade="all, delete-orphan",
        lazy="selectin",
    )


class FileVersionModel(Base):
    """One ledger entry: the body of a file before a save overwrote it."""

    __tablename__ = "file_version"

    id = Column(Integer, primary_key=True, index=True)
    file_id = Column(
        Integer, ForeignKey("file.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position = Column(Integer, nullable=False)
    content = Column(Text, nullable=False, default="")
    updated_by = Column(Integer, nullable=True)
    captured_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)

    file = relationship("FileModel", back_populates="versions")


__all__ = ["FileModel", "FileVersionModel"]
