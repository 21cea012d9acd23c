"""Domain entities describing shared text files and their version ledger."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

FILE_STATUS_DRAFT = "draft"
FILE_STATUS_APPROVED = "approved"


@dataclass(frozen=True)
class FileAuthor:
    """Public identity of the principal who created a file."""

    id: int
    name: str
    email: str


@dataclass(frozen=True)
class FileVersion:
    """Immutable snapshot of a file body captured before it was overwritten."""

    position: int
    content: str
    updated_by: int | None
    captured_at: datetime | None


@dataclass
class File:
    """Shared text document with an append-only history of prior contents."""

    id: int | None
    name: str
    content: str
    author_id: int
    status: str = FILE_STATUS_APPROVED
    versions: list[FileVersion] = field(default_factory=list)
    author: FileAuthor | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = [
    "FILE_STATUS_APPROVED",
    "FILE_STATUS_DRAFT",
    "File",
    "FileAuthor",
    "FileVersion",
]
