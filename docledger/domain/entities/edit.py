"""Domain entity representing an edit proposed against a file."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Edit:
    """Proposed body for a file, submitted by any authenticated user.

    ``file_id`` is an identifier-only reference; the edit does not own the
    file and is removed when the file is deleted.
    """

    id: int | None
    file_id: int
    user_id: int
    content: str
    message: str | None = None
    created_at: datetime | None = None


__all__ = ["Edit"]
