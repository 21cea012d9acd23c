"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

EVENT_EDIT_PROPOSED = "edit_proposed"
EVENT_FILE_UPDATED = "file_updated"


@dataclass
class Notification:
    """Information message delivered to a specific user."""

    id: int | None
    recipient_id: int
    event_type: str
    title: str
    message: str
    file_id: int | None = None
    created_at: datetime | None = None
    read_at: datetime | None = None


__all__ = ["EVENT_EDIT_PROPOSED", "EVENT_FILE_UPDATED", "Notification"]
