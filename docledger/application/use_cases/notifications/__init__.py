"""Use cases and helpers for user notifications."""

from .events import notify_edit_proposed, notify_file_updated
from .inbox import list_notifications, mark_notifications_read

__all__ = [
    "list_notifications",
    "mark_notifications_read",
    "notify_edit_proposed",
    "notify_file_updated",
]
