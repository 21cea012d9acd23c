"""Domain entities exposed by the application."""

from .edit import Edit
from .file import (
    FILE_STATUS_APPROVED,
    FILE_STATUS_DRAFT,
    File,
    FileAuthor,
    FileVersion,
)
from .notification import EVENT_EDIT_PROPOSED, EVENT_FILE_UPDATED, Notification
from .role import Role, RoleAlias
from .user import User

__all__ = [
    "Edit",
    "EVENT_EDIT_PROPOSED",
    "EVENT_FILE_UPDATED",
    "File",
    "FileAuthor",
    "FileVersion",
    "FILE_STATUS_APPROVED",
    "FILE_STATUS_DRAFT",
    "Notification",
    "Role",
    "RoleAlias",
    "User",
]
