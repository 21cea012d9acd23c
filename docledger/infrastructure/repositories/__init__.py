"""Repository implementations for infrastructure layer."""

from .edit_repository import EditRepository
from .file_repository import FileRepository
from .notification_repository import NotificationRepository
from .role_repository import RoleRepository
from .user_repository import UserRepository

__all__ = [
    "EditRepository",
    "FileRepository",
    "NotificationRepository",
    "RoleRepository",
    "UserRepository",
]
