"""ORM models used by the application infrastructure."""

from .edit import EditModel
from .file import FileModel, FileVersionModel
from .notification import NotificationModel
from .role import RoleModel
from .user import UserModel

__all__ = [
    "EditModel",
    "FileModel",
    "FileVersionModel",
    "NotificationModel",
    "RoleModel",
    "UserModel",
]
