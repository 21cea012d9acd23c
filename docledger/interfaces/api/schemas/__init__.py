from .auth import Token
from .edit import EditCreate, EditRead
from .file import (
    FileAuthorRead,
    FileCreate,
    FileDeleteResponse,
    FileForceUpdate,
    FileRead,
    FileSave,
    FileVersionRead,
)
from .notification import NotificationMarkRead, NotificationRead

__all__ = [
    "EditCreate",
    "EditRead",
    "FileAuthorRead",
    "FileCreate",
    "FileDeleteResponse",
    "FileForceUpdate",
    "FileRead",
    "FileSave",
    "FileVersionRead",
    "NotificationMarkRead",
    "NotificationRead",
    "Token",
]
