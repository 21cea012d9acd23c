"""Use cases for managing shared files."""

from .create_file import create_file
from .delete_file import FileDeletion, delete_file
from .get_file import get_file, list_file_versions
from .list_files import list_approved_files, list_user_files
from .update_file import force_update_file, save_file

__all__ = [
    "FileDeletion",
    "create_file",
    "delete_file",
    "force_update_file",
    "get_file",
    "list_approved_files",
    "list_file_versions",
    "list_user_files",
    "save_file",
]
