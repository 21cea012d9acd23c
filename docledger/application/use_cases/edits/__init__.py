"""Use cases for edits proposed against files."""

from .list_file_edits import list_file_edits
from .propose_edit import propose_edit

__all__ = ["list_file_edits", "propose_edit"]
