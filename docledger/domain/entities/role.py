"""Domain entity representing a user role."""

from dataclasses import dataclass
from enum import Enum


class RoleAlias(str, Enum):
    """Roles recognised by the access policy."""

    ADMIN = "admin"
    EDITOR = "editor"
    VIEWER = "viewer"

    @classmethod
    def parse(cls, alias: str | None) -> "RoleAlias":
        """Return the role for ``alias``; unknown aliases carry no privileges."""

        try:
            return cls((alias or "").strip().lower())
        except ValueError:
            return cls.VIEWER


@dataclass
class Role:
    """Core attributes describing a role that can be assigned to a user."""

    id: int
    name: str
    alias: str


__all__ = ["Role", "RoleAlias"]
