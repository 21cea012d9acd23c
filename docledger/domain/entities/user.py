"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime

from .role import Role, RoleAlias


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    role: Role
    name: str
    email: str
    password: str
    is_active: bool
    created_at: datetime | None

    @property
    def role_alias(self) -> RoleAlias:
        return RoleAlias.parse(self.role.alias)


__all__ = ["User"]
