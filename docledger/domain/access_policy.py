"""Role and ownership rules deciding which file operations a principal may run."""

from __future__ import annotations

from enum import Enum, auto
from typing import Protocol

from docledger.domain.entities import RoleAlias


class Principal(Protocol):
    """Authenticated caller as seen by the policy."""

    id: int | None

    @property
    def role_alias(self) -> RoleAlias: ...


class FileOperation(Enum):
    LIST_APPROVED = auto()
    LIST_MINE = auto()
    READ = auto()
    CREATE = auto()
    FORCE_UPDATE = auto()
    SAVE = auto()
    DELETE = auto()
    PROPOSE_EDIT = auto()
    LIST_EDITS = auto()


class AccessDecision(Enum):
    ALLOWED = auto()
    FORBIDDEN = auto()

    @property
    def allowed(self) -> bool:
        return self is AccessDecision.ALLOWED


_ANY_ROLE = frozenset(RoleAlias)
_WRITERS = frozenset({RoleAlias.EDITOR, RoleAlias.ADMIN})
_ADMINS = frozenset({RoleAlias.ADMIN})

_ROLE_RULES: dict[FileOperation, frozenset[RoleAlias]] = {
    FileOperation.LIST_APPROVED: _ANY_ROLE,
    FileOperation.LIST_MINE: _ANY_ROLE,
    FileOperation.READ: _ANY_ROLE,
    FileOperation.CREATE: _WRITERS,
    FileOperation.FORCE_UPDATE: _ADMINS,
    FileOperation.SAVE: _WRITERS,
    # Any editor may delete any file, including files they do not own. This
    # differs from SAVE and is kept until the product owners confirm intent.
    FileOperation.DELETE: _WRITERS,
    FileOperation.PROPOSE_EDIT: _ANY_ROLE,
    FileOperation.LIST_EDITS: _ANY_ROLE,
}

# Operations where non-admin callers must own the resource.
_OWNER_RULES: dict[FileOperation, frozenset[RoleAlias]] = {
    FileOperation.SAVE: frozenset({RoleAlias.EDITOR}),
    FileOperation.LIST_EDITS: frozenset({RoleAlias.EDITOR, RoleAlias.VIEWER}),
}


def allowed_roles(operation: FileOperation) -> frozenset[RoleAlias]:
    """Return the roles that may attempt ``operation`` before ownership is checked."""

    return _ROLE_RULES[operation]


def decide(
    principal: Principal,
    operation: FileOperation,
    *,
    owner_id: int | None = None,
) -> AccessDecision:
    """Return whether ``principal`` may perform ``operation``.

    ``owner_id`` is the author of the targeted file and is only consulted for
    operations with an ownership rule. This function never raises; callers
    translate :attr:`AccessDecision.FORBIDDEN` into their own error.
    """

    role = principal.role_alias
    if role not in _ROLE_RULES[operation]:
        return AccessDecision.FORBIDDEN

    if role in _OWNER_RULES.get(operation, frozenset()):
        if principal.id is None or principal.id != owner_id:
            return AccessDecision.FORBIDDEN

    return AccessDecision.ALLOWED


__all__ = [
    "AccessDecision",
    "FileOperation",
    "Principal",
    "allowed_roles",
    "decide",
]
