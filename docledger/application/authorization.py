"""Bridge between the pure access policy and the use cases."""

import logging

from docledger.domain.access_policy import FileOperation, Principal, allowed_roles, decide

from .errors import ForbiddenError

logger = logging.getLogger(__name__)


def require_permission(
    principal: Principal,
    operation: FileOperation,
    *,
    owner_id: int | None = None,
    message: str = "Not authorized",
) -> None:
    """Raise :class:`ForbiddenError` unless the policy allows ``operation``."""

    decision = decide(principal, operation, owner_id=owner_id)
    if not decision.allowed:
        logger.info(
            "Denied %s for user %s (role=%s, owner=%s)",
            operation.name,
            principal.id,
            principal.role_alias.value,
            owner_id,
        )
        raise ForbiddenError(message, decision=decision)


def require_role(principal: Principal, operation: FileOperation) -> None:
    """Raise :class:`ForbiddenError` when the role alone rules out ``operation``."""

    if principal.role_alias not in allowed_roles(operation):
        logger.info(
            "Denied %s for user %s: role %s not permitted",
            operation.name,
            principal.id,
            principal.role_alias.value,
        )
        raise ForbiddenError("Not authorized")


__all__ = ["require_permission", "require_role"]
