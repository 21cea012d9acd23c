"""Use case for creating users."""

from sqlalchemy.orm import Session

from docledger.domain.entities import RoleAlias, User
from docledger.infrastructure.repositories import RoleRepository, UserRepository
from docledger.infrastructure.security import get_password_hash
from docledger.utils import now_in_app_timezone

ROLE_NAMES: dict[RoleAlias, str] = {
    RoleAlias.ADMIN: "Administrator",
    RoleAlias.EDITOR: "Editor",
    RoleAlias.VIEWER: "Viewer",
}


def ensure_default_roles(session: Session) -> None:
    """Make sure every role known to the access policy exists."""

    repository = RoleRepository(session)
    for alias, name in ROLE_NAMES.items():
        repository.ensure(name=name, alias=alias.value)


def create_user(
    session: Session,
    *,
    name: str,
    email: str,
    password: str,
    role_alias: str = RoleAlias.VIEWER.value,
) -> User:
    """Create a new user ensuring unique email addresses."""

    repository = UserRepository(session)
    if repository.get_by_email(email):
        raise ValueError("Email address is already registered")

    ensure_default_roles(session)
    role = RoleRepository(session).get_by_alias(role_alias)
    if role is None:
        raise ValueError("Role not found")

    user = User(
        id=None,
        role=role,
        name=name,
        email=email,
        password=get_password_hash(password),
        is_active=True,
        created_at=now_in_app_timezone(),
    )
    return repository.create(user)
