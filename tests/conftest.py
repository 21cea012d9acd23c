"""Shared fixtures: an isolated in-memory database and user factories."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("ACCESS_TOKEN_EXPIRE_MINUTES", "30")
os.environ["APP_TIMEZONE"] = "UTC"

from docledger.config import get_settings  # noqa: E402

get_settings.cache_clear()

from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from docledger.domain.entities import User  # noqa: E402
from docledger.infrastructure import models  # noqa: E402,F401
from docledger.infrastructure.database import Base  # noqa: E402
from docledger.infrastructure.models import RoleModel, UserModel  # noqa: E402
from docledger.infrastructure.repositories import UserRepository  # noqa: E402
from docledger.infrastructure.security import create_access_token  # noqa: E402


@pytest.fixture()
def engine():
    """Return a fresh in-memory database shared by every connection of the test."""

    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture()
def session_factory(engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def session(session_factory) -> Iterator[Session]:
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def make_user(session: Session) -> Callable[..., User]:
    """Return a factory inserting a user with the given role alias."""

    counter = {"value": 0}

    def factory(alias: str, *, name: str | None = None, email: str | None = None) -> User:
        role = session.query(RoleModel).filter_by(alias=alias).first()
        if role is None:
            role = RoleModel(name=alias.title(), alias=alias)
            session.add(role)
            session.commit()
            session.refresh(role)

        counter["value"] += 1
        number = counter["value"]
        model = UserModel(
            role_id=role.id,
            name=name or f"{alias.title()} {number}",
            email=email or f"{alias}{number}@example.com",
            password="not-a-real-hash",
            is_active=True,
        )
        session.add(model)
        session.commit()
        return UserRepository(session).get(model.id)

    return factory


@pytest.fixture()
def auth_headers() -> Callable[[User], dict[str, str]]:
    def build(user: User) -> dict[str, str]:
        token = create_access_token({"sub": user.email, "role": user.role.alias})
        return {"Authorization": f"Bearer {token}"}

    return build
