"""Tests for the file store use cases against an in-memory database."""

from __future__ import annotations

import importlib

import pytest

from docledger.application.errors import (
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from docledger.application.use_cases.files import (
    create_file,
    force_update_file,
    get_file,
    list_approved_files,
    list_file_versions,
    list_user_files,
    save_file,
)
from docledger.application.use_cases.notifications import list_notifications
from docledger.domain.entities import FILE_STATUS_APPROVED, FILE_STATUS_DRAFT
from docledger.infrastructure.models import FileModel, FileVersionModel
from docledger.infrastructure.repositories import FileRepository


def _insert_draft(session, author_id: int, name: str = "draft.txt") -> int:
    model = FileModel(name=name, content="wip", author_id=author_id, status=FILE_STATUS_DRAFT)
    model.versions.append(FileVersionModel(position=0, content="wip", updated_by=author_id))
    session.add(model)
    session.commit()
    return model.id


def test_create_then_save_scenario(session, make_user) -> None:
    """An editor creates a file and saves new content over it."""

    editor = make_user("editor")

    created = create_file(session, name="a.txt", content="hello", principal=editor)

    assert created.status == FILE_STATUS_APPROVED
    assert created.author_id == editor.id
    assert created.author is not None and created.author.email == editor.email
    assert len(created.versions) == 1
    assert created.versions[0].content == "hello"
    assert created.versions[0].updated_by == editor.id

    saved = save_file(session, created.id, content="world", principal=editor)

    assert saved.content == "world"
    assert len(saved.versions) == 2
    assert saved.versions[1].content == "hello"
    assert saved.versions[1].updated_by == editor.id


def test_n_saves_produce_n_plus_one_entries(session, make_user) -> None:
    """Each save pushes the previous body; the ledger never holds the live content."""

    editor = make_user("editor")
    contents = ["c0", "c1", "c2", "c3", "c4"]
    file = create_file(session, name="notes.md", content=contents[0], principal=editor)

    for body in contents[1:]:
        file = save_file(session, file.id, content=body, principal=editor)

    versions = list_file_versions(session, file.id)
    assert len(versions) == len(contents)
    for k in range(1, len(contents)):
        assert versions[k].content == contents[k - 1]
    assert [version.position for version in versions] == list(range(len(contents)))
    assert get_file(session, file.id).content == contents[-1]


def test_save_updates_name_only_when_provided(session, make_user) -> None:
    editor = make_user("editor")
    file = create_file(session, name="old.txt", content="x", principal=editor)

    renamed = save_file(session, file.id, content="y", name="new.txt", principal=editor)
    unchanged = save_file(session, file.id, content="z", name="", principal=editor)
    blank = save_file(session, file.id, content="w", name="   ", principal=editor)

    assert renamed.name == "new.txt"
    assert unchanged.name == "new.txt"
    assert unchanged.content == "z"
    assert blank.name == "new.txt"
    assert blank.content == "w"


def test_editor_cannot_save_file_of_another_editor(session, make_user) -> None:
    owner = make_user("editor")
    intruder = make_user("editor")
    file = create_file(session, name="a.txt", content="hello", principal=owner)

    with pytest.raises(ForbiddenError, match="only save your own files"):
        save_file(session, file.id, content="pwned", principal=intruder)

    current = get_file(session, file.id)
    assert current.content == "hello"
    assert len(current.versions) == 1


def test_admin_can_save_any_file(session, make_user) -> None:
    owner = make_user("editor")
    admin = make_user("admin")
    file = create_file(session, name="a.txt", content="hello", principal=owner)

    saved = save_file(session, file.id, content="moderated", principal=admin)

    assert saved.content == "moderated"
    assert saved.versions[-1].content == "hello"
    assert saved.versions[-1].updated_by == admin.id
    assert saved.author_id == owner.id


def test_admin_force_update_skips_ownership(session, make_user) -> None:
    owner = make_user("editor")
    admin = make_user("admin")
    file = create_file(session, name="a.txt", content="hello", principal=owner)

    updated = force_update_file(session, file.id, content="forced", principal=admin)

    assert updated.content == "forced"
    assert [version.content for version in updated.versions] == ["hello", "hello"]
    assert updated.name == "a.txt"


def test_force_update_is_admin_only(session, make_user) -> None:
    owner = make_user("editor")
    file = create_file(session, name="a.txt", content="hello", principal=owner)

    with pytest.raises(ForbiddenError):
        force_update_file(session, file.id, content="nope", principal=owner)


def test_viewer_cannot_create_files(session, make_user) -> None:
    viewer = make_user("viewer")

    with pytest.raises(ForbiddenError):
        create_file(session, name="a.txt", content="hello", principal=viewer)


@pytest.mark.parametrize(
    ("name", "content"),
    [(None, "body"), ("   ", "body"), ("a.txt", None)],
)
def test_create_requires_name_and_content(session, make_user, name, content) -> None:
    editor = make_user("editor")

    with pytest.raises(ValidationError):
        create_file(session, name=name, content=content, principal=editor)


def test_missing_files_raise_not_found(session, make_user) -> None:
    editor = make_user("editor")
    admin = make_user("admin")

    with pytest.raises(NotFoundError):
        get_file(session, 404)
    with pytest.raises(NotFoundError):
        save_file(session, 404, content="x", principal=editor)
    with pytest.raises(NotFoundError):
        force_update_file(session, 404, content="x", principal=admin)


def test_listings_scope_by_status_and_author(session, make_user) -> None:
    """Drafts stay out of the approved listing but appear in the author's list."""

    first = make_user("editor")
    second = make_user("editor")
    mine = create_file(session, name="mine.txt", content="1", principal=first)
    theirs = create_file(session, name="theirs.txt", content="2", principal=second)
    draft_id = _insert_draft(session, first.id)
    other_draft_id = _insert_draft(session, second.id, name="other.txt")

    approved_ids = {file.id for file in list_approved_files(session)}
    my_ids = {file.id for file in list_user_files(session, first.id)}

    assert approved_ids == {mine.id, theirs.id}
    assert my_ids == {mine.id, draft_id}
    assert other_draft_id not in approved_ids | my_ids


def test_listing_orders_by_most_recent_update(session, make_user) -> None:
    editor = make_user("editor")
    older = create_file(session, name="older.txt", content="1", principal=editor)
    newer = create_file(session, name="newer.txt", content="2", principal=editor)

    save_file(session, older.id, content="1b", principal=editor)

    assert [file.id for file in list_approved_files(session)] == [older.id, newer.id]


def test_get_is_stable_without_mutation(session, make_user) -> None:
    editor = make_user("editor")
    file = create_file(session, name="a.txt", content="hello", principal=editor)
    save_file(session, file.id, content="world", principal=editor)

    first = get_file(session, file.id)
    second = get_file(session, file.id)

    assert first.content == second.content
    assert len(first.versions) == len(second.versions)


def test_author_is_notified_when_someone_else_updates(session, make_user) -> None:
    owner = make_user("editor")
    admin = make_user("admin")
    file = create_file(session, name="a.txt", content="hello", principal=owner)

    save_file(session, file.id, content="self edit", principal=owner)
    force_update_file(session, file.id, content="admin edit", principal=admin)

    notifications = list_notifications(session, principal=owner)
    assert len(notifications) == 1
    assert notifications[0].file_id == file.id
    assert notifications[0].event_type == "file_updated"


def test_save_of_file_deleted_meanwhile_raises_not_found(
    session, make_user, monkeypatch
) -> None:
    """A row removed between fetch and write surfaces as not found and rolls back."""

    owner = make_user("editor")
    admin = make_user("admin")
    file = create_file(session, name="a.txt", content="hello", principal=owner)
    update_module = importlib.import_module(
        "docledger.application.use_cases.files.update_file"
    )
    fetch = update_module.get_file

    def fetch_then_lose_row(session_, file_id):
        stale = fetch(session_, file_id)
        FileRepository(session_).delete(file_id)
        return stale

    monkeypatch.setattr(update_module, "get_file", fetch_then_lose_row)

    with pytest.raises(NotFoundError, match="File not found"):
        save_file(session, file.id, content="late", principal=admin)

    assert list_notifications(session, principal=owner) == []
    with pytest.raises(NotFoundError):
        get_file(session, file.id)
