"""Append-only ledger of prior file contents.

Every content-mutating save pushes exactly one entry holding the body as it
was *before* the new content is written in. The very first entry is the
founding snapshot: it records the initial content and its author rather than
a prior edit.
"""

from __future__ import annotations

from datetime import datetime

from docledger.domain.entities import File, FileVersion
from docledger.utils import now_in_app_timezone


def founding_snapshot(
    content: str, author_id: int, *, captured_at: datetime | None = None
) -> FileVersion:
    """Return the entry that seeds the ledger of a newly created file."""

    return FileVersion(
        position=0,
        content=content,
        updated_by=author_id,
        captured_at=captured_at or now_in_app_timezone(),
    )


def snapshot(
    file: File, actor_id: int | None, *, captured_at: datetime | None = None
) -> FileVersion:
    """Append the current (pre-mutation) content of ``file`` to its ledger.

    Must be called before ``file.content`` is overwritten.
    """

    entry = FileVersion(
        position=len(file.versions),
        content=file.content,
        updated_by=actor_id,
        captured_at=captured_at or now_in_app_timezone(),
    )
    file.versions.append(entry)
    return entry


def history(file: File) -> tuple[FileVersion, ...]:
    """Return the full ordered ledger, oldest entry first."""

    return tuple(file.versions)


__all__ = ["founding_snapshot", "history", "snapshot"]
