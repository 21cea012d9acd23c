"""Schemas for file endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class FileAuthorRead(BaseModel):
    id: int
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class FileVersionRead(BaseModel):
    position: int
    content: str
    updated_by: int | None
    captured_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class FileRead(BaseModel):
    id: int
    name: str
    content: str
    author_id: int
    author: FileAuthorRead | None
    status: str
    versions: list[FileVersionRead]
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class FileCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    content: str


class FileForceUpdate(BaseModel):
    content: str

    model_config = ConfigDict(extra="forbid")


class FileSave(BaseModel):
    content: str
    name: str | None = Field(default=None, max_length=255)

    model_config = ConfigDict(extra="forbid")


class FileDeleteResponse(BaseModel):
    message: str
