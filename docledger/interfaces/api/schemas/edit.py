"""Schemas for edit endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class EditCreate(BaseModel):
    content: str
    message: str | None = Field(default=None, max_length=255)


class EditRead(BaseModel):
    id: int
    file_id: int
    user_id: int
    content: str
    message: str | None
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)
