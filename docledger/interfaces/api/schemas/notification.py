"""Schemas for notification endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class NotificationRead(BaseModel):
    id: int
    recipient_id: int
    file_id: int | None
    event_type: str
    title: str
    message: str
    created_at: datetime | None
    read_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class NotificationMarkRead(BaseModel):
    ids: list[int] = Field(default_factory=list)
