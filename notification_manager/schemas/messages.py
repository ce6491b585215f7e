"""Pydantic schemas for composed messages and tags."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import EmailStr, Field

from .base import NotifyBaseModel


class MessageCreate(NotifyBaseModel):
    """Compose a message from a notification type."""

    notification_type: UUID | None = Field(
        default=None,
        description="Notification type whose template is rendered",
    )
    email: EmailStr
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        description="Values for the template's {{placeholders}}",
    )


class MessageResponse(NotifyBaseModel):
    """A rendered message."""

    id: UUID
    subject: str
    body: str
    email: str
    notification_type: UUID
    created_at: datetime


class TagResponse(NotifyBaseModel):
    id: UUID
    label: str
