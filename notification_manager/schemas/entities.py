"""Pydantic schemas for applications, events and notification types."""

from uuid import UUID

from pydantic import Field

from .base import EntityResponse, NotifyBaseModel, PatchModel


# =============================================================================
# APPLICATIONS
# =============================================================================


class ApplicationCreate(NotifyBaseModel):
    """Request to register an application."""

    name: str = Field(..., min_length=3, max_length=50)
    description: str = Field(default="", max_length=255)
    is_active: bool = False


class ApplicationUpdate(PatchModel):
    """Partial update of an application."""

    name: str | None = Field(default=None, min_length=3, max_length=50)
    description: str | None = Field(default=None, max_length=255)
    is_active: bool | None = None
    is_deleted: bool | None = None


class ApplicationResponse(EntityResponse):
    """Application as returned by the API."""
    pass


# =============================================================================
# EVENTS
# =============================================================================


class EventCreate(NotifyBaseModel):
    """Request to register an event under an application."""

    name: str = Field(..., min_length=3, max_length=50)
    description: str = Field(default="", max_length=255)
    is_active: bool = False
    application: UUID | None = Field(default=None, description="Owning application ID")


class EventUpdate(PatchModel):
    """Partial update of an event. ``application`` moves it to another application."""

    name: str | None = Field(default=None, min_length=3, max_length=50)
    description: str | None = Field(default=None, max_length=255)
    is_active: bool | None = None
    is_deleted: bool | None = None
    application: UUID | None = Field(default=None, description="New owning application ID")


class EventResponse(EntityResponse):
    """Event as returned by the API."""

    application: UUID


# =============================================================================
# NOTIFICATION TYPES
# =============================================================================


class NotificationTypeCreate(NotifyBaseModel):
    """Request to register a notification type under an event.

    ``tags`` are never accepted from the caller; they are derived from
    ``template_body``.
    """

    name: str = Field(..., min_length=3, max_length=50)
    description: str = Field(default="", max_length=255)
    template_subject: str = Field(..., min_length=1)
    template_body: str = Field(..., min_length=1)
    is_active: bool = False
    event: UUID | None = Field(default=None, description="Owning event ID")


class NotificationTypeUpdate(PatchModel):
    """Partial update of a notification type."""

    name: str | None = Field(default=None, min_length=3, max_length=50)
    description: str | None = Field(default=None, max_length=255)
    template_subject: str | None = Field(default=None, min_length=1)
    template_body: str | None = Field(default=None, min_length=1)
    is_active: bool | None = None
    is_deleted: bool | None = None


class NotificationTypeResponse(EntityResponse):
    """Notification type as returned by the API."""

    template_subject: str
    template_body: str
    tags: list[str]
    event: UUID
