"""Base schemas and common types for the notification manager API."""

from datetime import datetime
from typing import Any, Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# BASE SCHEMAS
# =============================================================================


class NotifyBaseModel(BaseModel):
    """Base model with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,  # Enable ORM mode
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class PatchModel(NotifyBaseModel):
    """Base for partial updates: unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")

    def changes(self) -> dict[str, Any]:
        """Only the fields the caller actually sent, ignoring nulls."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class EntityResponse(NotifyBaseModel):
    """Fields shared by applications, events and notification types."""

    id: UUID
    name: str
    description: str
    is_active: bool
    created_at: datetime
    modified_at: datetime


# =============================================================================
# LISTING
# =============================================================================


SortField = Literal["name", "created_at", "modified_at", "is_active"]


class ListParams(BaseModel):
    """Query parameters accepted by every list endpoint."""

    like: str | None = Field(default=None, description="Case-insensitive name substring")
    sort_by: SortField = "name"
    sort_order: int = Field(default=1, description="-1 for descending, anything else ascending")
    page_number: int = Field(default=0, description="0 or less returns every row")
    page_size: int | None = Field(
        default=None, description="Clamped to at least 1; defaults to the configured page size"
    )
    is_active: bool = True


class EventListParams(ListParams):
    """Events are always listed within one application."""

    application: UUID | None = Field(default=None, description="Owning application ID (required)")


class NotificationTypeListParams(ListParams):
    """Notification types are always listed within one event."""

    event: UUID | None = Field(default=None, description="Owning event ID (required)")


class PaginatedResponse(NotifyBaseModel):
    """Wrapper for paginated responses."""

    current_page: int
    last_page: int
    total: int
    results: list[Any]


class BulkDeleteRequest(NotifyBaseModel):
    """Ids of entities to delete in one call."""

    ids: list[UUID] = Field(..., min_length=1)


# =============================================================================
# ERROR RESPONSES
# =============================================================================


class ErrorDetail(NotifyBaseModel):
    """Detailed error information."""

    field: str | None = None
    message: str
    code: str


class ErrorResponse(NotifyBaseModel):
    """Standard error response format."""

    error: str
    message: str
    details: list[ErrorDetail] = []
