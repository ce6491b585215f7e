"""Pydantic schemas for API request/response validation."""

from .base import (
    BulkDeleteRequest,
    EntityResponse,
    ErrorDetail,
    ErrorResponse,
    EventListParams,
    ListParams,
    NotificationTypeListParams,
    NotifyBaseModel,
    PaginatedResponse,
    PatchModel,
    SortField,
)
from .entities import (
    ApplicationCreate,
    ApplicationResponse,
    ApplicationUpdate,
    EventCreate,
    EventResponse,
    EventUpdate,
    NotificationTypeCreate,
    NotificationTypeResponse,
    NotificationTypeUpdate,
)
from .messages import MessageCreate, MessageResponse, TagResponse

__all__ = [
    # Base
    "NotifyBaseModel",
    "PatchModel",
    "EntityResponse",
    "ListParams",
    "EventListParams",
    "NotificationTypeListParams",
    "SortField",
    "PaginatedResponse",
    "BulkDeleteRequest",
    "ErrorDetail",
    "ErrorResponse",
    # Applications
    "ApplicationCreate",
    "ApplicationUpdate",
    "ApplicationResponse",
    # Events
    "EventCreate",
    "EventUpdate",
    "EventResponse",
    # Notification types
    "NotificationTypeCreate",
    "NotificationTypeUpdate",
    "NotificationTypeResponse",
    # Messages
    "MessageCreate",
    "MessageResponse",
    "TagResponse",
]
