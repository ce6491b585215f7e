"""Business logic services for the notification manager."""

from .activity import activate, apply_flags, deactivate, delete, initial_state
from .applications import ApplicationService
from .errors import (
    IntegrityError,
    InvalidTransitionError,
    NotFoundError,
    NotificationError,
    StoreError,
    ValidationError,
)
from .events import EventService
from .messages import MessageService
from .notification_types import NotificationTypeService, list_tags, register_tags
from .pagination import PageWindow, page_window
from .renderer import RenderedTemplate, render
from .repository import Page, Repository
from .tags import extract_tags

__all__ = [
    # Entity services
    "ApplicationService",
    "EventService",
    "NotificationTypeService",
    "MessageService",
    "register_tags",
    "list_tags",
    # Core pipeline
    "extract_tags",
    "render",
    "RenderedTemplate",
    "activate",
    "deactivate",
    "delete",
    "apply_flags",
    "initial_state",
    # Repository
    "Repository",
    "Page",
    "PageWindow",
    "page_window",
    # Errors
    "NotificationError",
    "ValidationError",
    "InvalidTransitionError",
    "NotFoundError",
    "IntegrityError",
    "StoreError",
]
