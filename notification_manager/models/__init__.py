"""SQLAlchemy ORM Models for the notification manager."""

from .base import ActivityMixin, ActivityState, Base, TimestampMixin, UUIDMixin
from .models import (
    Application,
    Event,
    Message,
    NotificationType,
    Tag,
)

__all__ = [
    # Base
    "Base",
    "UUIDMixin",
    "TimestampMixin",
    "ActivityMixin",
    # Enums
    "ActivityState",
    # Hierarchy
    "Application",
    "Event",
    "NotificationType",
    "Tag",
    "Message",
]
