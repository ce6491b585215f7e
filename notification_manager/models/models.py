"""SQLAlchemy ORM Models for the notification manager.

Ownership hierarchy: Application -> Event -> NotificationType -> Message.
Rows are never removed; deletion is a state transition (see ActivityMixin).
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import JSON, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import ActivityMixin, Base, TimestampMixin, UUIDMixin, utcnow


# =============================================================================
# APPLICATIONS & EVENTS
# =============================================================================


class Application(Base, UUIDMixin, TimestampMixin, ActivityMixin):
    """Top-level owner of events."""

    __tablename__ = "applications"

    name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    description: Mapped[str] = mapped_column(String(255), default="", nullable=False)

    events: Mapped[list["Event"]] = relationship(back_populates="application")

    def __repr__(self) -> str:
        return f"<Application {self.name} ({self.state.value if self.state else None})>"


class Event(Base, UUIDMixin, TimestampMixin, ActivityMixin):
    """A named trigger under an application."""

    __tablename__ = "events"

    name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    description: Mapped[str] = mapped_column(String(255), default="", nullable=False)
    application_id: Mapped[UUID] = mapped_column(
        ForeignKey("applications.id"), nullable=False, index=True
    )

    application: Mapped["Application"] = relationship(back_populates="events")
    notification_types: Mapped[list["NotificationType"]] = relationship(
        back_populates="event"
    )

    def __repr__(self) -> str:
        return f"<Event {self.name} ({self.state.value if self.state else None})>"


# =============================================================================
# NOTIFICATION TYPES & TAGS
# =============================================================================


class NotificationType(Base, UUIDMixin, TimestampMixin, ActivityMixin):
    """A reusable message template tied to an event.

    ``tags`` mirrors the ``{{placeholder}}`` names found in ``template_body``
    and is recomputed by the service layer whenever the body changes.
    """

    __tablename__ = "notification_types"

    name: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str] = mapped_column(String(255), default="", nullable=False)
    template_subject: Mapped[str] = mapped_column(Text, default="", nullable=False)
    template_body: Mapped[str] = mapped_column(Text, default="", nullable=False)
    tags: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    event_id: Mapped[UUID] = mapped_column(
        ForeignKey("events.id"), nullable=False, index=True
    )

    event: Mapped["Event"] = relationship(back_populates="notification_types")

    def __repr__(self) -> str:
        return f"<NotificationType {self.name} tags={self.tags}>"


class Tag(Base, UUIDMixin):
    """Registry of every placeholder label declared by a notification type."""

    __tablename__ = "tags"

    label: Mapped[str] = mapped_column(Text, unique=True, nullable=False)


# =============================================================================
# MESSAGES
# =============================================================================


class Message(Base, UUIDMixin):
    """A rendered, recipient-addressed instance of a notification type.

    Immutable once created.
    """

    __tablename__ = "messages"

    subject: Mapped[str] = mapped_column(Text, default="", nullable=False)
    body: Mapped[str] = mapped_column(Text, default="", nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    notification_type_id: Mapped[UUID] = mapped_column(
        ForeignKey("notification_types.id"), nullable=False, index=True
    )
    created_at: Mapped[datetime] = mapped_column(default=utcnow, nullable=False)

    notification_type: Mapped["NotificationType"] = relationship()
