"""SQLAlchemy Base and common model utilities."""

from datetime import datetime, timezone
from enum import Enum as PyEnum
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Enum, MetaData, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Naming convention for constraints (helps with migrations)
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=convention)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ActivityState(str, PyEnum):
    """Lifecycle state shared by applications, events and notification types.

    DELETED implies inactive; there is no deleted-but-active combination.
    """

    ACTIVE = "active"
    INACTIVE = "inactive"
    DELETED = "deleted"


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    metadata = metadata

    # Type annotation map for common types
    type_annotation_map = {
        UUID: Uuid(as_uuid=True),
        datetime: DateTime(timezone=True),
    }


class UUIDMixin:
    """Mixin that adds a UUID primary key."""

    id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid4,
    )


class TimestampMixin:
    """Mixin that adds created_at and modified_at timestamps.

    Timestamps are set client-side so they are available right after a
    flush without a refresh round-trip.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
    )
    modified_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
    )


class ActivityMixin:
    """Mixin for entities governed by the activation / soft-delete lifecycle."""

    state: Mapped[ActivityState] = mapped_column(
        Enum(
            ActivityState,
            name="activity_state",
            values_callable=lambda x: [e.value for e in x],
        ),
        default=ActivityState.INACTIVE,
        nullable=False,
        index=True,
    )

    @property
    def is_active(self) -> bool:
        return self.state == ActivityState.ACTIVE

    @property
    def is_deleted(self) -> bool:
        return self.state == ActivityState.DELETED
