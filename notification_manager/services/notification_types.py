"""Notification type service: templates whose tags are derived from the body."""

import logging
from typing import Any, Iterable
from uuid import UUID

from sqlalchemy import select

from ..models import NotificationType, Tag
from ..schemas import ListParams, NotificationTypeCreate
from . import activity
from .errors import ValidationError
from .events import EventService
from .lifecycle import LifecycleService
from .repository import Page, Repository
from .tags import extract_tags

logger = logging.getLogger(__name__)


class NotificationTypeService(LifecycleService[NotificationType]):
    """Service for managing notification types."""

    model = NotificationType
    label = "notification type"

    async def create_notification_type(self, data: NotificationTypeCreate) -> NotificationType:
        event = await self._require_live_parent(EventService(self.session), data.event)

        tags = extract_tags(data.template_body)
        await register_tags(self.session, tags)

        notification_type = await self.repo.create(
            name=data.name,
            description=data.description,
            template_subject=data.template_subject,
            template_body=data.template_body,
            tags=tags,
            state=activity.initial_state(data.is_active),
            event_id=event.id,
        )
        logger.info(f"Created notification type {notification_type.id} with tags {tags}")
        return notification_type

    async def list_notification_types(
        self, event_id: UUID | None, params: ListParams
    ) -> Page[NotificationType]:
        if event_id is None:
            raise ValidationError('"event" (event ID) is required', field="event")
        return await self._list(params, NotificationType.event_id == event_id)

    async def _prepare_patch(
        self, entity: NotificationType, changes: dict[str, Any]
    ) -> dict[str, Any]:
        # tags always track the body
        if changes.get("template_body") is not None:
            changes["tags"] = extract_tags(changes["template_body"])
            await register_tags(self.session, changes["tags"])
        return changes


# =============================================================================
# TAG REGISTRY
# =============================================================================


async def register_tags(session, labels: Iterable[str]) -> None:
    """Record any labels not already in the tag registry.

    Existing labels are skipped by the insert itself, so concurrent
    registrations of the same new label both succeed.
    """
    wanted = list(dict.fromkeys(labels))
    await Repository(session, Tag).insert_missing(
        [{"label": label} for label in wanted], key="label"
    )


async def list_tags(session) -> list[Tag]:
    result = await session.execute(select(Tag).order_by(Tag.label))
    return list(result.scalars().all())
