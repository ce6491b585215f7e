"""Event service: events belong to an application."""

import logging
from typing import Any
from uuid import UUID

from ..models import ActivityState, Event, NotificationType
from ..schemas import EventCreate, ListParams
from . import activity
from .applications import ApplicationService
from .errors import ValidationError
from .lifecycle import LifecycleService
from .repository import Page, Repository

logger = logging.getLogger(__name__)


class EventService(LifecycleService[Event]):
    """Service for managing events."""

    model = Event
    label = "event"

    async def create_event(self, data: EventCreate) -> Event:
        application = await self._require_live_parent(
            ApplicationService(self.session), data.application
        )
        event = await self.repo.create(
            name=data.name,
            description=data.description,
            state=activity.initial_state(data.is_active),
            application_id=application.id,
        )
        logger.info(f"Created event {event.id} ({event.name}) under application {application.id}")
        return event

    async def list_events(self, application_id: UUID | None, params: ListParams) -> Page[Event]:
        if application_id is None:
            raise ValidationError('"application" (application ID) is required', field="application")
        return await self._list(params, Event.application_id == application_id)

    async def _prepare_patch(self, entity: Event, changes: dict[str, Any]) -> dict[str, Any]:
        if "application" in changes:
            application = await self._require_live_parent(
                ApplicationService(self.session), changes.pop("application")
            )
            changes["application_id"] = application.id
            logger.info(f"Moving event {entity.id} to application {application.id}")
        return changes

    async def _cascade(self, event: Event) -> None:
        count = await Repository(self.session, NotificationType).update_many(
            [
                NotificationType.event_id == event.id,
                NotificationType.state != ActivityState.DELETED,
            ],
            {"state": ActivityState.DELETED},
        )
        if count:
            logger.info(f"Cascade from event {event.id}: {count} notification types deleted")
