"""Application service: registration, listing and cascading deletion."""

import logging

from sqlalchemy import select

from ..models import ActivityState, Application, Event, NotificationType
from ..schemas import ApplicationCreate, ListParams
from . import activity
from .lifecycle import LifecycleService
from .repository import Page, Repository

logger = logging.getLogger(__name__)


class ApplicationService(LifecycleService[Application]):
    """Service for managing applications, the root of the hierarchy."""

    model = Application
    label = "application"

    async def create_application(self, data: ApplicationCreate) -> Application:
        application = await self.repo.create(
            name=data.name,
            description=data.description,
            state=activity.initial_state(data.is_active),
        )
        logger.info(f"Created application {application.id} ({application.name})")
        return application

    async def list_applications(self, params: ListParams) -> Page[Application]:
        return await self._list(params)

    async def _cascade(self, application: Application) -> None:
        """Delete the application's events and every notification type under them."""
        events = Repository(self.session, Event)
        types = Repository(self.session, NotificationType)

        event_count = await events.update_many(
            [
                Event.application_id == application.id,
                Event.state != ActivityState.DELETED,
            ],
            {"state": ActivityState.DELETED},
        )
        type_count = await types.update_many(
            [
                NotificationType.event_id.in_(
                    select(Event.id).where(Event.application_id == application.id)
                ),
                NotificationType.state != ActivityState.DELETED,
            ],
            {"state": ActivityState.DELETED},
        )

        if event_count or type_count:
            logger.info(
                f"Cascade from application {application.id}: "
                f"{event_count} events, {type_count} notification types deleted"
            )
