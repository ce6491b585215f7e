"""
Message composition: the only way a Message is created.

compose_message walks the ownership chain before rendering:

1. notification type id supplied
2. notification type exists (not deleted) and is active
3. its event exists (missing row = corrupt data) and is active
4. the event's application exists (missing row = corrupt data) and is active
5. render the template with the supplied metadata
6. persist the message

Ancestors are loaded including deleted rows so that a soft-deleted ancestor
reads as "inactive" rather than as corruption.
"""

import logging
from typing import Any, Mapping
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Application, Event, Message, NotificationType
from . import activity
from .errors import IntegrityError, NotFoundError, ValidationError
from .renderer import render
from .repository import Repository

logger = logging.getLogger(__name__)


class MessageService:
    """Service for composing and reading messages."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.messages = Repository(session, Message)
        self.notification_types = Repository(session, NotificationType)
        self.events = Repository(session, Event)
        self.applications = Repository(session, Application)

    async def compose_message(
        self,
        notification_type_id: UUID | None,
        email: str,
        metadata: Mapping[str, Any] | None = None,
    ) -> Message:
        """Render a notification type for ``email`` and store the result."""
        if not notification_type_id:
            raise ValidationError(
                '"notification_type" (notification type ID) is required',
                field="notification_type",
            )

        notification_type = await self.notification_types.get(notification_type_id)
        if notification_type is None:
            raise ValidationError(
                "The notification type with the given ID was not found.",
                field="notification_type",
            )
        if not activity.is_live(notification_type.state):
            raise ValidationError("The notification type is inactive.", field="notification_type")

        event = await self.events.get(notification_type.event_id, include_deleted=True)
        if event is None:
            logger.error(
                f"Unknown event {notification_type.event_id} "
                f"referenced by notification type {notification_type.id}"
            )
            raise IntegrityError(
                f"Unknown event with ID: {notification_type.event_id} "
                f"found in notification type: {notification_type.id}"
            )
        if not activity.is_live(event.state):
            raise ValidationError("The event for this notification type is inactive.")

        application = await self.applications.get(event.application_id, include_deleted=True)
        if application is None:
            logger.error(
                f"Unknown application {event.application_id} referenced by event {event.id} "
                f"(notification type {notification_type.id})"
            )
            raise IntegrityError(
                f"Unknown application with ID: {event.application_id} found. "
                f"[event: {event.id}, notification type: {notification_type.id}]"
            )
        if not activity.is_live(application.state):
            raise ValidationError("The application for this notification type is inactive.")

        rendered = render(
            notification_type.template_subject,
            notification_type.template_body,
            notification_type.tags,
            metadata,
        )

        message = await self.messages.create(
            subject=rendered.subject,
            body=rendered.body,
            email=email,
            notification_type_id=notification_type.id,
        )
        logger.info(f"Composed message {message.id} from notification type {notification_type.id}")
        return message

    async def get_message(self, message_id: UUID) -> Message:
        message = await self.messages.get(message_id)
        if message is None:
            raise NotFoundError("The message with the given ID was not found.")
        return message
