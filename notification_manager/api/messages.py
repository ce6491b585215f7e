"""API routes for composing messages."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, status

from ..core import SessionDep
from ..models import Message
from ..schemas import MessageCreate, MessageResponse
from ..services import MessageService

router = APIRouter(prefix="/messages", tags=["messages"])


def get_message_service(session: SessionDep) -> MessageService:
    return MessageService(session)


MessageServiceDep = Annotated[MessageService, Depends(get_message_service)]


def message_to_response(message: Message) -> MessageResponse:
    return MessageResponse(
        id=message.id,
        subject=message.subject,
        body=message.body,
        email=message.email,
        notification_type=message.notification_type_id,
        created_at=message.created_at,
    )


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def create_message(data: MessageCreate, service: MessageServiceDep):
    """
    Compose a message from a notification type.

    The notification type, its event and the event's application must all be
    active, and metadata must supply every tag the template declares.
    """
    message = await service.compose_message(
        notification_type_id=data.notification_type,
        email=str(data.email),
        metadata=data.metadata,
    )
    return message_to_response(message)


@router.get("/{message_id}", response_model=MessageResponse)
async def get_message(message_id: UUID, service: MessageServiceDep):
    return message_to_response(await service.get_message(message_id))
