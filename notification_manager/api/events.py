"""API routes for event management."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from ..core import SessionDep
from ..models import Event
from ..schemas import (
    BulkDeleteRequest,
    EventCreate,
    EventListParams,
    EventResponse,
    EventUpdate,
    PaginatedResponse,
)
from ..services import EventService

router = APIRouter(prefix="/events", tags=["events"])


def get_event_service(session: SessionDep) -> EventService:
    return EventService(session)


EventServiceDep = Annotated[EventService, Depends(get_event_service)]


def event_to_response(event: Event) -> EventResponse:
    return EventResponse(
        id=event.id,
        name=event.name,
        description=event.description,
        is_active=event.is_active,
        created_at=event.created_at,
        modified_at=event.modified_at,
        application=event.application_id,
    )


@router.get("", response_model=PaginatedResponse)
async def list_events(
    params: Annotated[EventListParams, Query()],
    service: EventServiceDep,
):
    """List an application's non-deleted events."""
    page = await service.list_events(params.application, params)
    return PaginatedResponse(
        current_page=page.current_page,
        last_page=page.last_page,
        total=page.total,
        results=[event_to_response(e) for e in page.items],
    )


@router.get("/{event_id}", response_model=EventResponse)
async def get_event(event_id: UUID, service: EventServiceDep):
    return event_to_response(await service.get(event_id))


@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event(data: EventCreate, service: EventServiceDep):
    """Register an event under an active application."""
    return event_to_response(await service.create_event(data))


@router.patch("/{event_id}", response_model=EventResponse)
async def update_event(event_id: UUID, data: EventUpdate, service: EventServiceDep):
    return event_to_response(await service.update(event_id, data.changes()))


@router.delete("/{event_id}")
async def delete_event(event_id: UUID, service: EventServiceDep):
    """Soft-delete an event and its notification types."""
    await service.delete(event_id)
    return {"detail": "Success"}


@router.delete("")
async def delete_events(data: BulkDeleteRequest, service: EventServiceDep):
    deleted = await service.delete_many(data.ids)
    return {"detail": "Success", "deleted": [e.id for e in deleted]}
