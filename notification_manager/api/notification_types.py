"""API routes for notification types and the tag registry."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from ..core import SessionDep
from ..models import NotificationType
from ..schemas import (
    BulkDeleteRequest,
    NotificationTypeCreate,
    NotificationTypeListParams,
    NotificationTypeResponse,
    NotificationTypeUpdate,
    PaginatedResponse,
    TagResponse,
)
from ..services import NotificationTypeService, list_tags

router = APIRouter(prefix="/notification-types", tags=["notification-types"])
tags_router = APIRouter(prefix="/tags", tags=["tags"])


def get_notification_type_service(session: SessionDep) -> NotificationTypeService:
    return NotificationTypeService(session)


NotificationTypeServiceDep = Annotated[
    NotificationTypeService, Depends(get_notification_type_service)
]


def notification_type_to_response(nt: NotificationType) -> NotificationTypeResponse:
    return NotificationTypeResponse(
        id=nt.id,
        name=nt.name,
        description=nt.description,
        template_subject=nt.template_subject,
        template_body=nt.template_body,
        tags=nt.tags,
        is_active=nt.is_active,
        created_at=nt.created_at,
        modified_at=nt.modified_at,
        event=nt.event_id,
    )


@router.get("", response_model=PaginatedResponse)
async def list_notification_types(
    params: Annotated[NotificationTypeListParams, Query()],
    service: NotificationTypeServiceDep,
):
    """List an event's non-deleted notification types."""
    page = await service.list_notification_types(params.event, params)
    return PaginatedResponse(
        current_page=page.current_page,
        last_page=page.last_page,
        total=page.total,
        results=[notification_type_to_response(nt) for nt in page.items],
    )


@router.get("/{notification_type_id}", response_model=NotificationTypeResponse)
async def get_notification_type(
    notification_type_id: UUID,
    service: NotificationTypeServiceDep,
):
    return notification_type_to_response(await service.get(notification_type_id))


@router.post("", response_model=NotificationTypeResponse, status_code=status.HTTP_201_CREATED)
async def create_notification_type(
    data: NotificationTypeCreate,
    service: NotificationTypeServiceDep,
):
    """Register a template under an active event. Tags are extracted from the body."""
    return notification_type_to_response(await service.create_notification_type(data))


@router.patch("/{notification_type_id}", response_model=NotificationTypeResponse)
async def update_notification_type(
    notification_type_id: UUID,
    data: NotificationTypeUpdate,
    service: NotificationTypeServiceDep,
):
    """Partially update a notification type. A new body re-derives the tags."""
    nt = await service.update(notification_type_id, data.changes())
    return notification_type_to_response(nt)


@router.delete("/{notification_type_id}")
async def delete_notification_type(
    notification_type_id: UUID,
    service: NotificationTypeServiceDep,
):
    await service.delete(notification_type_id)
    return {"detail": "Success"}


@router.delete("")
async def delete_notification_types(
    data: BulkDeleteRequest,
    service: NotificationTypeServiceDep,
):
    deleted = await service.delete_many(data.ids)
    return {"detail": "Success", "deleted": [nt.id for nt in deleted]}


@tags_router.get("", response_model=list[TagResponse])
async def get_tags(session: SessionDep):
    """Every placeholder label declared by any notification type."""
    return [TagResponse(id=t.id, label=t.label) for t in await list_tags(session)]
