"""API routes for application management."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from ..core import SessionDep
from ..models import Application
from ..schemas import (
    ApplicationCreate,
    ApplicationResponse,
    ApplicationUpdate,
    BulkDeleteRequest,
    ListParams,
    PaginatedResponse,
)
from ..services import ApplicationService

router = APIRouter(prefix="/applications", tags=["applications"])


def get_application_service(session: SessionDep) -> ApplicationService:
    return ApplicationService(session)


ApplicationServiceDep = Annotated[ApplicationService, Depends(get_application_service)]


def application_to_response(application: Application) -> ApplicationResponse:
    return ApplicationResponse(
        id=application.id,
        name=application.name,
        description=application.description,
        is_active=application.is_active,
        created_at=application.created_at,
        modified_at=application.modified_at,
    )


@router.get("", response_model=PaginatedResponse)
async def list_applications(
    params: Annotated[ListParams, Query()],
    service: ApplicationServiceDep,
):
    """List non-deleted applications, filtered by activity and name."""
    page = await service.list_applications(params)
    return PaginatedResponse(
        current_page=page.current_page,
        last_page=page.last_page,
        total=page.total,
        results=[application_to_response(a) for a in page.items],
    )


@router.get("/{application_id}", response_model=ApplicationResponse)
async def get_application(application_id: UUID, service: ApplicationServiceDep):
    return application_to_response(await service.get(application_id))


@router.post("", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
async def create_application(data: ApplicationCreate, service: ApplicationServiceDep):
    """Register a new application. Applications start inactive unless is_active is set."""
    return application_to_response(await service.create_application(data))


@router.patch("/{application_id}", response_model=ApplicationResponse)
async def update_application(
    application_id: UUID,
    data: ApplicationUpdate,
    service: ApplicationServiceDep,
):
    """Partially update an application. is_deleted=true deletes it (with cascade)."""
    return application_to_response(await service.update(application_id, data.changes()))


@router.delete("/{application_id}")
async def delete_application(application_id: UUID, service: ApplicationServiceDep):
    """Soft-delete an application and cascade to its events and notification types."""
    await service.delete(application_id)
    return {"detail": "Success"}


@router.delete("")
async def delete_applications(data: BulkDeleteRequest, service: ApplicationServiceDep):
    """Soft-delete several applications at once."""
    deleted = await service.delete_many(data.ids)
    return {"detail": "Success", "deleted": [a.id for a in deleted]}
