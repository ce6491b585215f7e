"""API routes for the notification manager."""

from fastapi import APIRouter

from .applications import router as applications_router
from .events import router as events_router
from .messages import router as messages_router
from .notification_types import router as notification_types_router
from .notification_types import tags_router

# Main API router
api_router = APIRouter()

# Hierarchy: applications -> events -> notification types -> messages
api_router.include_router(applications_router)
api_router.include_router(events_router)
api_router.include_router(notification_types_router)
api_router.include_router(messages_router)
api_router.include_router(tags_router)

__all__ = ["api_router"]
