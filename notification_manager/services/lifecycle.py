"""
Shared lifecycle logic for applications, events and notification types.

Each entity service gets:
- lookup that hides deleted rows (NotFoundError otherwise)
- partial update that merges fields and routes is_active / is_deleted
  through the activity state machine
- cascading soft delete, single and bulk

Deleting an already-deleted row is allowed: the cascade is re-applied, so an
interrupted cascade can simply be retried.
"""

import logging
from typing import Any, Generic, Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import get_settings
from ..models import ActivityState
from ..schemas import ListParams
from . import activity
from .errors import NotFoundError, ValidationError
from .repository import ModelT, Page, Repository, listing_filters

logger = logging.getLogger(__name__)


class LifecycleService(Generic[ModelT]):
    """Base service for entities with an ActivityState."""

    model: type[ModelT]
    label: str

    def __init__(self, session: AsyncSession):
        self.session = session
        self.repo: Repository[ModelT] = Repository(session, self.model)

    # =========================================================================
    # READ
    # =========================================================================

    async def get(self, entity_id: UUID) -> ModelT:
        entity = await self.repo.get(entity_id)
        if entity is None:
            raise NotFoundError(f"The {self.label} with the given ID was not found.")
        return entity

    async def _require_live_parent(self, parent: "LifecycleService", parent_id: UUID | None):
        """A child may only reference a parent that exists and is active."""
        if parent_id is None:
            raise ValidationError(
                f'"{parent.label}" ({parent.label} ID) is required',
                field=parent.label,
            )

        entity = await parent.repo.get(parent_id)
        if entity is None:
            raise ValidationError(
                f"The {parent.label} with the given ID was not found.",
                field=parent.label,
            )
        if not activity.is_live(entity.state):
            raise ValidationError(
                f"The {parent.label} with the given ID is inactive.",
                field=parent.label,
            )
        return entity

    async def _list(self, params: ListParams, *scope) -> Page[ModelT]:
        filters = [*scope, *listing_filters(self.model, params.is_active, params.like)]
        return await self.repo.page(
            filters,
            sort_by=params.sort_by,
            sort_order=params.sort_order,
            page_number=params.page_number,
            page_size=(
                get_settings().default_page_size
                if params.page_size is None
                else params.page_size
            ),
        )

    # =========================================================================
    # UPDATE
    # =========================================================================

    async def update(self, entity_id: UUID, changes: dict[str, Any]) -> ModelT:
        """Merge ``changes`` into the entity. ``is_deleted=True`` deletes it."""
        if not changes:
            raise ValidationError("The request body should not be empty")

        entity = await self.get(entity_id)

        changes = dict(changes)
        is_active = changes.pop("is_active", None)
        is_deleted = changes.pop("is_deleted", None)
        new_state = activity.apply_flags(entity.state, is_active, is_deleted)
        patch = await self._prepare_patch(entity, changes)

        if new_state == ActivityState.DELETED:
            if patch:
                await self.repo.update(entity, patch)
            return await self._delete_entity(entity)

        patch["state"] = new_state
        return await self.repo.update(entity, patch)

    async def _prepare_patch(self, entity: ModelT, changes: dict[str, Any]) -> dict[str, Any]:
        """Hook for subclasses that derive extra columns from the patch."""
        return changes

    # =========================================================================
    # DELETE (CASCADING)
    # =========================================================================

    async def delete(self, entity_id: UUID) -> ModelT:
        entity = await self.repo.get(entity_id, include_deleted=True)
        if entity is None:
            raise NotFoundError(f"The {self.label} with the given ID was not found.")
        return await self._delete_entity(entity)

    async def delete_many(self, entity_ids: Sequence[UUID]) -> list[ModelT]:
        """Delete every live entity in ``entity_ids``; unknown ids are skipped."""
        deleted = []
        for entity_id in dict.fromkeys(entity_ids):
            entity = await self.repo.get(entity_id)
            if entity is not None:
                deleted.append(await self._delete_entity(entity))

        if not deleted:
            raise NotFoundError("Nothing to delete.")
        return deleted

    async def _delete_entity(self, entity: ModelT) -> ModelT:
        if entity.state != ActivityState.DELETED:
            await self.repo.update(entity, {"state": activity.delete(entity.state)})
            logger.info(f"Deleted {self.label} {entity.id}")

        try:
            await self._cascade(entity)
        except Exception:
            logger.error(f"Cascade from {self.label} {entity.id} failed; retry the delete to reconcile")
            raise
        return entity

    async def _cascade(self, entity: ModelT) -> None:
        """Delete direct children of ``entity``. Leaf entities have none."""
        return None
