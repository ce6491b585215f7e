"""
Generic paginated repository over SQLAlchemy models.

Every entity service talks to the database through a Repository:
create / get / find / count / update / update_many, plus ``page`` which
combines count + find with the page-window rules.
"""

import logging
from dataclasses import dataclass
from typing import Any, Generic, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import ColumnElement, func, select, update
from sqlalchemy import exc as sa_exc
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import ActivityState, Base
from ..models.base import utcnow
from .errors import StoreError
from .pagination import page_window

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

# Public sort keys -> model attribute names
SORT_FIELDS = {
    "name": "name",
    "created_at": "created_at",
    "modified_at": "modified_at",
    "is_active": "state",
}


@dataclass
class Page(Generic[ModelT]):
    """One page of a listing."""
    current_page: int
    last_page: int
    total: int
    items: list[ModelT]


class Repository(Generic[ModelT]):
    """Data access for a single model class."""

    def __init__(self, session: AsyncSession, model: type[ModelT]):
        self.session = session
        self.model = model

    @property
    def _has_state(self) -> bool:
        return hasattr(self.model, "state")

    # =========================================================================
    # WRITE
    # =========================================================================

    async def create(self, **fields: Any) -> ModelT:
        """Insert a new row and flush it so generated values are available."""
        entity = self.model(**fields)
        self.session.add(entity)
        await self._flush()
        return entity

    async def update(self, entity: ModelT, patch: dict[str, Any]) -> ModelT:
        """Merge ``patch`` into ``entity`` and bump ``modified_at``."""
        for key, value in patch.items():
            setattr(entity, key, value)
        if hasattr(entity, "modified_at"):
            entity.modified_at = utcnow()
        await self._flush()
        return entity

    async def update_many(
        self,
        where: Sequence[ColumnElement[bool]],
        values: dict[str, Any],
    ) -> int:
        """Bulk update every row matching ``where``. Returns the number of rows touched."""
        ids = (
            await self.session.execute(select(self.model.id).where(*where))
        ).scalars().all()
        if not ids:
            return 0

        if hasattr(self.model, "modified_at"):
            values = {**values, "modified_at": utcnow()}

        try:
            await self.session.execute(
                update(self.model)
                .where(self.model.id.in_(ids))
                .values(**values)
                .execution_options(synchronize_session="evaluate")
            )
        except sa_exc.SQLAlchemyError as e:
            raise StoreError(f"Bulk update of {self.model.__tablename__} failed.", detail=str(e)) from e
        return len(ids)

    async def insert_missing(self, rows: Sequence[dict[str, Any]], key: str) -> None:
        """Insert ``rows``, skipping any whose unique ``key`` column already exists."""
        if not rows:
            return

        dialect = self.session.get_bind().dialect.name
        insert = pg_insert if dialect == "postgresql" else sqlite_insert
        stmt = insert(self.model).values(list(rows)).on_conflict_do_nothing(index_elements=[key])
        try:
            await self.session.execute(stmt)
        except sa_exc.SQLAlchemyError as e:
            raise StoreError(f"Insert into {self.model.__tablename__} failed.", detail=str(e)) from e

    async def _flush(self) -> None:
        try:
            await self.session.flush()
        except sa_exc.IntegrityError as e:
            detail = str(e.orig) if e.orig is not None else str(e)
            logger.warning(f"Constraint violation on {self.model.__tablename__}: {detail}")
            raise StoreError(
                "The request violates a uniqueness or reference constraint.",
                detail=detail,
                constraint_violation=True,
            ) from e
        except sa_exc.SQLAlchemyError as e:
            raise StoreError(f"Write to {self.model.__tablename__} failed.", detail=str(e)) from e

    # =========================================================================
    # READ
    # =========================================================================

    async def get(self, entity_id: UUID, include_deleted: bool = False) -> ModelT | None:
        """Fetch by primary key. Deleted rows are hidden unless asked for."""
        conditions = [self.model.id == entity_id]
        if self._has_state and not include_deleted:
            conditions.append(self.model.state != ActivityState.DELETED)

        result = await self.session.execute(select(self.model).where(*conditions))
        return result.scalar_one_or_none()

    async def count(self, filters: Sequence[ColumnElement[bool]] = ()) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(self.model).where(*filters)
        )
        return result.scalar_one()

    async def find(
        self,
        filters: Sequence[ColumnElement[bool]] = (),
        sort_by: str = "name",
        sort_order: int = 1,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[ModelT]:
        column = getattr(self.model, SORT_FIELDS.get(sort_by, sort_by))
        order = column.desc() if sort_order == -1 else column.asc()

        query = select(self.model).where(*filters).order_by(order, self.model.id)
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def page(
        self,
        filters: Sequence[ColumnElement[bool]] = (),
        sort_by: str = "name",
        sort_order: int = 1,
        page_number: int = 0,
        page_size: int = 3,
    ) -> Page[ModelT]:
        """Count, clamp the requested page, and fetch it."""
        total = await self.count(filters)
        window = page_window(total, page_number, page_size)
        items = await self.find(
            filters,
            sort_by=sort_by,
            sort_order=sort_order,
            skip=window.skip,
            limit=window.limit,
        )
        return Page(
            current_page=window.current_page,
            last_page=window.last_page,
            total=total,
            items=items,
        )


def listing_filters(
    model: type[Base],
    is_active: bool = True,
    like: str | None = None,
) -> list[ColumnElement[bool]]:
    """Standard list filters: non-deleted, by activity, optional name substring."""
    filters: list[ColumnElement[bool]] = [
        model.state == (ActivityState.ACTIVE if is_active else ActivityState.INACTIVE)
    ]
    if like:
        filters.append(model.name.icontains(like, autoescape=True))
    return filters
