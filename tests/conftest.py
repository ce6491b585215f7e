"""
Shared pytest fixtures.

Provides:
- An in-memory SQLite database (aiosqlite) per test
- An AsyncSession bound to it
- An httpx client wired to the FastAPI app with the session injected
- Builders for an active Application -> Event -> NotificationType chain
"""

import os

# Settings are read at import time; point them at SQLite before the app loads
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")

from collections.abc import AsyncGenerator
from dataclasses import dataclass

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from notification_manager.core.database import get_session
from notification_manager.main import app
from notification_manager.models import (
    ActivityState,
    Application,
    Base,
    Event,
    NotificationType,
)
from notification_manager.services.tags import extract_tags

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
async def engine():
    """Fresh in-memory database for every test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def client(session) -> AsyncGenerator[AsyncClient, None]:
    """API client sharing the test session."""

    async def override_get_session():
        yield session
        await session.flush()

    app.dependency_overrides[get_session] = override_get_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# HIERARCHY BUILDERS
# =============================================================================


@dataclass
class Hierarchy:
    application: Application
    event: Event
    notification_type: NotificationType


async def build_hierarchy(
    session: AsyncSession,
    suffix: str = "one",
    template_body: str = "Hello {{name}}, your code is {{code}}",
    template_subject: str = "Your code",
) -> Hierarchy:
    """Insert an active application, event and notification type."""
    application = Application(name=f"app-{suffix}", state=ActivityState.ACTIVE)
    session.add(application)
    await session.flush()

    event = Event(
        name=f"event-{suffix}",
        state=ActivityState.ACTIVE,
        application_id=application.id,
    )
    session.add(event)
    await session.flush()

    notification_type = NotificationType(
        name=f"type-{suffix}",
        template_subject=template_subject,
        template_body=template_body,
        tags=extract_tags(template_body),
        state=ActivityState.ACTIVE,
        event_id=event.id,
    )
    session.add(notification_type)
    await session.flush()

    return Hierarchy(application, event, notification_type)


@pytest.fixture
async def hierarchy(session) -> Hierarchy:
    return await build_hierarchy(session)
