'''
Pytest configuration for the FastAPI application.

This file sets up fixtures for:
1. Forcing the application into TEST_MODE before any code is imported.
2. Providing a FastAPI TestClient running against a fresh in-memory database.
3. Providing an isolated database session for service tests.
4. Providing instances of all service classes, pre-injected with a test db session.
'''

import os

# Settings are read at import time, so the environment must be ready first.
os.environ["TEST_MODE"] = "True"
os.environ["AUTO_CREATE_TABLES"] = "True"
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-the-student-dashboard")
os.environ["ADMIN_USER_IDS"] = '["a1f0c3d2-7e4b-4c59-8a61-2b9d0e5f7c18"]'

import pytest
from typing import AsyncGenerator

# --- FastAPI & Testing Imports ---
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession

# --- Constant Imports ----
from tests.constants import TEST_ADMIN_ID, TEST_TODAY
from tests.factories import TimetableSlotFactory, CustomTaskFactory

# --- Application Imports ---
from src.student_dashboard_backend.main import app
from src.student_dashboard_backend.common.config import settings
from src.student_dashboard_backend.common.clock import get_today
from src.student_dashboard_backend.database.engine import build_engine, build_session_factory, create_tables
from src.student_dashboard_backend.models.timetable import TimetableSlot
from src.student_dashboard_backend.services.calendar_service import CalendarService
from src.student_dashboard_backend.services.timetable_service import TimetableService
from src.student_dashboard_backend.services.dashboard_service import DashboardService


@pytest.fixture(scope="session")
def anyio_backend():
    """
    Override the default 'anyio_backend' fixture.
    1. Forces the backend to 'asyncio' (aiosqlite does not run on trio).
    2. Promotes the scope to 'session'.
    """
    return "asyncio"


@pytest.fixture(scope="function")
def client() -> TestClient:
    """
    The core fixture for API tests.

    1. Checks that TEST_MODE is active so the production database is never touched.
    2. Runs the app's lifespan, which creates a fresh in-memory database and its tables.
    3. Pins the clock dependency to TEST_TODAY.
    """
    assert settings.TEST_MODE is True, \
        "TEST_MODE was not set to True! Check your .env file or environment."
    assert TEST_ADMIN_ID in settings.ADMIN_USER_IDS

    app.dependency_overrides[get_today] = lambda: TEST_TODAY

    # This 'with' block runs the app's startup lifespan,
    # which creates the engine and session factory.
    with TestClient(app) as test_client:
        yield test_client

    # The app's shutdown lifespan runs here, and we clear the override.
    app.dependency_overrides.clear()


# --- Function-Scoped Session Fixture (For Service Tests) ---

@pytest.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Provides a session bound to its own in-memory database, so every
    service test starts from empty tables.
    """
    engine = build_engine(settings.DATABASE_URL_TEST)
    await create_tables(engine)
    session = build_session_factory(engine)()
    try:
        yield session
    finally:
        await session.rollback()
        await session.close()
        await engine.dispose()


# --- SERVICE FIXTURES ---

@pytest.fixture(scope="function")
def calendar_service(db_session: AsyncSession) -> CalendarService:
    return CalendarService(db=db_session)

@pytest.fixture(scope="function")
def timetable_service(db_session: AsyncSession) -> TimetableService:
    return TimetableService(db=db_session)

@pytest.fixture(scope="function")
def dashboard_service(
    calendar_service: CalendarService, timetable_service: TimetableService
) -> DashboardService:
    return DashboardService(calendar_service=calendar_service, timetable_service=timetable_service)


# --- DATA FIXTURES ---

@pytest.fixture(scope="function")
def weekly_timetable() -> list[TimetableSlot]:
    """
    A week mixing regular classes and custom tasks.
    Monday has 3 regular slots and 1 custom task; Tuesday's slots are
    deliberately out of order.
    """
    return [
        TimetableSlotFactory(slot_id="mon-1", day="Monday", start_time="09:00", end_time="10:00", course_code="CS101"),
        TimetableSlotFactory(slot_id="mon-2", day="Monday", start_time="11:00", end_time="12:00", course_code="MA201"),
        TimetableSlotFactory(slot_id="mon-3", day="Monday", start_time="14:00", end_time="15:00", course_code="PH101"),
        CustomTaskFactory(slot_id="mon-task", day="Monday", start_time="18:00", end_time="19:00", course_name="Gym"),
        TimetableSlotFactory(slot_id="tue-2", day="Tuesday", start_time="11:00", end_time="12:00", course_code="MA201"),
        TimetableSlotFactory(slot_id="tue-1", day="Tuesday", start_time="08:00", end_time="09:00", course_code="CS101"),
        TimetableSlotFactory(slot_id="wed-1", day="Wednesday", start_time="10:00", end_time="11:00", course_code="EE210"),
        TimetableSlotFactory(slot_id="wed-2", day="Wednesday", start_time="15:00", end_time="16:00", course_code="CS101"),
        CustomTaskFactory(slot_id="wed-task", day="Wednesday", start_time="20:00", end_time="21:00", course_name="Study group"),
        TimetableSlotFactory(slot_id="fri-1", day="Friday", start_time="09:00", end_time="10:00", course_code="HS100"),
    ]
