"""
StudyPlanner Backend: Test Configuration (conftest.py)
=======================================================

What:  Shared pytest fixtures for the whole suite.
How:   Environment overrides are applied before any `studyplanner` import so
       settings, the engine and the bcrypt context pick them up.

Fixture Hierarchy (all function-scoped):
    ├── repositories:           autospec'd stand-ins for every repository
    ├── test_client:            httpx AsyncClient over an app wired to `repositories`
    ├── headers:                builds student_id/role header dicts
    ├── student/course/assignment/schedule records: sample data
    ├── session_factory:        real SQLite (aiosqlite) schema in tmp_path
    └── live_client:            AsyncClient over an app backed by `session_factory`
"""

import os
from datetime import date, datetime, time
from unittest.mock import create_autospec

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test_studyplanner.db"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["BCRYPT_ROUNDS"] = "4"

from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402

from studyplanner.database import Base, make_session_factory  # noqa: E402
from studyplanner.main import create_app  # noqa: E402
from studyplanner.repositories import Repositories, build_repositories  # noqa: E402
from studyplanner.repositories.assignment_repository import AssignmentRepository  # noqa: E402
from studyplanner.repositories.course_repository import CourseRepository  # noqa: E402
from studyplanner.repositories.schedule_repository import ScheduleRepository  # noqa: E402
from studyplanner.repositories.student_repository import StudentRepository  # noqa: E402
from studyplanner.schemas.assignment import AssignmentRecord, Status  # noqa: E402
from studyplanner.schemas.course import CourseRecord  # noqa: E402
from studyplanner.schemas.schedule import ScheduleRecord, Weekday  # noqa: E402
from studyplanner.schemas.student import StudentRecord  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Handler-level fixtures (no database)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def repositories():
    """
    Autospec'd repositories: async methods become AsyncMocks with the real
    signatures, so a handler calling a repository wrongly fails the test.

    Usage:
        repositories.courses.find_by_id.return_value = course_record
    """
    return Repositories(
        students=create_autospec(StudentRepository, instance=True),
        courses=create_autospec(CourseRepository, instance=True),
        assignments=create_autospec(AssignmentRepository, instance=True),
        schedules=create_autospec(ScheduleRepository, instance=True),
    )


@pytest_asyncio.fixture
async def test_client(repositories):
    """HTTPX AsyncClient routed straight into an app built on `repositories`."""
    app = create_app(repositories)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def headers():
    """headers(1) → user 1; headers(1, "admin") → admin claiming id 1."""
    def build(student_id, role="user"):
        return {"student_id": str(student_id), "role": role}
    return build


@pytest.fixture
def student_record():
    return StudentRecord(id=1, name="Alice", email="alice@example.com", role="user")


@pytest.fixture
def course_record():
    return CourseRecord(
        course_id=1,
        student_id=1,
        course_name="Algorithms",
        start_date=date(2025, 1, 6),
        end_date=date(2025, 5, 30),
    )


@pytest.fixture
def assignment_record():
    return AssignmentRecord(
        assignment_id=1,
        student_id=1,
        course_id=1,
        title="Problem set 1",
        description="Chapters 1-3",
        deadline=datetime(2025, 2, 1, 23, 59, 0),
        status=Status.PENDING,
    )


@pytest.fixture
def schedule_record():
    return ScheduleRecord(
        schedule_id=1,
        course_id=1,
        weekday=Weekday.MONDAY,
        start_time=time(10, 0),
        end_time=time(11, 30),
    )


# ══════════════════════════════════════════════════════════════════════════
# Database-backed fixtures (SQLite via aiosqlite)
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def session_factory(tmp_path):
    """A fresh SQLite file with every table created from the ORM metadata."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'planner.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield make_session_factory(engine)
    await engine.dispose()


@pytest_asyncio.fixture
async def live_client(session_factory):
    """AsyncClient over an app whose repositories use `session_factory`."""
    app = create_app(build_repositories(session_factory))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
