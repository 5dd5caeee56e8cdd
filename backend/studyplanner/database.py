"""
StudyPlanner Backend: Database Engine and Session Factory
==========================================================

What:  Async SQLAlchemy engine, session factory and declarative base.
Why:   Centralizes all database connection logic in one place. Repositories
       receive the session factory at construction and never reach for a
       global connection themselves.
How:   Creates an async engine with connection pooling and an
       `async_sessionmaker` bound to it.
Who:   `main.create_app()` passes `async_session_factory` to the repositories;
       Alembic and the health check use `engine` directly.
When:  Engine is created at module import; sessions are opened per repository call.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from studyplanner.config import settings


# ── Engine Configuration ──────────────────────────────────────────────────
# The engine owns the connection pool; create_async_engine does not connect
# until the first query.
engine: AsyncEngine = create_async_engine(
    settings.database_url,
    **settings.engine_options(),
)

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: records are converted to schemas after commit,
# which must not trigger a lazy reload outside the session.
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


def make_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Builds a session factory with the application's session options for `bind`."""
    return async_sessionmaker(bind, class_=AsyncSession, expire_on_commit=False)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    All models share this metadata, which Alembic reads for migrations and
    the repository tests use to create a scratch schema.
    """
    pass


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def dispose_engine() -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
