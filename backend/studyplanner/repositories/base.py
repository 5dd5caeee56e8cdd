"""Shared constructor for repositories."""

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker


class Repository:
    """Holds the injected session factory; subclasses open one session per call."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory
