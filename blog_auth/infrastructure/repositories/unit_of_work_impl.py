"""Unit of Work implementation using SQLAlchemy."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from blog_auth.domain.repositories.unit_of_work import IUnitOfWork
from blog_auth.infrastructure.repositories.user_repository_impl import UserRepository


class UnitOfWork(IUnitOfWork):
    """
    SQLAlchemy implementation of Unit of Work.

    One session per `async with` block. Nothing is committed unless
    commit() is called explicitly; an exception leaving the block rolls
    back whatever was flushed, so a failed registration leaves no row.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory
        self._session: AsyncSession | None = None

    async def __aenter__(self) -> "UnitOfWork":
        self._session = self._session_factory()
        self.users = UserRepository(self._session)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        try:
            if exc_type is not None:
                await self.rollback()
        finally:
            if self._session is not None:
                await self._session.close()
                self._session = None

    async def commit(self) -> None:
        """Commit the current transaction."""
        if self._session is None:
            raise RuntimeError("Cannot commit: no active session")

        await self._session.commit()

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        if self._session is None:
            raise RuntimeError("Cannot rollback: no active session")

        await self._session.rollback()
