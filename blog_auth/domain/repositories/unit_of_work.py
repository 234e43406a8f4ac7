"""Unit of Work interface - domain layer."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from blog_auth.domain.repositories.user_repository import IUserRepository


class IUnitOfWork(ABC):
    """
    Unit of Work interface for managing transactions.

    The UoW acts as a facade providing access to the user store within a
    single transactional boundary. Handlers open one per request step and
    never hold it across requests.
    """

    users: "IUserRepository"

    @abstractmethod
    async def __aenter__(self) -> "IUnitOfWork":
        """Start a transaction/session."""
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """
        Exit async context manager.

        If an exception escaped the block, rollback. The session is always
        released.
        """
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Commit the current transaction."""
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Rollback the current transaction."""
        pass
