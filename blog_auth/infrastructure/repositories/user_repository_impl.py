"""User repository implementation using SQLAlchemy."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from blog_auth.domain.entities.user import User
from blog_auth.domain.exceptions import DuplicateEmailException
from blog_auth.domain.repositories.user_repository import IUserRepository
from blog_auth.infrastructure.persistence.models.user_model import UserModel

logger = logging.getLogger(__name__)


class UserRepository(IUserRepository):
    """
    SQLAlchemy implementation of IUserRepository.

    Returns domain entities, never ORM models. Database errors other than
    the email uniqueness conflict propagate unchanged (SQLAlchemyError).
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with a database session.

        Args:
            session: SQLAlchemy async session (managed by UoW)
        """
        self._session = session

    async def get_by_email(self, email: str) -> User | None:
        """Get user by exact email match."""
        result = await self._session.execute(
            select(UserModel).where(UserModel.email == email)
        )
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return user_model.to_entity()

    async def add(self, entity: User) -> User:
        """
        Insert a new user.

        Flushes immediately so a unique-constraint violation is reported
        here, as DuplicateEmailException, rather than at commit time.
        """
        user_model = UserModel.from_entity(entity)

        self._session.add(user_model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            logger.info(f"Insert for {entity.email} rejected by unique constraint: {exc.orig}")
            raise DuplicateEmailException(entity.email) from exc
        await self._session.refresh(user_model)

        return user_model.to_entity()
