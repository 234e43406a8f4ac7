"""User repository interface."""

from abc import ABC, abstractmethod

from blog_auth.domain.entities.user import User


class IUserRepository(ABC):
    """
    User store contract consumed by the authentication handlers.

    Only the two queries the auth core needs are part of the contract:
    lookup by email and creation. Records are never updated or deleted here.
    """

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        """
        Find a user by their email address.

        Emails are matched exactly as stored (case-sensitive).

        Args:
            email: The user's email

        Returns:
            User if found, None otherwise
        """
        pass

    @abstractmethod
    async def add(self, entity: User) -> User:
        """
        Persist a new user.

        Args:
            entity: The user to add (without id)

        Returns:
            The stored user with generated fields (id, timestamps)

        Raises:
            DuplicateEmailException: If the store's uniqueness constraint
                rejects the email
        """
        pass
