"""Password hashing interface - domain service abstraction.

The domain cares that passwords are:
1. Hashed at a known work factor before storage
2. Verifiable during login, whatever work factor the stored hash was made with

The domain does NOT care which algorithm or library produces the hash.
Both operations are coroutines: hashing is deliberately slow and
implementations are expected to keep that work off the event loop.
"""

from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """
    Interface for password hashing operations.

    Failures (unusable stored hash, backend errors) must be raised, not
    reported as a mismatch: a broken hash is a dependency failure, not a
    declined login.
    """

    @abstractmethod
    async def hash(self, plain_password: str, cost: int) -> str:
        """
        Hash a plain text password.

        Args:
            plain_password: The plain text password to hash
            cost: Work factor (log2 rounds for bcrypt)

        Returns:
            Self-describing hash string (algorithm, cost and salt included)

        Raises:
            PasswordHashingError: If the password cannot be hashed
        """
        pass

    @abstractmethod
    async def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a plain text password against a stored hash.

        Args:
            plain_password: The plain text password to verify
            hashed_password: The stored hash

        Returns:
            True if password matches, False otherwise

        Raises:
            PasswordHashingError: If the stored hash cannot be interpreted
        """
        pass
