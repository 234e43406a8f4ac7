"""User domain entity - pure business logic, no infrastructure."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from blog_auth.domain.exceptions import InvalidEntityStateException


@dataclass
class User:
    """
    User domain entity representing a registered account.

    This is a pure Python class with NO dependencies on SQLAlchemy,
    FastAPI, or any framework. The id and timestamps are assigned by the
    user store when the record is first persisted and never change after.
    """

    email: str
    name: str
    password_hash: str
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """
        Validate entity invariants at construction time.

        These are structural validations - they ensure the entity can exist
        in a valid state. Violations indicate the entity cannot be created.
        """
        if not self.email or "@" not in self.email:
            raise InvalidEntityStateException(
                f"Invalid email address: '{self.email}'. Email must contain '@' symbol."
            )

        if not self.name or len(self.name.strip()) == 0:
            raise InvalidEntityStateException(
                "Name cannot be empty. User must have a valid name."
            )

        if not self.password_hash:
            raise InvalidEntityStateException(
                "Password hash is required. User cannot exist without authentication credentials."
            )

    def __repr__(self) -> str:
        # password_hash stays out of logs and tracebacks
        return f"User(id={self.id!r}, email={self.email!r}, name={self.name!r})"
