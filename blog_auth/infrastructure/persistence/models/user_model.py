"""User ORM model - infrastructure layer SQLAlchemy mapping."""

from datetime import datetime

from sqlalchemy import String, func
from sqlalchemy.orm import Mapped, mapped_column

from blog_auth.domain.entities.user import User
from blog_auth.infrastructure.persistence.database import Base


class UserModel(Base):
    """
    SQLAlchemy ORM model for the users table.

    The unique index on email is the final guard against duplicate
    accounts when two registrations pass the existence check together.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        insert_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        insert_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"UserModel(id={self.id!r}, email={self.email!r}, name={self.name!r})"

    def to_entity(self) -> User:
        """Convert ORM row to domain entity."""
        return User(
            id=self.id,
            email=self.email,
            name=self.name,
            password_hash=self.password_hash,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    @staticmethod
    def from_entity(user: User) -> "UserModel":
        """
        Build an ORM row for a new user.

        The id and timestamps are left to the database.
        """
        return UserModel(
            email=user.email,
            name=user.name,
            password_hash=user.password_hash,
        )
