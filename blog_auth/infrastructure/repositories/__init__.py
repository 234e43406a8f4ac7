"""Repository implementations using SQLAlchemy."""

from blog_auth.infrastructure.repositories.unit_of_work_impl import UnitOfWork
from blog_auth.infrastructure.repositories.user_repository_impl import UserRepository

__all__ = ["UserRepository", "UnitOfWork"]
