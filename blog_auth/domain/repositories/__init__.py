"""Repository interfaces - define contracts for data access."""

from blog_auth.domain.repositories.unit_of_work import IUnitOfWork
from blog_auth.domain.repositories.user_repository import IUserRepository

__all__ = ["IUserRepository", "IUnitOfWork"]
