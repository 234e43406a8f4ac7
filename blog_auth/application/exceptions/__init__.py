"""Application layer exceptions."""

from blog_auth.application.exceptions.exceptions import (
    ApplicationError,
    PasswordHashingError,
)

__all__ = ["ApplicationError", "PasswordHashingError"]
