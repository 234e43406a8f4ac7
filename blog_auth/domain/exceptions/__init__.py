"""Domain exceptions - business rule violations."""

from blog_auth.domain.exceptions.domain_exceptions import (
    DomainException,
    DuplicateEmailException,
    InvalidEntityStateException,
)

__all__ = [
    "DomainException",
    "InvalidEntityStateException",
    "DuplicateEmailException",
]
