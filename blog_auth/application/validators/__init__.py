"""Input validators for the application layer."""

from blog_auth.application.validators.registration_validator import (
    FieldError,
    RegistrationValidator,
    ValidationResult,
)

__all__ = ["FieldError", "RegistrationValidator", "ValidationResult"]
