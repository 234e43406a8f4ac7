"""Domain layer exceptions for business rule violations."""


class DomainException(Exception):
    """
    Base exception for domain layer.

    Domain exceptions represent business rule violations and should be
    raised when domain invariants are broken.

    Examples:
        - Invalid entity state
        - Uniqueness violations reported by the user store
    """

    def __init__(self, message: str, error_code: str = "DOMAIN_ERROR"):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class InvalidEntityStateException(DomainException):
    """Raised when an entity is in an invalid state."""

    def __init__(self, message: str):
        super().__init__(message, error_code="INVALID_ENTITY_STATE")


class DuplicateEmailException(DomainException):
    """
    Raised by the user store when an insert collides with an existing email.

    The pre-create existence check is not atomic; this is what the store's
    unique constraint turns into when two registrations race.
    """

    def __init__(self, email: str):
        self.email = email
        super().__init__(
            f"Email {email} is already registered",
            error_code="EMAIL_ALREADY_EXISTS",
        )
