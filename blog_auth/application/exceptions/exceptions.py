"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base application layer exception."""

    def __init__(self, message: str, error_code: str = "APPLICATION_ERROR"):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class PasswordHashingError(ApplicationError):
    """Raised when a password cannot be hashed or a stored hash cannot be checked."""

    def __init__(self, message: str = "Password hashing failed"):
        super().__init__(message, error_code="PASSWORD_HASHING_ERROR")
