"""Registration input validation.

Every field is checked independently and all failures are reported together,
in field order (name, email, password), so the caller can show one combined
message instead of making the user fix errors one at a time.
"""

from dataclasses import dataclass, field

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from blog_auth.application.dtos.auth_dto import RegistrationForm

PASSWORD_MIN_LENGTH = 6
# bcrypt only looks at the first 72 bytes of its input
PASSWORD_MAX_BYTES = 72


@dataclass(frozen=True)
class FieldError:
    """A single failing field and its user-facing message."""

    field: str
    msg: str


@dataclass
class ValidationResult:
    """Ordered list of field errors; empty when the input is acceptable."""

    errors: list[FieldError] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.errors

    def array(self) -> list[FieldError]:
        return list(self.errors)

    def messages(self) -> list[str]:
        return [error.msg for error in self.errors]


class _RegistrationRules(BaseModel):
    """Field rules; each validator raises a custom error whose msg is shown as-is."""

    name: str
    email: str
    password: str

    @field_validator("name")
    @classmethod
    def name_required(cls, v: str) -> str:
        if not v.strip():
            raise PydanticCustomError("name_required", "Name is required.")
        return v

    @field_validator("email")
    @classmethod
    def email_valid(cls, v: str) -> str:
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError:
            raise PydanticCustomError(
                "email_invalid", "Please provide a valid email."
            ) from None
        # Stored exactly as typed; lookups are case-sensitive
        return v

    @field_validator("password")
    @classmethod
    def password_length(cls, v: str) -> str:
        if len(v) < PASSWORD_MIN_LENGTH:
            raise PydanticCustomError(
                "password_too_short",
                "Password must be at least 6 characters long.",
            )
        if len(v.encode("utf-8")) > PASSWORD_MAX_BYTES:
            raise PydanticCustomError(
                "password_too_long",
                "Password must be at most 72 bytes long.",
            )
        return v


class RegistrationValidator:
    """
    Validates a registration form.

    Usage:
        result = RegistrationValidator().run(form)
        if not result.is_empty():
            message = " ".join(result.messages())
    """

    def run(self, form: RegistrationForm) -> ValidationResult:
        try:
            _RegistrationRules.model_validate(form.model_dump())
        except ValidationError as exc:
            return ValidationResult(
                errors=[
                    FieldError(
                        field=".".join(str(loc) for loc in error["loc"]),
                        msg=error["msg"],
                    )
                    for error in exc.errors()
                ]
            )
        return ValidationResult()
