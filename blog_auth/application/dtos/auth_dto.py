"""Authentication DTOs for the application layer."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class RedirectTarget(StrEnum):
    """Every auth request ends in exactly one of these redirects."""

    REGISTER = "/register"
    LOGIN = "/login"
    HOME = "/"


class RegistrationForm(BaseModel):
    """
    Raw registration input as submitted.

    Fields are unconstrained: the registration validator reports every
    failing field at once, and missing fields arrive as empty strings.
    """

    name: str = Field(default="", description="Display name")
    email: str = Field(default="", description="User's email address")
    password: str = Field(default="", repr=False, description="Plain text password")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Test User",
                "email": "test@example.com",
                "password": "password123",
            }
        }
    )


class LoginForm(BaseModel):
    """Raw login input as submitted."""

    email: str = Field(default="", description="User's email address")
    password: str = Field(default="", repr=False, description="Plain text password")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "test@example.com",
                "password": "password123",
            }
        }
    )
