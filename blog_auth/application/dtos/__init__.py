"""Data Transfer Objects for application layer."""

from blog_auth.application.dtos.auth_dto import LoginForm, RedirectTarget, RegistrationForm

__all__ = ["LoginForm", "RedirectTarget", "RegistrationForm"]
