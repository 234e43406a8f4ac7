"""Pytest configuration and fixtures.

Shared fixtures use fakes (FakePasswordHasher, FakeUnitOfWork, FakeNotifier)
so handler tests run without bcrypt or a database.
"""

import os

# Settings are read when blog_auth.main is imported; provide them first.
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-at-least-32-chars")
os.environ.setdefault("ENVIRONMENT", "test")

from datetime import UTC, datetime  # noqa: E402

import pytest  # noqa: E402

from blog_auth.application.services.login_handler import LoginHandler  # noqa: E402
from blog_auth.application.services.registration_handler import RegistrationHandler  # noqa: E402
from blog_auth.application.validators.registration_validator import (  # noqa: E402
    RegistrationValidator,
)
from blog_auth.domain.entities.user import User  # noqa: E402
from tests.fakes.notifier_fake import FakeNotifier  # noqa: E402
from tests.fakes.password_hasher_fake import FakePasswordHasher  # noqa: E402
from tests.fakes.unit_of_work_fake import FakeUnitOfWork  # noqa: E402


@pytest.fixture
def fake_password_hasher() -> FakePasswordHasher:
    return FakePasswordHasher()


@pytest.fixture
def fake_notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture
def sample_user() -> User:
    """
    A stored user.

    The password_hash uses the FakePasswordHasher format, so the matching
    password is "password123".
    """
    return User(
        id=1,
        email="test@example.com",
        name="Test User",
        password_hash="HASHED:password123",
        created_at=datetime.now(UTC),
        updated_at=datetime.now(UTC),
    )


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Empty user store."""
    return FakeUnitOfWork()


@pytest.fixture
def fake_uow_with_user(sample_user) -> FakeUnitOfWork:
    return FakeUnitOfWork(initial_users=[sample_user])


@pytest.fixture
def registration_handler(fake_uow, fake_password_hasher) -> RegistrationHandler:
    return RegistrationHandler(
        uow_factory=lambda: fake_uow,
        password_hasher=fake_password_hasher,
        validator=RegistrationValidator(),
    )


@pytest.fixture
def login_handler(fake_uow_with_user, fake_password_hasher) -> LoginHandler:
    return LoginHandler(
        uow_factory=lambda: fake_uow_with_user,
        password_hasher=fake_password_hasher,
    )
