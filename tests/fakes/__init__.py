"""Fake implementations for testing."""

from tests.fakes.notifier_fake import FakeNotifier
from tests.fakes.password_hasher_fake import FakePasswordHasher
from tests.fakes.unit_of_work_fake import FakeUnitOfWork
from tests.fakes.user_repository_fake import FakeUserRepository

__all__ = ["FakeNotifier", "FakePasswordHasher", "FakeUnitOfWork", "FakeUserRepository"]
