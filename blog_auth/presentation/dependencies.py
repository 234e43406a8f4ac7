"""FastAPI dependency injection setup.

This module is the COMPOSITION ROOT - where concrete implementations are
chosen and handed to the application layer:
- BcryptPasswordHasher for IPasswordHasher
- UnitOfWork over SQLAlchemy for IUnitOfWork
- SessionFlashNotifier over the request session for INotifier

The application layer only sees the interfaces.
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from blog_auth.application.services.login_handler import LoginHandler
from blog_auth.application.services.registration_handler import RegistrationHandler
from blog_auth.application.validators.registration_validator import RegistrationValidator
from blog_auth.domain.repositories.unit_of_work import IUnitOfWork
from blog_auth.domain.services.notifier import INotifier
from blog_auth.domain.services.password_hasher import IPasswordHasher
from blog_auth.infrastructure.config.settings import Settings, get_settings
from blog_auth.infrastructure.persistence.database import (
    create_database_engine,
    create_session_factory,
)
from blog_auth.infrastructure.repositories.unit_of_work_impl import UnitOfWork
from blog_auth.infrastructure.security.bcrypt_password_hasher import BcryptPasswordHasher
from blog_auth.presentation.flash import SessionFlashNotifier

# Module-level singletons (created once, reused throughout app lifecycle)
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker | None = None


def get_database_engine(settings: Settings = Depends(get_settings)) -> AsyncEngine:
    """Get or create the database engine singleton."""
    global _engine
    if _engine is None:
        _engine = create_database_engine(settings)
    return _engine


def get_session_factory(
    engine: AsyncEngine = Depends(get_database_engine),
) -> async_sessionmaker:
    """
    Get or create the session factory singleton.

    Tests override this dependency to point at an in-memory database.
    """
    global _session_factory
    if _session_factory is None:
        _session_factory = create_session_factory(engine)
    return _session_factory


def get_password_hasher() -> IPasswordHasher:
    """
    Dependency that provides the password hasher.

    Stateless, so a fresh instance per request is fine. Override with
    FakePasswordHasher in tests that do not need real bcrypt:

        app.dependency_overrides[get_password_hasher] = lambda: FakePasswordHasher()
    """
    return BcryptPasswordHasher()


def get_registration_validator() -> RegistrationValidator:
    return RegistrationValidator()


def get_notifier(request: Request) -> INotifier:
    """Flash sink bound to the current request's session."""
    return SessionFlashNotifier(request.session)


def get_registration_handler(
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
    validator: RegistrationValidator = Depends(get_registration_validator),
    session_factory: async_sessionmaker = Depends(get_session_factory),
) -> RegistrationHandler:
    """
    Dependency that provides RegistrationHandler.

    Dependency Graph:
        POST /register
            → get_registration_handler()
                → get_password_hasher() → BcryptPasswordHasher
                → get_registration_validator() → RegistrationValidator
                → get_session_factory() → get_database_engine() → Settings
    """

    def uow_factory() -> IUnitOfWork:
        return UnitOfWork(session_factory)

    return RegistrationHandler(
        uow_factory=uow_factory,
        password_hasher=password_hasher,
        validator=validator,
    )


def get_login_handler(
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
    session_factory: async_sessionmaker = Depends(get_session_factory),
) -> LoginHandler:
    """Dependency that provides LoginHandler."""

    def uow_factory() -> IUnitOfWork:
        return UnitOfWork(session_factory)

    return LoginHandler(uow_factory=uow_factory, password_hasher=password_hasher)
