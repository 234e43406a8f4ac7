"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.sessions import SessionMiddleware

from blog_auth.application.exceptions import ApplicationError
from blog_auth.application.services.login_handler import SESSION_NAME_KEY, SESSION_USER_KEY
from blog_auth.domain.exceptions import DomainException
from blog_auth.infrastructure.config.settings import get_settings
from blog_auth.infrastructure.persistence.database import create_tables
from blog_auth.presentation import dependencies
from blog_auth.presentation.api import auth
from blog_auth.presentation.exception_handlers import (
    application_error_handler,
    database_error_handler,
    domain_exception_handler,
    generic_exception_handler,
    validation_error_handler,
)
from blog_auth.presentation.flash import pop_flashed_messages

_settings = get_settings()

logging.basicConfig(
    level=_settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    if _settings.environment == "dev":
        # No migrations in dev; create the schema on startup
        await create_tables(dependencies.get_database_engine(_settings))
    logger.info(f"{_settings.app_name} {_settings.app_version} started ({_settings.environment})")
    yield
    if dependencies._engine is not None:
        await dependencies._engine.dispose()


app = FastAPI(
    title=_settings.app_name,
    description="User registration and session login for the blog",
    version=_settings.app_version,
    debug=_settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    SessionMiddleware,
    secret_key=_settings.secret_key,
    session_cookie=_settings.session_cookie,
    max_age=_settings.session_max_age,
    https_only=_settings.session_https_only,
    same_site="lax",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.cors_origins_list,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# - ApplicationError: password hashing failures and any future application errors
# - DomainException: store-level rule violations that escape a handler
# - RequestValidationError: malformed requests
# - SQLAlchemyError: user store failures
# - Exception: everything else
app.add_exception_handler(ApplicationError, application_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(DomainException, domain_exception_handler)  # type: ignore[arg-type]
app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(SQLAlchemyError, database_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(Exception, generic_exception_handler)

app.include_router(auth.router)


@app.get("/")
async def root(request: Request) -> dict[str, Any]:
    """Home: service status, the signed-in user if any, and pending flash messages."""
    return {
        "message": _settings.app_name,
        "status": "running",
        "version": _settings.app_version,
        "user": request.session.get(SESSION_USER_KEY),
        "name": request.session.get(SESSION_NAME_KEY),
        "messages": pop_flashed_messages(request.session),
    }
