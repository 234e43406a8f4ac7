"""Login handler - application layer use case."""

import logging
from collections.abc import Callable, MutableMapping
from typing import Any

from blog_auth.application.dtos.auth_dto import LoginForm, RedirectTarget
from blog_auth.domain.repositories.unit_of_work import IUnitOfWork
from blog_auth.domain.services.notifier import FlashKind, INotifier
from blog_auth.domain.services.password_hasher import IPasswordHasher

logger = logging.getLogger(__name__)

# Shown for unknown emails too, so the response never reveals which accounts exist
INCORRECT_PASSWORD_MESSAGE = "Incorrect password. Please try again."

SESSION_USER_KEY = "user"
SESSION_NAME_KEY = "name"


class LoginHandler:
    """
    Authenticates a user and populates the session.

    The session is written only after the password has been verified, and
    both keys are set together. A declined login leaves whatever the
    session already held untouched.
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        password_hasher: IPasswordHasher,
    ):
        self._uow_factory = uow_factory
        self._password_hasher = password_hasher

    async def login(
        self,
        form: LoginForm,
        session: MutableMapping[str, Any],
        notifier: INotifier,
    ) -> RedirectTarget:
        """
        Handle a login request.

        Args:
            form: Submitted credentials
            session: Per-request session mapping owned by the transport layer
            notifier: Sink for the flash message of a declined login

        Returns:
            RedirectTarget.HOME on success, RedirectTarget.LOGIN otherwise

        Raises:
            PasswordHashingError: If the stored hash cannot be checked
            SQLAlchemyError: If the user store fails
        """
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_email(form.email)

        if user is None or not await self._password_hasher.verify(
            form.password, user.password_hash
        ):
            logger.warning(f"Declined login for {form.email}")
            notifier.push(FlashKind.ERROR, INCORRECT_PASSWORD_MESSAGE)
            return RedirectTarget.LOGIN

        session[SESSION_USER_KEY] = user.id
        session[SESSION_NAME_KEY] = user.name

        logger.info(f"User {user.id} logged in")
        return RedirectTarget.HOME
