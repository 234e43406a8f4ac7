"""Registration handler - application layer use case.

Flow per request:
    validate → look up email → hash password → create user → notify → redirect

Each store/hasher step is awaited in turn; nothing runs in parallel and no
state is kept between requests.
"""

import logging
from collections.abc import Callable

from blog_auth.application.dtos.auth_dto import RedirectTarget, RegistrationForm
from blog_auth.application.validators.registration_validator import RegistrationValidator
from blog_auth.domain.entities.user import User
from blog_auth.domain.exceptions import DuplicateEmailException
from blog_auth.domain.repositories.unit_of_work import IUnitOfWork
from blog_auth.domain.services.notifier import FlashKind, INotifier
from blog_auth.domain.services.password_hasher import IPasswordHasher

logger = logging.getLogger(__name__)

# Fixed work factor for new hashes. Existing hashes carry their own cost,
# so changing this only affects how expensive future hashes are.
BCRYPT_COST_FACTOR = 10

USER_EXISTS_MESSAGE = "User already exists. Please login."
REGISTERED_MESSAGE = "You are now registered! Login below."


class RegistrationHandler:
    """
    Registers new users.

    Outcomes:
    1. Invalid input → one error message joining every field error, back to /register
    2. Email already taken → error message, on to /login
    3. Created → success message, on to /login

    Store and hashing failures are not handled here; they propagate to the
    caller and the unit of work rolls back.
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        password_hasher: IPasswordHasher,
        validator: RegistrationValidator,
    ):
        """
        Initialize handler with dependencies.

        Args:
            uow_factory: Factory function that returns IUnitOfWork instances
            password_hasher: Password hashing service (abstraction)
            validator: Registration input validator
        """
        self._uow_factory = uow_factory
        self._password_hasher = password_hasher
        self._validator = validator

    async def register(self, form: RegistrationForm, notifier: INotifier) -> RedirectTarget:
        """
        Handle a registration request.

        Args:
            form: Submitted registration fields
            notifier: Sink for the single flash message of this request

        Returns:
            Where the client should be redirected

        Raises:
            PasswordHashingError: If hashing fails
            SQLAlchemyError: If the user store fails
        """
        result = self._validator.run(form)
        if not result.is_empty():
            notifier.push(FlashKind.ERROR, " ".join(result.messages()))
            return RedirectTarget.REGISTER

        try:
            async with self._uow_factory() as uow:
                if await uow.users.get_by_email(form.email) is not None:
                    logger.warning(f"Registration rejected: {form.email} already registered")
                    notifier.push(FlashKind.ERROR, USER_EXISTS_MESSAGE)
                    return RedirectTarget.LOGIN

                password_hash = await self._password_hasher.hash(
                    form.password, BCRYPT_COST_FACTOR
                )

                user = await uow.users.add(
                    User(email=form.email, name=form.name, password_hash=password_hash)
                )
                await uow.commit()
        except DuplicateEmailException:
            # Lost the race against a concurrent registration for the same email
            logger.warning(f"Registration conflict on insert for {form.email}")
            notifier.push(FlashKind.ERROR, USER_EXISTS_MESSAGE)
            return RedirectTarget.LOGIN

        logger.info(f"Registered user {user.id} ({user.email})")
        notifier.push(FlashKind.SUCCESS, REGISTERED_MESSAGE)
        return RedirectTarget.LOGIN
