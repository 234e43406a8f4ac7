"""Bcrypt password hasher implementation using pwdlib.

Dependency flow:
    RegistrationHandler / LoginHandler (application) → IPasswordHasher (domain)
        ← BcryptPasswordHasher (infrastructure)

pwdlib is only imported here. Hashing and verification are CPU-bound and
run in Starlette's threadpool so a request waiting on bcrypt does not hold
up the event loop.
"""

from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError
from pwdlib.hashers.argon2 import Argon2Hasher
from pwdlib.hashers.bcrypt import BcryptHasher
from starlette.concurrency import run_in_threadpool

from blog_auth.application.exceptions import PasswordHashingError
from blog_auth.domain.services.password_hasher import IPasswordHasher

BCRYPT_MAX_PASSWORD_BYTES = 72


class BcryptPasswordHasher(IPasswordHasher):
    """
    Production password hasher.

    New hashes are bcrypt ($2b$) at the cost the caller asks for. Stored
    hashes are self-describing: verification reads algorithm, cost and salt
    from the hash itself, so hashes made at an older cost keep working.
    Argon2 hashes are accepted for verification as well.

    Usage:
        hasher = BcryptPasswordHasher()

        hashed = await hasher.hash("user_password_123", 10)
        # Returns: "$2b$10$<salt><hash>"

        await hasher.verify("user_password_123", hashed)  # True
        await hasher.verify("wrong_password", hashed)  # False
    """

    def __init__(self):
        self._bcrypt = BcryptHasher()
        self._verifier = PasswordHash((self._bcrypt, Argon2Hasher()))

    async def hash(self, plain_password: str, cost: int) -> str:
        """
        Hash a plain text password with bcrypt.

        Each call generates a fresh salt, so hashing the same password twice
        gives different strings that both verify.

        Raises:
            PasswordHashingError: If bcrypt rejects the input or the cost
        """
        password_hash = PasswordHash((BcryptHasher(rounds=cost),))
        try:
            return await run_in_threadpool(password_hash.hash, plain_password)
        except ValueError as exc:
            raise PasswordHashingError(f"Could not hash password: {exc}") from exc

    async def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a plain text password against a stored hash.

        Uses constant-time comparison. A hash that no configured algorithm
        recognises, or that is structurally broken, is an error rather than
        a mismatch.

        A password longer than bcrypt's 72-byte limit never matches a bcrypt
        hash (registration refuses such passwords), so it is a mismatch.

        Raises:
            PasswordHashingError: If the stored hash cannot be checked
        """
        if (
            len(plain_password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES
            and self._bcrypt.identify(hashed_password)
        ):
            return False

        try:
            is_valid, _ = await run_in_threadpool(
                self._verifier.verify_and_update, plain_password, hashed_password
            )
        except UnknownHashError as exc:
            raise PasswordHashingError("Stored password hash has an unknown format") from exc
        except ValueError as exc:
            raise PasswordHashingError(f"Stored password hash is malformed: {exc}") from exc
        return is_valid
