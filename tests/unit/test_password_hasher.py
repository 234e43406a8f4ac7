"""Unit tests for password hashers.

These tests verify both the fake and the real bcrypt hasher.
"""

import pytest
from pwdlib import PasswordHash
from pwdlib.hashers.argon2 import Argon2Hasher

from blog_auth.application.exceptions import PasswordHashingError
from blog_auth.application.services.registration_handler import BCRYPT_COST_FACTOR
from blog_auth.infrastructure.security.bcrypt_password_hasher import BcryptPasswordHasher
from tests.fakes.password_hasher_fake import FakePasswordHasher

pytestmark = pytest.mark.unit


class TestFakePasswordHasher:
    """Test the fake password hasher implementation."""

    @pytest.mark.asyncio
    async def test_hash_adds_prefix_and_records_cost(self):
        hasher = FakePasswordHasher()

        result = await hasher.hash("mypassword", 10)

        assert result == "HASHED:mypassword"
        assert hasher.hash_calls == [("mypassword", 10)]

    @pytest.mark.asyncio
    async def test_fixed_hash(self):
        hasher = FakePasswordHasher(fixed_hash="hashedPassword123")

        assert await hasher.hash("password123", 10) == "hashedPassword123"

    @pytest.mark.asyncio
    async def test_verify(self):
        hasher = FakePasswordHasher()
        hashed = await hasher.hash("correct_password", 10)

        assert await hasher.verify("correct_password", hashed) is True
        assert await hasher.verify("wrong_password", hashed) is False
        assert await hasher.verify("correct_password", "no_prefix") is False

    @pytest.mark.asyncio
    async def test_configured_error_is_raised(self):
        hasher = FakePasswordHasher(error=PasswordHashingError())

        with pytest.raises(PasswordHashingError):
            await hasher.hash("password", 10)
        with pytest.raises(PasswordHashingError):
            await hasher.verify("password", "HASHED:password")


class TestBcryptPasswordHasher:
    """Test the real bcrypt hasher implementation."""

    @pytest.mark.asyncio
    async def test_hash_is_bcrypt_at_requested_cost(self):
        hasher = BcryptPasswordHasher()

        result = await hasher.hash("mypassword", BCRYPT_COST_FACTOR)

        # $2b$<cost>$<22-char salt><31-char hash>
        assert result.startswith("$2b$10$")
        assert len(result) == 60

    @pytest.mark.asyncio
    async def test_hash_never_equals_plaintext(self):
        hasher = BcryptPasswordHasher()

        result = await hasher.hash("password123", 4)

        assert result != "password123"
        assert "password123" not in result

    @pytest.mark.asyncio
    async def test_hash_generates_unique_salts(self):
        hasher = BcryptPasswordHasher()

        hash1 = await hasher.hash("same_password", 4)
        hash2 = await hasher.hash("same_password", 4)

        assert hash1 != hash2
        assert await hasher.verify("same_password", hash1)
        assert await hasher.verify("same_password", hash2)

    @pytest.mark.asyncio
    async def test_verify_correct_and_wrong_password(self):
        hasher = BcryptPasswordHasher()
        hashed = await hasher.hash("correct_password", BCRYPT_COST_FACTOR)

        assert await hasher.verify("correct_password", hashed) is True
        assert await hasher.verify("wrong_password", hashed) is False

    @pytest.mark.asyncio
    async def test_verify_reads_cost_from_stored_hash(self):
        """Hashes made at a different cost still verify."""
        hasher = BcryptPasswordHasher()
        old_hash = await hasher.hash("password123", 4)

        assert old_hash.startswith("$2b$04$")
        assert await hasher.verify("password123", old_hash) is True

    @pytest.mark.asyncio
    async def test_verify_accepts_argon2_hashes(self):
        hasher = BcryptPasswordHasher()
        argon2_hash = PasswordHash((Argon2Hasher(),)).hash("password123")

        assert await hasher.verify("password123", argon2_hash) is True
        assert await hasher.verify("wrong", argon2_hash) is False

    @pytest.mark.asyncio
    async def test_verify_unknown_hash_raises(self):
        """An unrecognisable stored hash is a failure, not a mismatch."""
        hasher = BcryptPasswordHasher()

        with pytest.raises(PasswordHashingError):
            await hasher.verify("password", "completely_invalid_hash")

    @pytest.mark.asyncio
    async def test_verify_plaintext_stored_value_raises(self):
        hasher = BcryptPasswordHasher()

        with pytest.raises(PasswordHashingError):
            await hasher.verify("password123", "password123")

    @pytest.mark.asyncio
    async def test_hash_unicode_password(self):
        hasher = BcryptPasswordHasher()
        unicode_password = "パスワード🔒"

        hashed = await hasher.hash(unicode_password, 4)

        assert await hasher.verify(unicode_password, hashed)
        assert not await hasher.verify("パスワード", hashed)

    @pytest.mark.asyncio
    async def test_verify_overlong_password_is_a_mismatch(self):
        """Over 72 bytes can never match a bcrypt hash; it is not an error."""
        hasher = BcryptPasswordHasher()
        hashed = await hasher.hash("password123", 4)

        assert await hasher.verify("x" * 80, hashed) is False
        assert await hasher.verify("€" * 25, hashed) is False

    @pytest.mark.asyncio
    async def test_verify_overlong_password_against_argon2_hash(self):
        hasher = BcryptPasswordHasher()
        long_password = "x" * 80
        argon2_hash = PasswordHash((Argon2Hasher(),)).hash(long_password)

        assert await hasher.verify(long_password, argon2_hash) is True
