"""
mywallet/tests/test_password_hashing.py

Unit tests for the User model's bcrypt password handling.
"""

import bcrypt
import pytest

from mywallet.models.user import User


class TestPasswordHashing:
    """Test the User model's password hashing methods."""

    def test_set_password_creates_valid_hash(self):
        user = User(email="ann@x.com")
        user.set_password("abc123")

        assert user.password_hash.startswith("$2")
        assert len(user.password_hash) == 60

    def test_hash_is_never_the_plaintext(self):
        user = User(email="ann@x.com")
        user.set_password("secretpassword")

        assert user.password_hash
        assert user.password_hash != "secretpassword"
        assert "secret" not in user.password_hash

    def test_verify_password_correct(self):
        user = User(email="ann@x.com")
        user.set_password("correctpassword")

        assert user.verify_password("correctpassword") is True

    def test_verify_password_incorrect(self):
        user = User(email="ann@x.com")
        user.set_password("correctpassword")

        assert user.verify_password("wrongpassword") is False
        assert user.verify_password("correctpasswordx") is False
        assert user.verify_password("") is False

    def test_password_hash_is_salted(self):
        """Same password produces different hashes, both verify."""
        user1 = User(email="a@x.com")
        user2 = User(email="b@x.com")
        user1.set_password("samepassword")
        user2.set_password("samepassword")

        assert user1.password_hash != user2.password_hash
        assert user1.verify_password("samepassword") is True
        assert user2.verify_password("samepassword") is True

    def test_password_72_byte_limit_enforced(self):
        user = User(email="ann@x.com")

        with pytest.raises(ValueError, match="72 bytes"):
            user.set_password("a" * 73)

    def test_password_exactly_72_bytes_allowed(self):
        user = User(email="ann@x.com")
        user.set_password("a" * 72)

        assert user.verify_password("a" * 72) is True

    def test_verify_without_hash_is_false(self):
        user = User(email="ann@x.com")

        assert user.verify_password("abc123") is False

    def test_verify_existing_hash_with_other_cost_factor(self):
        """Hashes created with a different cost factor still verify."""
        user = User(email="ann@x.com")
        user.password_hash = bcrypt.hashpw(b"abc123", bcrypt.gensalt(rounds=5)).decode("utf-8")

        assert user.verify_password("abc123") is True
        assert user.verify_password("abc124") is False
