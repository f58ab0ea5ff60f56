"""Unit tests for libapp.core.security: bcrypt hashing and signed session tokens."""

import unittest
from datetime import UTC, datetime, timedelta

import jwt

from libapp.core.config import settings
from libapp.core.security import (
    create_session_token,
    decode_session_token,
    hash_password,
    normalize_email,
    verify_password,
)


class TestPasswordHashing(unittest.TestCase):
    """hash_password never stores the plaintext; verify_password checks against the hash."""

    def test_hash_is_not_plaintext(self) -> None:
        hashed = hash_password("secret")
        self.assertNotEqual(hashed, "secret")
        self.assertTrue(hashed.startswith("$2"))

    def test_same_password_gets_distinct_salts(self) -> None:
        self.assertNotEqual(hash_password("secret"), hash_password("secret"))

    def test_verify_matching_password(self) -> None:
        self.assertTrue(verify_password("secret", hash_password("secret")))

    def test_verify_wrong_password(self) -> None:
        self.assertFalse(verify_password("wrong", hash_password("secret")))

    def test_verify_malformed_hash_returns_false(self) -> None:
        self.assertFalse(verify_password("secret", "not-a-bcrypt-hash"))

    def test_long_password_truncated_consistently(self) -> None:
        long_pw = "x" * 100
        self.assertTrue(verify_password(long_pw, hash_password(long_pw)))


class TestNormalizeEmail(unittest.TestCase):
    def test_strips_and_lowercases(self) -> None:
        self.assertEqual(normalize_email("  Test@Test.COM "), "test@test.com")


class TestSessionToken(unittest.TestCase):
    """Session tokens carry the user id as sub and reject tampering or expiry."""

    def test_round_trip_sub(self) -> None:
        payload = decode_session_token(create_session_token(42))
        self.assertEqual(payload["sub"], "42")
        self.assertIn("exp", payload)

    def test_wrong_secret_rejected(self) -> None:
        token = jwt.encode({"sub": "1"}, "another-secret", algorithm=settings.SESSION_ALGORITHM)
        with self.assertRaises(jwt.PyJWTError):
            decode_session_token(token)

    def test_expired_token_rejected(self) -> None:
        past = datetime.now(UTC) - timedelta(minutes=5)
        token = jwt.encode(
            {"sub": "1", "iat": past - timedelta(minutes=1), "exp": past},
            settings.SESSION_SECRET.get_secret_value(),
            algorithm=settings.SESSION_ALGORITHM,
        )
        with self.assertRaises(jwt.ExpiredSignatureError):
            decode_session_token(token)


if __name__ == "__main__":
    unittest.main()
