"""Tests for libapp.services.authenticator: signup and confirm against an in-memory database."""

import unittest
from unittest.mock import patch

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from libapp.core.database import enable_sqlite_foreign_keys
from libapp.models import Base, User
from libapp.services.authenticator import confirm, get_user, register_user
from libapp.services.errors import (
    GENERIC_LOGIN_ERROR,
    AuthFailure,
    EmailAlreadyRegistered,
    NotFoundError,
)


def _session_factory() -> sessionmaker:
    """Fresh in-memory SQLite database with all tables."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, autoflush=False)


class AuthenticatorTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.db = _session_factory()()
        self.user = register_user(self.db, "test@test.com", "123", "Test", "User")

    def tearDown(self) -> None:
        self.db.close()


class TestConfirm(AuthenticatorTestCase):
    """confirm returns the user on a match and one generic AuthFailure otherwise."""

    def test_correct_password_returns_user(self) -> None:
        user = confirm(self.db, "test@test.com", "123")
        self.assertEqual(user.id, self.user.id)

    def test_wrong_password_fails(self) -> None:
        with self.assertRaises(AuthFailure) as ctx:
            confirm(self.db, "test@test.com", "WRONG")
        self.assertEqual(ctx.exception.message, GENERIC_LOGIN_ERROR)

    def test_unknown_email_fails_with_same_message(self) -> None:
        with self.assertRaises(AuthFailure) as ctx:
            confirm(self.db, "nonexistent@x.com", "123")
        self.assertEqual(ctx.exception.message, GENERIC_LOGIN_ERROR)

    def test_blank_inputs_fail(self) -> None:
        with self.assertRaises(AuthFailure):
            confirm(self.db, "", "123")
        with self.assertRaises(AuthFailure):
            confirm(self.db, "test@test.com", "")

    def test_email_match_is_case_insensitive(self) -> None:
        user = confirm(self.db, "  TEST@Test.com", "123")
        self.assertEqual(user.id, self.user.id)


class TestRegisterUser(AuthenticatorTestCase):
    def test_round_trip_stores_hash_not_plaintext(self) -> None:
        register_user(self.db, "a@b.com", "secret")
        user = confirm(self.db, "a@b.com", "secret")
        self.assertEqual(user.email, "a@b.com")
        self.assertNotEqual(user.password_hash, "secret")

    def test_names_are_stored(self) -> None:
        self.assertEqual(self.user.first_name, "Test")
        self.assertEqual(self.user.last_name, "User")

    def test_email_is_normalized(self) -> None:
        user = register_user(self.db, " Mixed@Case.COM ", "pw")
        self.assertEqual(user.email, "mixed@case.com")

    def test_duplicate_email_rejected_case_insensitively(self) -> None:
        with self.assertRaises(EmailAlreadyRegistered):
            register_user(self.db, "TEST@test.com", "other")
        self.assertEqual(self.db.query(User).count(), 1)

    def test_unique_index_race_reports_duplicate(self) -> None:
        with patch("libapp.services.authenticator.find_user_by_email", return_value=None):
            with self.assertRaises(EmailAlreadyRegistered):
                register_user(self.db, "test@test.com", "other")
        self.assertEqual(self.db.query(User).count(), 1)
        self.assertEqual(confirm(self.db, "test@test.com", "123").id, self.user.id)

    def test_blank_email_rejected(self) -> None:
        with self.assertRaises(ValueError):
            register_user(self.db, "   ", "pw")


class TestGetUser(AuthenticatorTestCase):
    def test_existing(self) -> None:
        self.assertEqual(get_user(self.db, self.user.id).email, "test@test.com")

    def test_missing_raises_not_found(self) -> None:
        with self.assertRaises(NotFoundError) as ctx:
            get_user(self.db, 9999)
        self.assertEqual(ctx.exception.entity, "User")


if __name__ == "__main__":
    unittest.main()
