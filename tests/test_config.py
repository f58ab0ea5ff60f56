"""Unit tests for libapp.core.config.Settings validators."""

import unittest

from pydantic import ValidationError

from libapp.core.config import Settings


class TestSettingsValidation(unittest.TestCase):
    def test_sqlite_and_postgres_urls_accepted(self) -> None:
        self.assertEqual(Settings(DATABASE_URL="sqlite://").DATABASE_URL, "sqlite://")
        url = "postgresql://u:p@localhost:5432/libapp"
        self.assertEqual(Settings(DATABASE_URL=url).DATABASE_URL, url)

    def test_unsupported_database_url_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(DATABASE_URL="mysql://localhost/libapp")

    def test_blank_session_secret_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(SESSION_SECRET="   ")

    def test_session_expiry_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(SESSION_EXPIRE_MINUTES=0)
        with self.assertRaises(ValidationError):
            Settings(SESSION_EXPIRE_MINUTES=43201)

    def test_redirect_paths_must_be_site_relative(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(LOGIN_REDIRECT_PATH="https://evil.example/")
        with self.assertRaises(ValidationError):
            Settings(LOGIN_FORM_PATH="//evil.example/login")
        self.assertEqual(Settings(LOGIN_FORM_PATH="/signin").LOGIN_FORM_PATH, "/signin")

    def test_bcrypt_rounds_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(BCRYPT_ROUNDS=3)


if __name__ == "__main__":
    unittest.main()
