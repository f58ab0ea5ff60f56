"""Test environment: in-memory SQLite and a fast bcrypt cost, set before libapp is imported."""

import os

# libapp.core.config builds its module-level settings on first import, so these
# must be in place before any test module imports libapp.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SESSION_SECRET", "test-session-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
