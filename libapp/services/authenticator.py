"""Signup and credential verification against stored bcrypt hashes."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from libapp.core.security import hash_password, normalize_email, verify_password
from libapp.models import User
from libapp.services.errors import AuthFailure, EmailAlreadyRegistered, NotFoundError

logger = logging.getLogger(__name__)


def find_user_by_email(db: Session, email: str) -> User | None:
    """Return the single user whose normalized email matches, or None."""
    return db.query(User).filter(User.email == normalize_email(email)).one_or_none()


def get_user(db: Session, user_id: int) -> User:
    """Load a user by id. Raises NotFoundError if it does not exist."""
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError("User", user_id)
    return user


def register_user(
    db: Session,
    email: str,
    password: str,
    first_name: str = "",
    last_name: str = "",
) -> User:
    """
    Create a user with a bcrypt hash of password; the plaintext is never stored.

    Raises EmailAlreadyRegistered when the normalized email is taken, including
    when a concurrent signup wins the unique index race.
    """
    normalized = normalize_email(email)
    if not normalized or not password:
        raise ValueError("email and password are required")
    if find_user_by_email(db, normalized) is not None:
        raise EmailAlreadyRegistered(normalized)

    user = User(
        email=normalized,
        first_name=first_name.strip(),
        last_name=last_name.strip(),
        password_hash=hash_password(password),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise EmailAlreadyRegistered(normalized) from e
    db.refresh(user)
    logger.info("User registered", extra={"user_id": user.id})
    return user


def confirm(db: Session, email: str, password: str) -> User:
    """
    Return the user whose email and password match.

    Unknown email, wrong password and empty input all raise AuthFailure with the
    same generic message. Read-only.
    """
    if not email or not email.strip() or not password:
        raise AuthFailure()
    user = find_user_by_email(db, email)
    if user is None:
        logger.info("Login failed")
        raise AuthFailure()
    if not verify_password(password, user.password_hash):
        logger.info("Login failed")
        raise AuthFailure()
    logger.info("Login succeeded", extra={"user_id": user.id})
    return user
