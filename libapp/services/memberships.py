"""Membership registry: users joining and leaving libraries, and who belongs where."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from libapp.models import Library, Membership, User
from libapp.services.errors import NotFoundError

logger = logging.getLogger(__name__)


def _require(db: Session, model: type, entity_id: int, entity: str) -> None:
    if db.get(model, entity_id) is None:
        raise NotFoundError(entity, entity_id)


def get_membership(db: Session, user_id: int, library_id: int) -> Membership | None:
    return (
        db.query(Membership)
        .filter(Membership.user_id == user_id, Membership.library_id == library_id)
        .one_or_none()
    )


def join(db: Session, user_id: int, library_id: int) -> Membership:
    """
    Link a user to a library and return the membership.

    Joining a library the user already belongs to returns the existing row;
    (user_id, library_id) is unique. Raises NotFoundError for a missing user or library.
    """
    _require(db, User, user_id, "User")
    _require(db, Library, library_id, "Library")

    existing = get_membership(db, user_id, library_id)
    if existing is not None:
        return existing

    membership = Membership(user_id=user_id, library_id=library_id)
    db.add(membership)
    try:
        db.commit()
    except IntegrityError:
        # Either a concurrent join of the same pair or a parent deleted since the checks above.
        db.rollback()
        _require(db, User, user_id, "User")
        _require(db, Library, library_id, "Library")
        existing = get_membership(db, user_id, library_id)
        if existing is None:
            raise
        return existing
    db.refresh(membership)
    logger.info(
        "User joined library",
        extra={"user_id": user_id, "library_id": library_id, "membership_id": membership.id},
    )
    return membership


def leave(db: Session, user_id: int, library_id: int) -> bool:
    """Remove the user's membership in the library. Returns False if there was none."""
    membership = get_membership(db, user_id, library_id)
    if membership is None:
        return False
    db.delete(membership)
    db.commit()
    logger.info("User left library", extra={"user_id": user_id, "library_id": library_id})
    return True


def list_libraries_for_user(db: Session, user_id: int) -> list[Library]:
    """Libraries the user has joined, in join order."""
    _require(db, User, user_id, "User")
    return (
        db.query(Library)
        .join(Membership, Membership.library_id == Library.id)
        .filter(Membership.user_id == user_id)
        .order_by(Membership.id)
        .all()
    )


def list_users_for_library(db: Session, library_id: int) -> list[User]:
    """Members of the library, in join order."""
    _require(db, Library, library_id, "Library")
    return (
        db.query(User)
        .join(Membership, Membership.user_id == User.id)
        .filter(Membership.library_id == library_id)
        .order_by(Membership.id)
        .all()
    )
