"""Library catalogue: create, look up, list and delete libraries."""

import logging

from sqlalchemy.orm import Session

from libapp.models import Library
from libapp.services.errors import NotFoundError

logger = logging.getLogger(__name__)


def create_library(db: Session, name: str, floor_count: int = 0, floor_area: int = 0) -> Library:
    """Insert a library. floor_count and floor_area must be non-negative."""
    if not name or not name.strip():
        raise ValueError("name is required")
    if floor_count < 0 or floor_area < 0:
        raise ValueError("floor_count and floor_area must be non-negative")
    library = Library(name=name.strip(), floor_count=floor_count, floor_area=floor_area)
    db.add(library)
    db.commit()
    db.refresh(library)
    logger.info("Library created", extra={"library_id": library.id})
    return library


def get_library(db: Session, library_id: int) -> Library:
    library = db.get(Library, library_id)
    if library is None:
        raise NotFoundError("Library", library_id)
    return library


def list_libraries(db: Session) -> list[Library]:
    return db.query(Library).order_by(Library.id).all()


def delete_library(db: Session, library_id: int) -> None:
    """Delete a library; its memberships go with it."""
    library = get_library(db, library_id)
    db.delete(library)
    db.commit()
    logger.info("Library deleted", extra={"library_id": library_id})
