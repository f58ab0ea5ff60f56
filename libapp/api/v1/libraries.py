"""Library endpoints: catalogue, members, and joining or leaving as the logged-in user."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from libapp.api.v1.deps import require_user
from libapp.core.database import get_db
from libapp.models import User
from libapp.schemas.library import (
    LibrariesListResponse,
    LibraryCreate,
    LibraryOut,
    MembershipOut,
)
from libapp.schemas.user import UserOut, UsersListResponse
from libapp.services import libraries as library_service
from libapp.services import memberships as membership_service
from libapp.services.errors import NotFoundError

logger = logging.getLogger(__name__)
router = APIRouter()


def _not_found(e: NotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)


@router.get("", response_model=LibrariesListResponse)
def list_libraries(
    db: Annotated[Session, Depends(get_db)],
) -> LibrariesListResponse:
    libraries = library_service.list_libraries(db)
    return LibrariesListResponse(libraries=[LibraryOut.model_validate(lib) for lib in libraries])


@router.post("", response_model=LibraryOut, status_code=status.HTTP_201_CREATED)
def create_library(
    body: LibraryCreate,
    _user: Annotated[User, Depends(require_user)],
    db: Annotated[Session, Depends(get_db)],
) -> LibraryOut:
    library = library_service.create_library(
        db,
        name=body.name,
        floor_count=body.floor_count,
        floor_area=body.floor_area,
    )
    return LibraryOut.model_validate(library)


@router.get("/{library_id}", response_model=LibraryOut)
def get_library(
    library_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> LibraryOut:
    try:
        library = library_service.get_library(db, library_id)
    except NotFoundError as e:
        raise _not_found(e) from e
    return LibraryOut.model_validate(library)


@router.delete("/{library_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_library(
    library_id: int,
    _user: Annotated[User, Depends(require_user)],
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    """Delete a library along with every membership in it."""
    try:
        library_service.delete_library(db, library_id)
    except NotFoundError as e:
        raise _not_found(e) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{library_id}/users", response_model=UsersListResponse)
def list_library_users(
    library_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> UsersListResponse:
    try:
        users = membership_service.list_users_for_library(db, library_id)
    except NotFoundError as e:
        raise _not_found(e) from e
    return UsersListResponse(users=[UserOut.model_validate(u) for u in users])


@router.post(
    "/{library_id}/memberships",
    response_model=MembershipOut,
    status_code=status.HTTP_201_CREATED,
)
def join_library(
    library_id: int,
    current_user: Annotated[User, Depends(require_user)],
    db: Annotated[Session, Depends(get_db)],
) -> MembershipOut:
    """Join the library as the logged-in user. Joining twice returns the same membership."""
    try:
        membership = membership_service.join(db, current_user.id, library_id)
    except NotFoundError as e:
        raise _not_found(e) from e
    return MembershipOut.model_validate(membership)


@router.delete("/{library_id}/memberships", status_code=status.HTTP_204_NO_CONTENT)
def leave_library(
    library_id: int,
    current_user: Annotated[User, Depends(require_user)],
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    if not membership_service.leave(db, current_user.id, library_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User {current_user.id} is not a member of library {library_id}.",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
