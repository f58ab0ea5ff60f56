"""Signup and the logged-in user's own profile and libraries."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from libapp.api.v1.deps import get_session_manager, require_user
from libapp.core.database import get_db
from libapp.models import User
from libapp.schemas.auth import SignupRequest
from libapp.schemas.library import LibrariesListResponse, LibraryOut
from libapp.schemas.user import UserOut
from libapp.services.authenticator import register_user
from libapp.services.errors import EmailAlreadyRegistered
from libapp.services.memberships import list_libraries_for_user
from libapp.services.sessions import SessionManager

router = APIRouter()


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def signup(
    body: SignupRequest,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
    sessions: Annotated[SessionManager, Depends(get_session_manager)],
) -> UserOut:
    """Create an account and log it in."""
    try:
        user = register_user(
            db,
            email=body.email,
            password=body.password,
            first_name=body.first_name,
            last_name=body.last_name,
        )
    except EmailAlreadyRegistered as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)
        ) from e
    sessions.login(user)
    sessions.apply(response)
    return UserOut.model_validate(user)


@router.get("/me", response_model=UserOut)
def get_me(current_user: Annotated[User, Depends(require_user)]) -> UserOut:
    """Profile of the logged-in user."""
    return UserOut.model_validate(current_user)


@router.get("/me/libraries", response_model=LibrariesListResponse)
def get_my_libraries(
    current_user: Annotated[User, Depends(require_user)],
    db: Annotated[Session, Depends(get_db)],
) -> LibrariesListResponse:
    """Libraries the logged-in user has joined, in join order."""
    libraries = list_libraries_for_user(db, current_user.id)
    return LibrariesListResponse(libraries=[LibraryOut.model_validate(lib) for lib in libraries])
