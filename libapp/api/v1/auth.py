"""Login and logout: create and clear the session cookie."""

import logging
from typing import Annotated
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from libapp.api.v1.deps import get_session_manager, read_login_credentials
from libapp.core.config import settings
from libapp.core.database import get_db
from libapp.schemas.auth import LoginRequest
from libapp.services.authenticator import confirm
from libapp.services.errors import AuthFailure
from libapp.services.sessions import SessionManager

logger = logging.getLogger(__name__)
router = APIRouter()


def profile_path() -> str:
    return f"{settings.API_V1_PREFIX}/users/me"


@router.post("", response_class=RedirectResponse, status_code=status.HTTP_303_SEE_OTHER)
def login(
    body: Annotated[LoginRequest, Depends(read_login_credentials)],
    db: Annotated[Session, Depends(get_db)],
    sessions: Annotated[SessionManager, Depends(get_session_manager)],
) -> RedirectResponse:
    """
    Check email and password (form post or JSON), store the user in the session and
    redirect to the profile.

    On failure redirect back to the login form with one generic error message,
    whether the email was unknown or the password wrong.
    """
    try:
        user = confirm(db, body.email, body.password)
    except AuthFailure as e:
        query = urlencode({"error": e.message})
        return RedirectResponse(
            f"{settings.LOGIN_FORM_PATH}?{query}",
            status_code=status.HTTP_303_SEE_OTHER,
        )
    sessions.login(user)
    response = RedirectResponse(profile_path(), status_code=status.HTTP_303_SEE_OTHER)
    return sessions.apply(response)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def logout(
    sessions: Annotated[SessionManager, Depends(get_session_manager)],
) -> Response:
    """Clear the session. Logging out without a session is a no-op."""
    if sessions.user_id is not None:
        logger.info("Logout", extra={"user_id": sessions.user_id})
    sessions.logout()
    return sessions.apply(Response(status_code=status.HTTP_204_NO_CONTENT))
