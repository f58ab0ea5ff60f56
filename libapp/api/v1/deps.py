"""Request-scoped dependencies: the session manager, the login guard and login form parsing."""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from libapp.core.config import settings
from libapp.core.database import get_db
from libapp.models import User
from libapp.schemas.auth import LoginRequest
from libapp.services.errors import LoginRequired
from libapp.services.guard import Deny, require_login
from libapp.services.sessions import SessionManager

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_session_manager(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
) -> SessionManager:
    """Dependency: one SessionManager per request, built from the session cookie."""
    return SessionManager(db, request.cookies.get(settings.SESSION_COOKIE_NAME))


def require_user(
    sessions: Annotated[SessionManager, Depends(get_session_manager)],
) -> User:
    """Dependency: return the logged-in user or raise LoginRequired before the route body runs."""
    decision = require_login(sessions)
    if isinstance(decision, Deny):
        raise LoginRequired(decision.redirect_target)
    return decision.user


async def read_login_credentials(request: Request) -> LoginRequest:
    """
    Dependency: read email and password from an HTML form post or a JSON body.

    Missing or unreadable fields become empty strings so the login route answers
    with its usual generic failure instead of a validation error.
    """
    content_type = request.headers.get("content-type", "")
    data: object
    if content_type.startswith(FORM_CONTENT_TYPES):
        data = dict(await request.form())
    else:
        try:
            data = await request.json()
        except ValueError:
            data = {}
    if not isinstance(data, dict):
        data = {}
    return LoginRequest(
        email=str(data.get("email") or ""),
        password=str(data.get("password") or ""),
    )
