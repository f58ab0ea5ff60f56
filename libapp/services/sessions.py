"""Per-request session manager backed by a signed session cookie."""

import logging

import jwt
from fastapi import Response
from sqlalchemy.orm import Session

from libapp.core.config import settings
from libapp.core.security import create_session_token, decode_session_token
from libapp.models import User

logger = logging.getLogger(__name__)

# Sentinel for "current_user() not resolved yet" (None is a valid resolved value).
_UNRESOLVED = object()


class SessionManager:
    """
    Resolve, record and clear the logged-in user for one request.

    Built fresh for every request from the incoming cookie value; the resolved
    user is cached on the instance only, so nothing leaks between requests.
    Changes are written back to the client by apply(response).
    """

    def __init__(self, db: Session, token: str | None = None) -> None:
        self.db = db
        self._token = token or None
        self._user_id: int | None = self._read_user_id(self._token)
        self._current_user: object = _UNRESOLVED
        self._changed = False

    @staticmethod
    def _read_user_id(token: str | None) -> int | None:
        if not token:
            return None
        try:
            payload = decode_session_token(token)
        except jwt.PyJWTError:
            logger.debug("Ignoring invalid or expired session token")
            return None
        try:
            return int(payload.get("sub"))
        except (TypeError, ValueError):
            return None

    @property
    def user_id(self) -> int | None:
        return self._user_id

    def login(self, user: User) -> None:
        """Record user.id in the session and cache the user for this request."""
        self._user_id = user.id
        self._token = create_session_token(user.id)
        self._current_user = user
        self._changed = True

    def current_user(self) -> User | None:
        """
        Return the logged-in user, or None.

        A session whose user has been deleted counts as logged out.
        """
        if self._current_user is _UNRESOLVED:
            user = None
            if self._user_id is not None:
                user = self.db.get(User, self._user_id)
                if user is None:
                    logger.info("Session refers to missing user", extra={"user_id": self._user_id})
            self._current_user = user
        return self._current_user  # type: ignore[return-value]

    def logout(self) -> None:
        """Clear the stored user id and the cached user."""
        self._user_id = None
        self._token = None
        self._current_user = None
        self._changed = True

    def apply(self, response: Response) -> Response:
        """Write session changes made during this request to the response cookie."""
        if not self._changed:
            return response
        if self._token is None:
            response.delete_cookie(
                settings.SESSION_COOKIE_NAME,
                httponly=True,
                samesite="lax",
                secure=settings.SESSION_COOKIE_SECURE,
            )
        else:
            response.set_cookie(
                settings.SESSION_COOKIE_NAME,
                self._token,
                max_age=settings.SESSION_EXPIRE_MINUTES * 60,
                httponly=True,
                samesite="lax",
                secure=settings.SESSION_COOKIE_SECURE,
            )
        return response
