"""Access guard: decide whether a protected operation may run for this session."""

from dataclasses import dataclass

from libapp.core.config import settings
from libapp.models import User
from libapp.services.sessions import SessionManager


@dataclass(frozen=True)
class Allow:
    """A user is logged in; the guarded operation may proceed."""

    user: User


@dataclass(frozen=True)
class Deny:
    """No valid session; the caller must redirect and run nothing else."""

    redirect_target: str


def require_login(
    sessions: SessionManager,
    redirect_target: str | None = None,
) -> Allow | Deny:
    """Return Allow(user) when the session resolves to a user, otherwise Deny(redirect_target)."""
    user = sessions.current_user()
    if user is None:
        return Deny(redirect_target or settings.LOGIN_REDIRECT_PATH)
    return Allow(user)
