"""Pydantic request/response schemas."""

from libapp.schemas.auth import LoginRequest, SignupRequest
from libapp.schemas.health import HealthResponse
from libapp.schemas.library import (
    LibrariesListResponse,
    LibraryCreate,
    LibraryOut,
    MembershipOut,
)
from libapp.schemas.user import UserOut, UsersListResponse

__all__ = [
    "HealthResponse",
    "LibrariesListResponse",
    "LibraryCreate",
    "LibraryOut",
    "LoginRequest",
    "MembershipOut",
    "SignupRequest",
    "UserOut",
    "UsersListResponse",
]
