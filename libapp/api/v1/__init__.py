"""API v1 routes."""

from fastapi import APIRouter

from libapp.api.v1 import auth, health, libraries, users

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/sessions", tags=["sessions"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(libraries.router, prefix="/libraries", tags=["libraries"])
