"""Response schemas for users."""

from pydantic import BaseModel


class UserOut(BaseModel):
    """Public view of a user (never includes the password hash)."""

    id: int
    email: str
    first_name: str
    last_name: str

    class Config:
        from_attributes = True


class UsersListResponse(BaseModel):
    users: list[UserOut]
