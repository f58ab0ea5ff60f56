"""Request/response schemas for login and signup."""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Credentials for login. Blank, over-long or wrong values all fail the same way in confirm()."""

    email: str = Field(default="", description="Email")
    password: str = Field(default="", description="Password")


class SignupRequest(BaseModel):
    """New account details."""

    email: str = Field(..., min_length=1, max_length=255, description="Email")
    password: str = Field(..., min_length=1, max_length=128, description="Password")
    first_name: str = Field(default="", max_length=255)
    last_name: str = Field(default="", max_length=255)
