"""Request/response schemas for libraries and memberships."""

from pydantic import BaseModel, Field


class LibraryCreate(BaseModel):
    """Body for creating a library."""

    name: str = Field(..., min_length=1, max_length=255)
    floor_count: int = Field(default=0, ge=0, description="Number of floors")
    floor_area: int = Field(default=0, ge=0, description="Floor area")


class LibraryOut(BaseModel):
    id: int
    name: str
    floor_count: int
    floor_area: int

    class Config:
        from_attributes = True


class LibrariesListResponse(BaseModel):
    libraries: list[LibraryOut]


class MembershipOut(BaseModel):
    """A user's membership in a library."""

    id: int
    user_id: int
    library_id: int

    class Config:
        from_attributes = True
