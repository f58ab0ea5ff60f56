"""ORM model for libraries users can join."""

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String, func
from sqlalchemy.orm import relationship

from libapp.models.base import Base


class Library(Base):
    """A library with its floor count and floor area (both non-negative)."""

    __tablename__ = "libraries"
    __table_args__ = (
        CheckConstraint("floor_count >= 0", name="ck_libraries_floor_count_non_negative"),
        CheckConstraint("floor_area >= 0", name="ck_libraries_floor_area_non_negative"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    floor_count = Column(Integer, nullable=False, default=0)
    floor_area = Column(Integer, nullable=False, default=0)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    memberships = relationship(
        "Membership",
        cascade="all, delete-orphan",
        lazy="select",
    )

    def __repr__(self) -> str:
        return f"<Library id={self.id} name={self.name!r}>"
