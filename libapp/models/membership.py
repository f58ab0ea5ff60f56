"""ORM model for the user <-> library join entity."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, UniqueConstraint, func

from libapp.models.base import Base


class Membership(Base):
    """
    One row per (user, library) pair.

    Owned by both parents: deleting either the user or the library removes the row.
    """

    __tablename__ = "memberships"
    __table_args__ = (
        UniqueConstraint("user_id", "library_id", name="uq_memberships_user_library"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    library_id = Column(
        Integer,
        ForeignKey("libraries.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
