"""Relationship model (directed follow edge)."""

from sqlalchemy import Column, ForeignKey, Integer
from sqlalchemy.orm import relationship

from microblog.database import Base
from microblog.models.mixins import TimestampMixin


class Relationship(Base, TimestampMixin):
    """Follow edge: ``follower`` follows ``followed``.

    Only presence of both ends is enforced. Self-edges and duplicate edges
    are not rejected at the storage layer.
    """

    __tablename__ = "relationships"

    id = Column(Integer, primary_key=True, index=True)
    follower_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    followed_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Relationships
    follower = relationship("User", foreign_keys=[follower_id], back_populates="relationships")
    followed = relationship(
        "User", foreign_keys=[followed_id], back_populates="reverse_relationships"
    )
