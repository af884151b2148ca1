"""User model."""

from sqlalchemy import Boolean, Column, Integer, String, false
from sqlalchemy.orm import relationship, validates

from microblog.database import Base
from microblog.models.micropost import Micropost
from microblog.models.mixins import TimestampMixin
from microblog.models.relationship import Relationship

NAME_MAX_LENGTH = 50


class User(Base, TimestampMixin):
    """User model for authentication, authorship and the follow graph."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(NAME_MAX_LENGTH), nullable=False)
    # Lowercased on assignment, so the unique index is case-insensitive in effect
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    admin = Column(Boolean, nullable=False, default=False, server_default=false())

    # Relationships
    microposts = relationship(
        "Micropost",
        back_populates="user",
        order_by=[Micropost.created_at.desc(), Micropost.id.desc()],
        cascade="all, delete-orphan",
    )
    relationships = relationship(
        "Relationship",
        foreign_keys=[Relationship.follower_id],
        back_populates="follower",
        cascade="all, delete-orphan",
    )
    reverse_relationships = relationship(
        "Relationship",
        foreign_keys=[Relationship.followed_id],
        back_populates="followed",
        cascade="all, delete-orphan",
    )
    # One entry per edge; the service listings apply DISTINCT
    following = relationship(
        "User",
        secondary="relationships",
        primaryjoin="User.id == Relationship.follower_id",
        secondaryjoin="User.id == Relationship.followed_id",
        order_by="User.id",
        viewonly=True,
    )
    followers = relationship(
        "User",
        secondary="relationships",
        primaryjoin="User.id == Relationship.followed_id",
        secondaryjoin="User.id == Relationship.follower_id",
        order_by="User.id",
        viewonly=True,
    )

    @validates("email")
    def normalize_email(self, key: str, value: str) -> str:
        return value.lower() if value else value

    def has_password(self, password: str) -> bool:
        """Check a plaintext password against the stored salted hash."""
        from microblog.services.auth import verify_password

        return verify_password(password, self.password_hash)

    def is_following(self, other: "User") -> bool:
        """Check whether this user follows ``other``."""
        return any(rel.followed_id == other.id for rel in self.relationships)

    def toggle_admin(self) -> None:
        """Flip the admin flag."""
        self.admin = not self.admin
