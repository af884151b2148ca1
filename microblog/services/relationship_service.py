"""Relationship service for following and unfollowing users."""

import logging

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from microblog.models.relationship import Relationship
from microblog.models.user import User
from microblog.services.pagination import paginate

logger = logging.getLogger(__name__)


class RelationshipService:
    """Service for the follow graph."""

    def __init__(self, db: Session):
        self.db = db

    def find(self, follower: User, followed: User) -> Relationship | None:
        return (
            self.db.query(Relationship)
            .filter(
                Relationship.follower_id == follower.id,
                Relationship.followed_id == followed.id,
            )
            .first()
        )

    def is_following(self, follower: User, followed: User) -> bool:
        """Check whether ``follower`` follows ``followed``."""
        return self.find(follower, followed) is not None

    def follow(self, follower: User, followed: User) -> Relationship:
        """Make ``follower`` follow ``followed``.

        Following someone already followed returns the existing edge.
        """
        existing = self.find(follower, followed)
        if existing:
            return existing

        relationship = Relationship(follower_id=follower.id, followed_id=followed.id)
        self.db.add(relationship)
        self.db.commit()
        self.db.refresh(relationship)
        logger.info(f"User {follower.id} followed user {followed.id}")
        return relationship

    def unfollow(self, follower: User, followed: User) -> None:
        """Remove the edge from ``follower`` to ``followed`` if there is one."""
        relationship = self.find(follower, followed)
        if relationship is None:
            return
        self.db.delete(relationship)
        self.db.commit()
        logger.info(f"User {follower.id} unfollowed user {followed.id}")

    def delete(self, relationship_id: int, user: User) -> None:
        """Delete a follow edge owned by ``user``."""
        relationship = (
            self.db.query(Relationship)
            .filter(Relationship.id == relationship_id, Relationship.follower_id == user.id)
            .first()
        )
        if relationship is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Relationship not found"
            )
        followed_id = relationship.followed_id
        self.db.delete(relationship)
        self.db.commit()
        logger.info(f"User {user.id} unfollowed user {followed_id}")

    def following(self, user: User, page: int, per_page: int) -> list[User]:
        """Users that ``user`` follows."""
        query = (
            self.db.query(User)
            .join(Relationship, Relationship.followed_id == User.id)
            .filter(Relationship.follower_id == user.id)
            .distinct()
            .order_by(User.id)
        )
        return paginate(query, page, per_page)

    def followers(self, user: User, page: int, per_page: int) -> list[User]:
        """Users that follow ``user``."""
        query = (
            self.db.query(User)
            .join(Relationship, Relationship.follower_id == User.id)
            .filter(Relationship.followed_id == user.id)
            .distinct()
            .order_by(User.id)
        )
        return paginate(query, page, per_page)
