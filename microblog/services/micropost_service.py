"""Micropost service: authoring, removal and the status feed."""

import logging

from fastapi import HTTPException, status
from sqlalchemy import or_, select
from sqlalchemy.orm import Query, Session

from microblog.models.micropost import Micropost
from microblog.models.relationship import Relationship
from microblog.models.user import User
from microblog.services.pagination import paginate

logger = logging.getLogger(__name__)


class MicropostService:
    """Service for micropost operations."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, user: User, content: str) -> Micropost:
        """Create a micropost authored by ``user``."""
        micropost = Micropost(content=content, user_id=user.id)
        self.db.add(micropost)
        self.db.commit()
        self.db.refresh(micropost)
        logger.info(f"User {user.id} posted micropost {micropost.id}")
        return micropost

    def delete(self, micropost_id: int, user: User) -> None:
        """Delete a micropost. Only its author may do so."""
        micropost = self.db.get(Micropost, micropost_id)
        if micropost is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Micropost not found"
            )
        if micropost.user_id != user.id:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="You can only delete your own microposts",
            )

        self.db.delete(micropost)
        self.db.commit()
        logger.info(f"User {user.id} deleted micropost {micropost_id}")

    def for_user(self, user_id: int, page: int, per_page: int) -> list[Micropost]:
        """A single user's microposts, newest first."""
        query = (
            self.db.query(Micropost)
            .filter(Micropost.user_id == user_id)
            .order_by(Micropost.created_at.desc(), Micropost.id.desc())
        )
        return paginate(query, page, per_page)

    def feed_query(self, user: User) -> Query:
        """Own microposts plus those of followed users, newest first."""
        followed_ids = select(Relationship.followed_id).where(
            Relationship.follower_id == user.id
        )
        return (
            self.db.query(Micropost)
            .filter(or_(Micropost.user_id == user.id, Micropost.user_id.in_(followed_ids)))
            .order_by(Micropost.created_at.desc(), Micropost.id.desc())
        )

    def feed(self, user: User, page: int = 1, per_page: int = 30) -> list[Micropost]:
        """One page of the user's status feed."""
        return paginate(self.feed_query(user), page, per_page)
