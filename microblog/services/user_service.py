"""User service for registration, profile updates and removal."""

import logging

from fastapi import HTTPException, status
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from microblog.models.micropost import Micropost
from microblog.models.relationship import Relationship
from microblog.models.user import User
from microblog.schemas.user import UserCreate, UserProfileResponse, UserUpdate
from microblog.services.auth import get_password_hash, get_user_by_email
from microblog.services.pagination import paginate

logger = logging.getLogger(__name__)


class UserService:
    """Service for user-related operations."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: int) -> User:
        """Get a user by id or raise 404."""
        user = self.db.get(User, user_id)
        if user is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        return user

    def list_users(self, page: int, per_page: int) -> list[User]:
        """List users in sign-up order."""
        return paginate(self.db.query(User).order_by(User.id), page, per_page)

    def email_taken(self, email: str, exclude_user_id: int | None = None) -> bool:
        """Check whether an email is in use, ignoring case."""
        query = self.db.query(User.id).filter(func.lower(User.email) == email.lower())
        if exclude_user_id is not None:
            query = query.filter(User.id != exclude_user_id)
        return query.first() is not None

    def create(self, data: UserCreate) -> User:
        """Register a new user. The plaintext password is never stored."""
        if get_user_by_email(self.db, data.email):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Email already registered",
            )

        user = User(
            name=data.name,
            email=data.email.lower(),
            password_hash=get_password_hash(data.password),
        )
        self.db.add(user)
        self._commit()
        self.db.refresh(user)
        logger.info(f"Registered user {user.id}")
        return user

    def update(self, user: User, data: UserUpdate) -> User:
        """Apply a profile update."""
        if data.email is not None and data.email != user.email:
            if self.email_taken(data.email, exclude_user_id=user.id):
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="Email already registered",
                )
            user.email = data.email.lower()
        if data.name is not None:
            user.name = data.name
        if data.password is not None:
            user.password_hash = get_password_hash(data.password)

        self._commit()
        self.db.refresh(user)
        logger.info(f"Updated user {user.id}")
        return user

    def delete(self, user: User) -> None:
        """Destroy a user together with their microposts and follow edges."""
        user_id = user.id
        self.db.delete(user)
        self.db.commit()
        logger.info(f"Destroyed user {user_id}")

    def profile(self, user: User) -> UserProfileResponse:
        """Build a profile with activity counts."""
        micropost_count = (
            self.db.query(func.count(Micropost.id)).filter(Micropost.user_id == user.id).scalar()
        )
        following_count = (
            self.db.query(func.count(Relationship.id))
            .filter(Relationship.follower_id == user.id)
            .scalar()
        )
        followers_count = (
            self.db.query(func.count(Relationship.id))
            .filter(Relationship.followed_id == user.id)
            .scalar()
        )

        profile = UserProfileResponse.model_validate(user)
        profile.micropost_count = micropost_count or 0
        profile.following_count = following_count or 0
        profile.followers_count = followers_count or 0
        return profile

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Email already registered",
            ) from None
