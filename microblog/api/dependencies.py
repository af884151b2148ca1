"""FastAPI dependencies for authentication, services and pagination."""

from typing import Annotated

from fastapi import Depends, HTTPException, Query, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from microblog.config import get_settings
from microblog.database import get_db
from microblog.exceptions import SignInRequired
from microblog.models.user import User
from microblog.services.auth import decode_access_token
from microblog.services.micropost_service import MicropostService
from microblog.services.relationship_service import RelationshipService
from microblog.services.user_service import UserService

security = HTTPBearer(auto_error=False)


def get_current_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Get the current user from a bearer token or the session cookie."""
    settings = get_settings()
    if credentials is not None:
        token = credentials.credentials
    else:
        token = request.cookies.get(settings.session_cookie_name)

    if not token:
        raise SignInRequired("Not authenticated")

    payload = decode_access_token(token)
    if payload is None or payload.get("sub") is None:
        raise SignInRequired("Invalid authentication credentials")

    user = db.get(User, int(payload["sub"]))
    if user is None:
        raise SignInRequired("User not found")

    return user


def get_admin_user(
    current_user: Annotated[User, Depends(get_current_user)],
) -> User:
    """Require the current user to be an admin."""
    if not current_user.admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin privileges required",
        )
    return current_user


class Pagination:
    """Page/per_page query parameters."""

    def __init__(
        self,
        page: Annotated[int, Query(ge=1)] = 1,
        per_page: Annotated[int | None, Query(ge=1, le=100)] = None,
    ):
        self.page = page
        self.per_page = per_page or get_settings().per_page


def get_user_service(
    db: Annotated[Session, Depends(get_db)],
) -> UserService:
    """Get user service with dependencies."""
    return UserService(db)


def get_micropost_service(
    db: Annotated[Session, Depends(get_db)],
) -> MicropostService:
    """Get micropost service with dependencies."""
    return MicropostService(db)


def get_relationship_service(
    db: Annotated[Session, Depends(get_db)],
) -> RelationshipService:
    """Get relationship service with dependencies."""
    return RelationshipService(db)
