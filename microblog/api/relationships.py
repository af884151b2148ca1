"""Follow/unfollow API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from microblog.api.dependencies import (
    get_current_user,
    get_relationship_service,
    get_user_service,
)
from microblog.models.user import User
from microblog.schemas.relationship import RelationshipCreate, RelationshipResponse
from microblog.services.relationship_service import RelationshipService
from microblog.services.user_service import UserService

router = APIRouter(prefix="/api/v1/relationships", tags=["relationships"])


@router.post("", response_model=RelationshipResponse, status_code=status.HTTP_201_CREATED)
async def follow_user(
    relationship_data: RelationshipCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    users: Annotated[UserService, Depends(get_user_service)],
    service: Annotated[RelationshipService, Depends(get_relationship_service)],
):
    """Follow a user."""
    followed = users.get(relationship_data.followed_id)
    if followed.id == current_user.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="You cannot follow yourself",
        )
    return service.follow(current_user, followed)


@router.delete("/{relationship_id}", status_code=status.HTTP_204_NO_CONTENT)
async def unfollow_user(
    relationship_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[RelationshipService, Depends(get_relationship_service)],
):
    """Unfollow a user by removing the follow edge."""
    service.delete(relationship_id, current_user)
