"""User API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from microblog.api.dependencies import (
    Pagination,
    get_admin_user,
    get_current_user,
    get_micropost_service,
    get_relationship_service,
    get_user_service,
)
from microblog.models.user import User
from microblog.schemas.micropost import MicropostResponse
from microblog.schemas.user import (
    UserEditResponse,
    UserProfileResponse,
    UserResponse,
    UserUpdate,
)
from microblog.services.micropost_service import MicropostService
from microblog.services.relationship_service import RelationshipService
from microblog.services.user_service import UserService

router = APIRouter(prefix="/api/v1/users", tags=["users"])


def require_same_user(user_id: int, current_user: User) -> None:
    """Only the account owner may view or change account settings."""
    if current_user.id != user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can only edit your own account",
        )


@router.get("", response_model=list[UserResponse])
async def list_users(
    pagination: Annotated[Pagination, Depends()],
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[UserService, Depends(get_user_service)],
):
    """List all users."""
    return service.list_users(pagination.page, pagination.per_page)


@router.get("/{user_id}", response_model=UserProfileResponse)
async def get_user(
    user_id: int,
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Get a user's profile."""
    return service.profile(service.get(user_id))


@router.get("/{user_id}/edit", response_model=UserEditResponse)
async def edit_user(
    user_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Get the editable settings of the current user's account."""
    require_same_user(user_id, current_user)
    return service.get(user_id)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    user_data: UserUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Update the current user's account."""
    require_same_user(user_id, current_user)
    return service.update(current_user, user_data)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int,
    admin: Annotated[User, Depends(get_admin_user)],
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Destroy a user (admin only)."""
    if admin.id == user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admins cannot delete themselves",
        )
    service.delete(service.get(user_id))


@router.get("/{user_id}/microposts", response_model=list[MicropostResponse])
async def list_user_microposts(
    user_id: int,
    pagination: Annotated[Pagination, Depends()],
    users: Annotated[UserService, Depends(get_user_service)],
    microposts: Annotated[MicropostService, Depends(get_micropost_service)],
):
    """Get a user's microposts, newest first."""
    user = users.get(user_id)
    return microposts.for_user(user.id, pagination.page, pagination.per_page)


@router.get("/{user_id}/following", response_model=list[UserResponse])
async def list_following(
    user_id: int,
    pagination: Annotated[Pagination, Depends()],
    current_user: Annotated[User, Depends(get_current_user)],
    users: Annotated[UserService, Depends(get_user_service)],
    relationships: Annotated[RelationshipService, Depends(get_relationship_service)],
):
    """Get the users that a user follows."""
    user = users.get(user_id)
    return relationships.following(user, pagination.page, pagination.per_page)


@router.get("/{user_id}/followers", response_model=list[UserResponse])
async def list_followers(
    user_id: int,
    pagination: Annotated[Pagination, Depends()],
    current_user: Annotated[User, Depends(get_current_user)],
    users: Annotated[UserService, Depends(get_user_service)],
    relationships: Annotated[RelationshipService, Depends(get_relationship_service)],
):
    """Get the users following a user."""
    user = users.get(user_id)
    return relationships.followers(user, pagination.page, pagination.per_page)
