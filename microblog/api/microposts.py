"""Micropost and feed API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from microblog.api.dependencies import Pagination, get_current_user, get_micropost_service
from microblog.models.user import User
from microblog.schemas.micropost import MicropostCreate, MicropostResponse
from microblog.services.micropost_service import MicropostService

router = APIRouter(prefix="/api/v1", tags=["microposts"])


@router.post("/microposts", response_model=MicropostResponse, status_code=status.HTTP_201_CREATED)
async def create_micropost(
    micropost_data: MicropostCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[MicropostService, Depends(get_micropost_service)],
):
    """Post a new micropost."""
    return service.create(current_user, micropost_data.content)


@router.delete("/microposts/{micropost_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_micropost(
    micropost_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[MicropostService, Depends(get_micropost_service)],
):
    """Delete one of the current user's microposts."""
    service.delete(micropost_id, current_user)


@router.get("/feed", response_model=list[MicropostResponse])
async def get_feed(
    pagination: Annotated[Pagination, Depends()],
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[MicropostService, Depends(get_micropost_service)],
):
    """Get the current user's status feed."""
    return service.feed(current_user, pagination.page, pagination.per_page)
