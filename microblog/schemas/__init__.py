"""Pydantic schemas for API requests and responses."""

from microblog.schemas.auth import AuthResponse, UserLogin
from microblog.schemas.micropost import MicropostCreate, MicropostResponse
from microblog.schemas.relationship import RelationshipCreate, RelationshipResponse
from microblog.schemas.user import (
    UserCreate,
    UserEditResponse,
    UserProfileResponse,
    UserResponse,
    UserUpdate,
)

__all__ = [
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "UserEditResponse",
    "UserProfileResponse",
    "UserLogin",
    "AuthResponse",
    "MicropostCreate",
    "MicropostResponse",
    "RelationshipCreate",
    "RelationshipResponse",
]
