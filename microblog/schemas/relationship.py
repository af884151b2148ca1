"""Relationship schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class RelationshipCreate(BaseModel):
    """Follow another user."""

    followed_id: int = Field(..., gt=0)


class RelationshipResponse(BaseModel):
    """A follow edge."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    follower_id: int
    followed_id: int
    created_at: datetime
