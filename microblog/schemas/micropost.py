"""Micropost schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from microblog.models.micropost import MICROPOST_MAX_LENGTH


class MicropostCreate(BaseModel):
    """Create a new micropost."""

    content: str = Field(..., min_length=1, max_length=MICROPOST_MAX_LENGTH)

    @field_validator("content", mode="before")
    @classmethod
    def strip_content(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value


class MicropostResponse(BaseModel):
    """Micropost response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    content: str
    user_id: int
    created_at: datetime
    updated_at: datetime
