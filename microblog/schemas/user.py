"""User schemas and registration validation rules."""

import re
from datetime import datetime
from typing import Annotated

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    StringConstraints,
    field_validator,
    model_validator,
)

from microblog.models.user import NAME_MAX_LENGTH

# Rejects commas in the domain and a trailing dot
EMAIL_REGEX = re.compile(r"^[\w+\-.]+@[a-z\d\-.]+\.[a-z]+$", re.IGNORECASE)

PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 40

NameStr = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=NAME_MAX_LENGTH)
]


def normalize_email(value: str) -> str:
    """Reject addresses outside the accepted shape and lowercase the rest."""
    if not EMAIL_REGEX.match(value):
        raise ValueError("Email is invalid")
    return value.lower()


class UserCreate(BaseModel):
    """User registration request."""

    name: NameStr
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH)
    password_confirmation: str

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        return normalize_email(value)

    @model_validator(mode="after")
    def passwords_match(self) -> "UserCreate":
        if self.password != self.password_confirmation:
            raise ValueError("Password confirmation doesn't match Password")
        return self


class UserUpdate(BaseModel):
    """Profile update. Only the fields that are sent are changed."""

    name: NameStr | None = None
    email: EmailStr | None = None
    password: str | None = Field(
        None, min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH
    )
    password_confirmation: str | None = None

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str | None) -> str | None:
        if value is None:
            return value
        return normalize_email(value)

    @model_validator(mode="after")
    def passwords_match(self) -> "UserUpdate":
        if self.password is not None and self.password != self.password_confirmation:
            raise ValueError("Password confirmation doesn't match Password")
        return self


class UserResponse(BaseModel):
    """Public user information."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    admin: bool


class UserEditResponse(BaseModel):
    """Fields a user may edit on their own account."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str


class UserProfileResponse(UserResponse):
    """User profile with activity counts."""

    created_at: datetime
    micropost_count: int = 0
    following_count: int = 0
    followers_count: int = 0
