"""User DTOs for API request/response."""

from __future__ import annotations
from datetime import datetime
from pydantic import BaseModel

from directchat.domain.entities.user import User


class PublicUserDTO(BaseModel):
    """User as seen by other clients. Never carries the password hash."""

    id: int
    email: str
    username: str
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> PublicUserDTO:
        return cls(
            id=user.id.value,
            email=user.email.value,
            username=user.username.value,
            created_at=user.created_at,
        )


class AuthResultDTO(BaseModel):
    """Result of register/login: the public user plus a bearer token."""

    user: PublicUserDTO
    token: str
    expires_at: datetime
