"""
User Entity - A registered account.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from directchat.domain.value_objects.user_id import UserId
from directchat.domain.value_objects.user_email import UserEmail
from directchat.domain.value_objects.username import Username


@dataclass
class User:
    email: UserEmail
    username: Username
    password_hash: str
    created_at: datetime
    updated_at: datetime
    id: Optional[UserId] = None

    @classmethod
    def register(
        cls, email: UserEmail, username: Username, password_hash: str
    ) -> User:
        now = datetime.now(timezone.utc)
        return cls(
            email=email,
            username=username,
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
        )
