"""
Token Issuer Port - Signed, time-boxed claims token for a resolved user.
Implementation: directchat/infrastructure/security/jwt_token_issuer.py
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime

from directchat.domain.value_objects.user_email import UserEmail
from directchat.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class SessionToken:
    token: str
    user_id: UserId
    email: UserEmail
    issued_at: datetime
    expires_at: datetime


class TokenIssuer(ABC):
    @abstractmethod
    def issue(self, user_id: UserId, email: UserEmail) -> SessionToken: ...
