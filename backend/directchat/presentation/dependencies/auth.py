"""
Authentication Dependency for FastAPI.

- Extracts and validates the JWT from the Authorization header (Bearer scheme)
- Decodes it with the same secret/issuer/audience the JwtTokenIssuer signs with
- Returns the caller's id and email for use in route handlers
- Raises HTTPException 401 if unauthorized
"""

from dataclasses import dataclass
from typing import Optional

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from directchat.config.settings import Config
from directchat.domain.value_objects.user_email import UserEmail
from directchat.domain.value_objects.user_id import UserId
from directchat.infrastructure.security.jwt_token_issuer import JWT_ALGORITHM


@dataclass(frozen=True)
class AuthUser:
    id: UserId
    email: UserEmail


security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthUser:
    """
    Extract and validate user from JWT token.

    Raises:
        HTTPException 401 if token is missing, invalid, expired, or lacks
        required claims
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")

    try:
        claims = jwt.decode(
            credentials.credentials,
            Config.JWT_SECRET,
            algorithms=[JWT_ALGORITHM],
            audience=Config.JWT_AUDIENCE,
            issuer=Config.JWT_ISSUER,
            options={"require": ["exp", "iat", "aud", "iss", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        raise _unauthorized("Token has expired")
    except jwt.InvalidTokenError as e:
        raise _unauthorized(f"Invalid token: {str(e)}")

    user_id = claims.get("user_id")
    email = claims.get("email")
    if not user_id or not email:
        raise _unauthorized("Missing required claims in token")

    try:
        return AuthUser(id=UserId(int(user_id)), email=UserEmail(email))
    except (TypeError, ValueError):
        raise _unauthorized("Invalid token claims")
