"""
JwtTokenIssuer - TokenIssuer port backed by PyJWT (HS256).

Claims:
- sub / user_id: user id (sub as string, per RFC 7519)
- email: email at issue time
- iat / exp: issued-at and expiry (iat + ttl, 24 hours by default)
- iss / aud: service issuer and audience, checked on decode

Decoding lives in presentation/dependencies/auth.py next to the bearer scheme.
"""

from datetime import datetime, timedelta, timezone

import jwt

from directchat.domain.ports.token_issuer import SessionToken, TokenIssuer
from directchat.domain.value_objects.user_email import UserEmail
from directchat.domain.value_objects.user_id import UserId

JWT_ALGORITHM = "HS256"


class JwtTokenIssuer(TokenIssuer):
    def __init__(
        self,
        secret: str,
        issuer: str,
        audience: str,
        ttl_hours: int = 24,
    ):
        self._secret = secret
        self._issuer = issuer
        self._audience = audience
        self._ttl = timedelta(hours=ttl_hours)

    def issue(self, user_id: UserId, email: UserEmail) -> SessionToken:
        # JWT timestamps have one-second resolution
        issued_at = datetime.now(timezone.utc).replace(microsecond=0)
        expires_at = issued_at + self._ttl
        payload = {
            "sub": str(user_id.value),
            "user_id": user_id.value,
            "email": email.value,
            "iat": issued_at,
            "exp": expires_at,
            "iss": self._issuer,
            "aud": self._audience,
        }
        token = jwt.encode(payload, self._secret, algorithm=JWT_ALGORITHM)
        return SessionToken(
            token=token,
            user_id=user_id,
            email=email,
            issued_at=issued_at,
            expires_at=expires_at,
        )
