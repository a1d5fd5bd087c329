"""
Security adapters - credential hashing and session tokens.
"""

from directchat.infrastructure.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from directchat.infrastructure.security.jwt_token_issuer import JwtTokenIssuer

__all__ = [
    "BcryptPasswordHasher",
    "JwtTokenIssuer",
]
