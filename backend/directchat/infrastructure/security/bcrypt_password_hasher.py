"""
BcryptPasswordHasher - PasswordHasher port backed by the bcrypt library.
"""

import logging

import bcrypt

from directchat.domain.exceptions import DomainValidationError
from directchat.domain.ports.password_hasher import PasswordHasher

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


class BcryptPasswordHasher(PasswordHasher):
    def __init__(self, rounds: int = 12):
        self._rounds = rounds

    def hash(self, password: str) -> str:
        secret = password.encode("utf-8")
        if len(secret) > BCRYPT_MAX_BYTES:
            raise DomainValidationError(
                f"Password cannot be longer than {BCRYPT_MAX_BYTES} bytes"
            )
        return bcrypt.hashpw(secret, bcrypt.gensalt(rounds=self._rounds)).decode(
            "utf-8"
        )

    def verify(self, password: str, password_hash: str) -> bool:
        secret = password.encode("utf-8")
        if len(secret) > BCRYPT_MAX_BYTES:
            return False
        try:
            return bcrypt.checkpw(secret, password_hash.encode("utf-8"))
        except ValueError:
            # Stored hash is not a bcrypt hash
            logger.warning("[Auth] Stored password hash has an unknown format")
            return False
