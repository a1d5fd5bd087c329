"""
Password Hasher Port - Opaque one-way hash with a paired verify function.
Implementation: directchat/infrastructure/security/bcrypt_password_hasher.py
"""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    @abstractmethod
    def hash(self, password: str) -> str: ...

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Return False (never raise) when the password does not match."""
        ...
