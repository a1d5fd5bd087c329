"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

Subfolders:
- repositories/  → Data persistence interfaces (Prisma in production)
- (root files)   → Other external capabilities:
    - password_hasher.py → one-way credential hash + verify
    - token_issuer.py    → signed, time-boxed session tokens
    - artifact_store.py  → physical file storage
"""

from directchat.domain.ports.password_hasher import PasswordHasher
from directchat.domain.ports.token_issuer import TokenIssuer, SessionToken
from directchat.domain.ports.artifact_store import ArtifactStore

__all__ = [
    "PasswordHasher",
    "TokenIssuer",
    "SessionToken",
    "ArtifactStore",
]
