"""
DOMAIN SERVICES - Pure decision logic shared by several use cases.
"""

from directchat.domain.services.authorization_policy import (
    can_participate,
    can_access_file,
)

__all__ = [
    "can_participate",
    "can_access_file",
]
