"""
API Routers - FastAPI endpoint definitions.
"""

from directchat.presentation.api.auth import router as auth_router
from directchat.presentation.api.users import router as users_router
from directchat.presentation.api.conversations import router as conversations_router
from directchat.presentation.api.files import router as files_router

__all__ = [
    "auth_router",
    "users_router",
    "conversations_router",
    "files_router",
]
