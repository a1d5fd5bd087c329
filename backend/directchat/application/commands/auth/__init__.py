"""Authentication commands."""

from directchat.application.commands.auth.register_user import (
    AuthResult,
    RegisterUserCommand,
    RegisterUserHandler,
)
from directchat.application.commands.auth.login_user import (
    LoginUserCommand,
    LoginUserHandler,
)

__all__ = [
    "AuthResult",
    "RegisterUserCommand",
    "RegisterUserHandler",
    "LoginUserCommand",
    "LoginUserHandler",
]
