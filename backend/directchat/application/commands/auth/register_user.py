"""
Register User Command.

Steps:
1. Validate password length
2. Look up users colliding on email OR username (one query)
3. Email collision wins over username collision when both apply
4. Hash password, insert user
5. Issue a session token

Email and username are stored exactly as given; uniqueness is case-sensitive.
"""

import logging
from dataclasses import dataclass

from directchat.application.common.interfaces import Command, CommandHandler
from directchat.config.settings import Config
from directchat.domain.entities.user import User
from directchat.domain.exceptions import (
    ConflictError,
    DomainValidationError,
    DuplicateEmailError,
    DuplicateUsernameError,
)
from directchat.domain.ports import PasswordHasher, SessionToken, TokenIssuer
from directchat.domain.ports.repositories import UserRepository
from directchat.domain.value_objects.user_email import UserEmail
from directchat.domain.value_objects.username import Username

logger = logging.getLogger(__name__)


@dataclass
class AuthResult:
    user: User
    session: SessionToken


@dataclass(frozen=True)
class RegisterUserCommand(Command[AuthResult]):
    email: UserEmail
    username: Username
    password: str


class RegisterUserHandler(CommandHandler[AuthResult]):
    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_issuer: TokenIssuer,
    ):
        self._user_repository = user_repository
        self._password_hasher = password_hasher
        self._token_issuer = token_issuer

    async def execute(self, command: RegisterUserCommand) -> AuthResult:
        if len(command.password) < Config.PASSWORD_MIN_LENGTH:
            raise DomainValidationError(
                f"Password must be at least {Config.PASSWORD_MIN_LENGTH} characters"
            )

        await self._ensure_available(command.email, command.username)

        user = User.register(
            email=command.email,
            username=command.username,
            password_hash=self._password_hasher.hash(command.password),
        )
        try:
            user = await self._user_repository.create(user)
        except ConflictError:
            # Lost a race with a concurrent registration; report which field.
            await self._ensure_available(command.email, command.username)
            raise

        logger.info(f"[Auth] Registered user {user.id.value} ({user.username.value})")
        session = self._token_issuer.issue(user.id, user.email)
        return AuthResult(user=user, session=session)

    async def _ensure_available(self, email: UserEmail, username: Username) -> None:
        existing = await self._user_repository.find_by_email_or_username(
            email, username
        )
        if any(u.email == email for u in existing):
            raise DuplicateEmailError()
        if any(u.username == username for u in existing):
            raise DuplicateUsernameError()
