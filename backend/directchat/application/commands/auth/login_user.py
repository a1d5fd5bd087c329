"""Login User Command."""

import logging
from dataclasses import dataclass

from directchat.application.commands.auth.register_user import AuthResult
from directchat.application.common.interfaces import Command, CommandHandler
from directchat.domain.exceptions import InvalidCredentialsError
from directchat.domain.ports import PasswordHasher, TokenIssuer
from directchat.domain.ports.repositories import UserRepository
from directchat.domain.value_objects.user_email import UserEmail

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginUserCommand(Command[AuthResult]):
    email: UserEmail
    password: str


class LoginUserHandler(CommandHandler[AuthResult]):
    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_issuer: TokenIssuer,
    ):
        self._user_repository = user_repository
        self._password_hasher = password_hasher
        self._token_issuer = token_issuer

    async def execute(self, command: LoginUserCommand) -> AuthResult:
        """
        Authenticate by exact email and password.

        Raises:
            InvalidCredentialsError: unknown email or wrong password, with the
                same message in both cases
        """
        user = await self._user_repository.get_by_email(command.email)
        if user is None or not self._password_hasher.verify(
            command.password, user.password_hash
        ):
            logger.info("[Auth] Failed login attempt")
            raise InvalidCredentialsError()

        session = self._token_issuer.issue(user.id, user.email)
        return AuthResult(user=user, session=session)
