"""
Dishka DI Container Setup.

- InfrastructureProvider maps ports to Prisma, bcrypt, PyJWT and disk storage
- HandlerProvider (handlers.py) builds use-case handlers from those ports
- create_container() combines both; call it ONCE at app startup

Dishka concepts:
- Provider: Class that defines how to create dependencies
- @provide: Decorator to mark factory methods
- Scope: Lifecycle of dependency (APP = singleton, REQUEST = per-request)
"""

from typing import AsyncIterable

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide
from prisma import Prisma

from directchat.config.settings import Config
from directchat.domain.ports import ArtifactStore, PasswordHasher, TokenIssuer
from directchat.domain.ports.repositories import (
    ConversationRepository,
    FileRepository,
    MessageRepository,
    UserRepository,
)
from directchat.infrastructure.persistence import (
    PrismaConversationRepository,
    PrismaFileRepository,
    PrismaMessageRepository,
    PrismaUserRepository,
)
from directchat.infrastructure.security import BcryptPasswordHasher, JwtTokenIssuer
from directchat.infrastructure.storage import FileStorageService
from directchat.setup.ioc.handlers import HandlerProvider


class InfrastructureProvider(Provider):
    """
    Production adapters for every domain port.
    """

    # ==================== DATABASE ====================

    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        - Scope.APP = created ONCE when app starts, shared across all requests
        - Disconnected when the container closes at shutdown
        """
        prisma = Prisma()
        await prisma.connect()
        yield prisma
        await prisma.disconnect()

    # ==================== SECURITY / STORAGE ====================

    @provide(scope=Scope.APP)
    def get_password_hasher(self) -> PasswordHasher:
        return BcryptPasswordHasher(rounds=Config.BCRYPT_ROUNDS)

    @provide(scope=Scope.APP)
    def get_token_issuer(self) -> TokenIssuer:
        return JwtTokenIssuer(
            secret=Config.JWT_SECRET,
            issuer=Config.JWT_ISSUER,
            audience=Config.JWT_AUDIENCE,
            ttl_hours=Config.TOKEN_TTL_HOURS,
        )

    @provide(scope=Scope.APP)
    def get_artifact_store(self) -> ArtifactStore:
        return FileStorageService(upload_base=Config.UPLOAD_BASE)

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, prisma: Prisma) -> UserRepository:
        """
        - Return type is ABSTRACT (UserRepository)
        - Implementation is CONCRETE (PrismaUserRepository)
        """
        return PrismaUserRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_conversation_repository(self, prisma: Prisma) -> ConversationRepository:
        return PrismaConversationRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, prisma: Prisma) -> MessageRepository:
        return PrismaMessageRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_file_repository(self, prisma: Prisma) -> FileRepository:
        return PrismaFileRepository(prisma)


def create_container() -> AsyncContainer:
    """
    Create and configure the DI container.

    - make_async_container() creates the container with all providers
    - Call this ONCE at app startup
    """
    return make_async_container(InfrastructureProvider(), HandlerProvider())
