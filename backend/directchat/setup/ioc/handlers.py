"""
Dishka provider for use-case handlers.

Handlers only ask for abstract ports (repositories, hasher, token issuer,
artifact store). Whatever provider supplies those ports decides where data
lives: InfrastructureProvider in container.py wires Prisma, tests wire
in-memory stores.

Flow:
  Container → provides → PrismaConversationRepository → to → CreateConversationHandler
                                    ↓
                            uses ConversationRepository interface
"""

from dishka import Provider, Scope, provide

from directchat.domain.ports import ArtifactStore, PasswordHasher, TokenIssuer
from directchat.domain.ports.repositories import (
    ConversationRepository,
    FileRepository,
    MessageRepository,
    UserRepository,
)
from directchat.application.commands.auth import (
    LoginUserHandler,
    RegisterUserHandler,
)
from directchat.application.commands.conversations import CreateConversationHandler
from directchat.application.commands.chat import SendMessageHandler
from directchat.application.commands.files import StoreFileHandler, UploadFileHandler
from directchat.application.queries.users import ListUsersHandler
from directchat.application.queries.conversations import ListConversationsHandler
from directchat.application.queries.chat import GetMessagesHandler
from directchat.application.queries.files import (
    DownloadFileHandler,
    GetFileInfoHandler,
)


class HandlerProvider(Provider):
    """
    Registers command/query handlers.

    - Scope.REQUEST = new handler per HTTP request
    - Parameters ask for ports (abstract); Dishka resolves them from
      whichever provider registered the implementation
    """

    scope = Scope.REQUEST

    # ==================== AUTH ====================

    @provide
    def get_register_user_handler(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_issuer: TokenIssuer,
    ) -> RegisterUserHandler:
        return RegisterUserHandler(user_repository, password_hasher, token_issuer)

    @provide
    def get_login_user_handler(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_issuer: TokenIssuer,
    ) -> LoginUserHandler:
        return LoginUserHandler(user_repository, password_hasher, token_issuer)

    @provide
    def get_list_users_handler(
        self, user_repository: UserRepository
    ) -> ListUsersHandler:
        return ListUsersHandler(user_repository)

    # ==================== CONVERSATIONS ====================

    @provide
    def get_create_conversation_handler(
        self,
        conversation_repository: ConversationRepository,
        user_repository: UserRepository,
    ) -> CreateConversationHandler:
        return CreateConversationHandler(conversation_repository, user_repository)

    @provide
    def get_list_conversations_handler(
        self, conversation_repository: ConversationRepository
    ) -> ListConversationsHandler:
        return ListConversationsHandler(conversation_repository)

    # ==================== CHAT ====================

    @provide
    def get_send_message_handler(
        self,
        conversation_repository: ConversationRepository,
        message_repository: MessageRepository,
        file_repository: FileRepository,
    ) -> SendMessageHandler:
        return SendMessageHandler(
            conv_repo=conversation_repository,
            msg_repo=message_repository,
            file_repo=file_repository,
        )

    @provide
    def get_messages_handler(
        self,
        conversation_repository: ConversationRepository,
        message_repository: MessageRepository,
    ) -> GetMessagesHandler:
        return GetMessagesHandler(
            conv_repo=conversation_repository,
            msg_repo=message_repository,
        )

    # ==================== FILES ====================

    @provide
    def get_upload_file_handler(
        self,
        file_repository: FileRepository,
        user_repository: UserRepository,
        artifact_store: ArtifactStore,
    ) -> UploadFileHandler:
        return UploadFileHandler(file_repository, user_repository, artifact_store)

    @provide
    def get_store_file_handler(
        self,
        upload_handler: UploadFileHandler,
        user_repository: UserRepository,
        artifact_store: ArtifactStore,
    ) -> StoreFileHandler:
        return StoreFileHandler(upload_handler, user_repository, artifact_store)

    @provide
    def get_file_info_handler(
        self,
        file_repository: FileRepository,
        conversation_repository: ConversationRepository,
    ) -> GetFileInfoHandler:
        return GetFileInfoHandler(file_repository, conversation_repository)

    @provide
    def get_download_file_handler(
        self,
        file_repository: FileRepository,
        conversation_repository: ConversationRepository,
        artifact_store: ArtifactStore,
    ) -> DownloadFileHandler:
        return DownloadFileHandler(
            file_repository, conversation_repository, artifact_store
        )
