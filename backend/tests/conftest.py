import pytest
from dishka import Provider, Scope, make_async_container, provide
from fastapi.testclient import TestClient

from directchat.application.commands.auth import LoginUserHandler, RegisterUserHandler
from directchat.application.commands.chat import SendMessageHandler
from directchat.application.commands.conversations import CreateConversationHandler
from directchat.application.commands.files import StoreFileHandler, UploadFileHandler
from directchat.application.queries.chat import GetMessagesHandler
from directchat.application.queries.conversations import ListConversationsHandler
from directchat.application.queries.files import DownloadFileHandler, GetFileInfoHandler
from directchat.application.queries.users import ListUsersHandler
from directchat.config.settings import Config
from directchat.domain.entities.user import User
from directchat.domain.ports import ArtifactStore, PasswordHasher, TokenIssuer
from directchat.domain.ports.repositories import (
    ConversationRepository,
    FileRepository,
    MessageRepository,
    UserRepository,
)
from directchat.domain.value_objects import UserEmail, Username
from directchat.fastapi_app import create_fastapi_app
from directchat.infrastructure.security import BcryptPasswordHasher, JwtTokenIssuer
from directchat.infrastructure.storage import FileStorageService
from directchat.setup.ioc import HandlerProvider

from fakes import (
    InMemoryArtifactStore,
    InMemoryConversationRepository,
    InMemoryFileRepository,
    InMemoryMessageRepository,
    InMemoryStore,
    InMemoryUserRepository,
    PlainPasswordHasher,
)


def _token_issuer() -> JwtTokenIssuer:
    return JwtTokenIssuer(
        secret=Config.JWT_SECRET,
        issuer=Config.JWT_ISSUER,
        audience=Config.JWT_AUDIENCE,
        ttl_hours=Config.TOKEN_TTL_HOURS,
    )


# ==================== IN-MEMORY PORTS ====================


@pytest.fixture()
def store():
    return InMemoryStore()


@pytest.fixture()
def user_repo(store):
    return InMemoryUserRepository(store)


@pytest.fixture()
def conv_repo(store):
    return InMemoryConversationRepository(store)


@pytest.fixture()
def msg_repo(store):
    return InMemoryMessageRepository(store)


@pytest.fixture()
def file_repo(store):
    return InMemoryFileRepository(store)


@pytest.fixture()
def artifacts():
    return InMemoryArtifactStore()


@pytest.fixture()
def hasher():
    return PlainPasswordHasher()


@pytest.fixture()
def token_issuer():
    return _token_issuer()


@pytest.fixture()
def make_user(user_repo):
    """Insert a user straight into the store; returns the saved entity."""

    async def _make(username: str, email: str = None) -> User:
        email = email or f"{username}@example.com"
        return await user_repo.create(
            User.register(UserEmail(email), Username(username), "plain$password123")
        )

    return _make


# ==================== HANDLERS ====================


@pytest.fixture()
def register_handler(user_repo, hasher, token_issuer):
    return RegisterUserHandler(user_repo, hasher, token_issuer)


@pytest.fixture()
def login_handler(user_repo, hasher, token_issuer):
    return LoginUserHandler(user_repo, hasher, token_issuer)


@pytest.fixture()
def list_users_handler(user_repo):
    return ListUsersHandler(user_repo)


@pytest.fixture()
def create_conversation_handler(conv_repo, user_repo):
    return CreateConversationHandler(conv_repo, user_repo)


@pytest.fixture()
def list_conversations_handler(conv_repo):
    return ListConversationsHandler(conv_repo)


@pytest.fixture()
def send_message_handler(conv_repo, msg_repo, file_repo):
    return SendMessageHandler(conv_repo=conv_repo, msg_repo=msg_repo, file_repo=file_repo)


@pytest.fixture()
def get_messages_handler(conv_repo, msg_repo):
    return GetMessagesHandler(conv_repo=conv_repo, msg_repo=msg_repo)


@pytest.fixture()
def upload_file_handler(file_repo, user_repo, artifacts):
    return UploadFileHandler(file_repo, user_repo, artifacts)


@pytest.fixture()
def store_file_handler(upload_file_handler, user_repo, artifacts):
    return StoreFileHandler(upload_file_handler, user_repo, artifacts)


@pytest.fixture()
def file_info_handler(file_repo, conv_repo):
    return GetFileInfoHandler(file_repo, conv_repo)


@pytest.fixture()
def download_handler(file_repo, conv_repo, artifacts):
    return DownloadFileHandler(file_repo, conv_repo, artifacts)


# ==================== FASTAPI ====================


class InMemoryProvider(Provider):
    """Ports for the HTTP tests: in-memory tables, real bcrypt/JWT/disk storage."""

    def __init__(self, store: InMemoryStore, upload_base: str):
        super().__init__()
        self._store = store
        self._upload_base = upload_base

    @provide(scope=Scope.APP)
    def get_password_hasher(self) -> PasswordHasher:
        return BcryptPasswordHasher(rounds=4)

    @provide(scope=Scope.APP)
    def get_token_issuer(self) -> TokenIssuer:
        return _token_issuer()

    @provide(scope=Scope.APP)
    def get_artifact_store(self) -> ArtifactStore:
        return FileStorageService(upload_base=self._upload_base)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self) -> UserRepository:
        return InMemoryUserRepository(self._store)

    @provide(scope=Scope.REQUEST)
    def get_conversation_repository(self) -> ConversationRepository:
        return InMemoryConversationRepository(self._store)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self) -> MessageRepository:
        return InMemoryMessageRepository(self._store)

    @provide(scope=Scope.REQUEST)
    def get_file_repository(self) -> FileRepository:
        return InMemoryFileRepository(self._store)


@pytest.fixture()
def app(store, tmp_path):
    """Create and configure a new FastAPI app instance for each test."""
    container = make_async_container(
        InMemoryProvider(store, str(tmp_path / "uploads")), HandlerProvider()
    )
    return create_fastapi_app(container)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def register(client):
    """Register through the API; returns (user json, auth headers)."""

    def _register(username: str, email: str = None, password: str = "password123"):
        res = client.post(
            "/auth/register",
            json={
                "email": email or f"{username}@example.com",
                "username": username,
                "password": password,
            },
        )
        assert res.status_code == 201, res.text
        body = res.json()
        return body["user"], {"Authorization": f"Bearer {body['token']}"}

    return _register
