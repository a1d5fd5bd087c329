"""
Auth API Router - registration and login.

Both endpoints return the public user plus a bearer token; the password
hash never leaves the application layer.
"""

from logging import getLogger

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, status
from pydantic import BaseModel

from directchat.application.commands.auth import (
    AuthResult,
    LoginUserCommand,
    LoginUserHandler,
    RegisterUserCommand,
    RegisterUserHandler,
)
from directchat.application.dto.user import AuthResultDTO, PublicUserDTO
from directchat.domain.value_objects.user_email import UserEmail
from directchat.domain.value_objects.username import Username

logger = getLogger(__name__)


# ==================== REQUEST MODELS ====================


class RegisterRequest(BaseModel):
    email: str
    username: str
    password: str


class LoginRequest(BaseModel):
    email: str
    password: str


def _to_response(result: AuthResult) -> AuthResultDTO:
    return AuthResultDTO(
        user=PublicUserDTO.from_entity(result.user),
        token=result.session.token,
        expires_at=result.session.expires_at,
    )


# ==================== ROUTER ====================

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=AuthResultDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def register(
    request: RegisterRequest,
    handler: FromDishka[RegisterUserHandler],
):
    """Create an account and sign it in."""
    command = RegisterUserCommand(
        email=UserEmail(request.email),
        username=Username(request.username),
        password=request.password,
    )
    result = await handler.execute(command)
    logger.info(f"Registered user {result.user.id}")
    return _to_response(result)


@router.post("/login", response_model=AuthResultDTO)
@inject
async def login(
    request: LoginRequest,
    handler: FromDishka[LoginUserHandler],
):
    """Exchange email + password for a bearer token."""
    command = LoginUserCommand(
        email=UserEmail(request.email),
        password=request.password,
    )
    return _to_response(await handler.execute(command))
