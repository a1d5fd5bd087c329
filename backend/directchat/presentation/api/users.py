"""
Users API Router - directory lookup for starting conversations.
"""

from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from directchat.application.dto.user import PublicUserDTO
from directchat.application.queries.users import ListUsersHandler, ListUsersQuery
from directchat.domain.value_objects.user_id import UserId
from directchat.presentation.dependencies.auth import AuthUser, get_current_user


class ListUsersResponse(BaseModel):
    users: list[PublicUserDTO]


router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=ListUsersResponse)
@inject
async def list_users(
    handler: FromDishka[ListUsersHandler],
    current_user: AuthUser = Depends(get_current_user),
    search: Optional[str] = None,
    exclude_user_id: Optional[int] = None,
):
    """
    Search users by username or email (case-insensitive substring).

    Typical client call passes its own id as ``exclude_user_id``.
    """
    query = ListUsersQuery(
        search=search,
        exclude_user_id=(
            UserId(exclude_user_id) if exclude_user_id is not None else None
        ),
    )
    users = await handler.execute(query)
    return ListUsersResponse(users=[PublicUserDTO.from_entity(u) for u in users])
