"""
Users CRUD routes.  Every route requires a Bearer token.

Route prefix: /api/users
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Response, status

from api.dependencies import get_user_service
from auth.dependencies import get_current_user_id
from core.user_service import UserService
from utils.schemas import ErrorResponse, UserCreateRequest, UserPublic, UserUpdateRequest

_UNAUTHORIZED = {401: {"model": ErrorResponse, "description": "Missing, invalid or expired token"}}
_NOT_FOUND = {404: {"model": ErrorResponse, "description": "User not found"}}

router = APIRouter(
    tags=["users"],
    dependencies=[Depends(get_current_user_id)],
    responses=_UNAUTHORIZED,
)


@router.get("", response_model=List[UserPublic], summary="List users")
async def list_users(service: UserService = Depends(get_user_service)) -> List[UserPublic]:
    return service.list()


@router.get("/{user_id}", response_model=UserPublic, summary="Get a user", responses=_NOT_FOUND)
async def get_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> UserPublic:
    return service.get(user_id)


@router.post(
    "",
    response_model=UserPublic,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
)
async def create_user(
    req: UserCreateRequest,
    service: UserService = Depends(get_user_service),
) -> UserPublic:
    """Create a user record.  Users created here have no password and cannot log in."""
    return service.create(req.name, req.email)


@router.put("/{user_id}", response_model=UserPublic, summary="Update a user", responses=_NOT_FOUND)
async def update_user(
    user_id: int,
    req: UserUpdateRequest,
    service: UserService = Depends(get_user_service),
) -> UserPublic:
    """Partial update: only the fields present in the body are changed."""
    fields = req.model_dump(exclude_unset=True, exclude_none=True)
    return service.update(user_id, fields)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a user",
)
async def delete_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> Response:
    """Idempotent: deleting an unknown id also returns 204."""
    service.delete(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
