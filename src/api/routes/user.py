from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import to_http_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import (
    GetPublicProfileUseCase,
    HandleAvailability,
    LoadProfileUseCase,
    PublicProfile,
    SearchHandleUseCase,
    UpdateProfileCommand,
    UpdateProfileUseCase,
    UserProfile,
)
from src.depends import get_current_user, get_unit_of_work

router = APIRouter(tags=["User"])


@router.get("/user", status_code=status.HTTP_200_OK, response_model=UserProfile)
async def get_user(
    current_user: UUID = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Profile of the authenticated user"""
    result = await LoadProfileUseCase(uow).execute(current_user)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


class UpdateProfileRequest(BaseModel):
    handle: str = Field(..., min_length=1, max_length=64)
    description: str = Field(default="", max_length=1000)
    links: List[dict] = Field(default_factory=list)


@router.patch("/user", status_code=status.HTTP_200_OK, response_model=UserProfile)
async def update_profile(
    request: UpdateProfileRequest,
    current_user: UUID = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update handle, description and links

    Raises:
        - 409 Conflict: Handle taken by another user
        - 400 Bad Request: Handle empty after normalization
    """
    command = UpdateProfileCommand(
        handle=request.handle,
        description=request.description,
        links=request.links,
    )
    result = await UpdateProfileUseCase(uow).execute(current_user, command)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


class SearchHandleRequest(BaseModel):
    handle: str = Field(..., min_length=1, max_length=64)


@router.post("/search", status_code=status.HTTP_200_OK, response_model=HandleAvailability)
async def search_by_handle(
    request: SearchHandleRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Handle availability

    Raises:
        - 409 Conflict: Handle already registered
    """
    result = await SearchHandleUseCase(uow).execute(request.handle)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.get("/{handle}", status_code=status.HTTP_200_OK, response_model=PublicProfile)
async def get_user_by_handle(
    handle: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Public profile; id, email and password are never included"""
    result = await GetPublicProfileUseCase(uow).execute(handle)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value
