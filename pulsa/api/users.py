"""Pulsa - User management API endpoints (admin only)."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from pulsa.api.deps import AdminUser, get_user_service
from pulsa.models.user import User, UserRole
from pulsa.schemas.pagination import CustomPage
from pulsa.schemas.user import UserResponse, UserUpdate
from pulsa.services.user_service import UserService

router = APIRouter(tags=["Users"])

UserServiceDep = Annotated[UserService, Depends(get_user_service)]


def _not_found(user_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"user with ID {user_id} not found",
    )


@router.get("/users", response_model=CustomPage[UserResponse])
async def list_users(
    _: AdminUser,
    service: UserServiceDep,
    search: str | None = Query(default=None, description="Search by username"),
    role: UserRole | None = Query(default=None, description="Filter by role"),
    is_active: bool | None = Query(default=None, description="Filter by active status"),
) -> CustomPage[UserResponse]:
    """List users with filters and pagination."""
    return await service.list_users(search=search, role=role, is_active=is_active)


@router.get("/user/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    _: AdminUser,
    service: UserServiceDep,
) -> User:
    """Get user by ID."""
    user = await service.get_user(user_id)
    if not user:
        raise _not_found(user_id)
    return user


@router.put("/user/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    data: UserUpdate,
    admin: AdminUser,
    service: UserServiceDep,
) -> User:
    """Update username, role or active flag."""
    if user_id == admin.id and data.role is not None and data.role != UserRole.ADMIN:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot remove your own admin role",
        )
    user = await service.update_user(user_id, data)
    if not user:
        raise _not_found(user_id)
    return user


@router.delete("/user/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int,
    admin: AdminUser,
    service: UserServiceDep,
) -> None:
    """Delete a user."""
    if user_id == admin.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot delete yourself",
        )
    if not await service.delete_user(user_id):
        raise _not_found(user_id)
