"""User Service - Business logic for user management."""

from datetime import datetime

from fastapi_pagination.ext.sqlmodel import apaginate
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from pulsa.core.exceptions import StorageError
from pulsa.models.user import User, UserRole
from pulsa.schemas.pagination import CustomPage
from pulsa.schemas.user import UserResponse, UserUpdate


class UserService:
    """Service for user-related business logic."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_users(
        self,
        search: str | None = None,
        role: UserRole | None = None,
        is_active: bool | None = None,
    ) -> CustomPage[UserResponse]:
        """List users with filters and pagination.

        Args:
            search: Search by username
            role: Filter by role
            is_active: Filter by active status

        Returns:
            Paginated user list
        """
        query = select(User)

        if search:
            # Escape special LIKE characters to prevent pattern injection
            escaped = search.replace("%", r"\%").replace("_", r"\_")
            query = query.where(User.username.ilike(f"%{escaped}%"))  # type: ignore[attr-defined]
        if role is not None:
            query = query.where(User.role == role)
        if is_active is not None:
            query = query.where(User.is_active == is_active)

        query = query.order_by(User.created_at.desc())  # type: ignore[attr-defined]

        return await apaginate(
            self.db,
            query,
            transformer=lambda items: [UserResponse.model_validate(u) for u in items],
        )

    async def get_user(self, user_id: int) -> User | None:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User or None
        """
        return await self.db.get(User, user_id)

    async def update_user(self, user_id: int, data: UserUpdate) -> User | None:
        """Update username, role or active flag.

        Args:
            user_id: User ID
            data: Fields to change

        Returns:
            Updated user or None if not found
        """
        user = await self.db.get(User, user_id)
        if not user:
            return None

        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(user, field, value)
        user.updated_at = datetime.utcnow()

        self.db.add(user)
        await self.db.commit()
        await self.db.refresh(user)
        return user

    async def delete_user(self, user_id: int) -> bool:
        """Delete a user.

        Args:
            user_id: User ID

        Returns:
            True if deleted, False if not found

        Raises:
            StorageError: If transactions still reference the user
        """
        user = await self.db.get(User, user_id)
        if not user:
            return False

        await self.db.delete(user)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise StorageError.in_use("User", user_id) from e
        return True
