from typing import Optional
from uuid import UUID
from sqlalchemy import select

from src.app.core.domain.models import User
from src.shared.database.base_repo import BaseRepository
from src.shared.database.database import Database
from src.app.infrastructure.entities.user_entity import UserEntity
from src.app.infrastructure.mappers.user_mapper import UserMapper


class UserRepository(BaseRepository[UserEntity, User]):
    """Read access to users."""

    def __init__(self, db: Database, mapper: UserMapper, read_timeout: float | None = None):
        super().__init__(db, mapper, read_timeout)

    async def get_by_auth_subject(self, subject: str) -> Optional[User]:
        """Get the user linked to an identity provider subject."""
        return await self.find_one(
            select(UserEntity).where(UserEntity.auth_subject == subject)
        )

    async def list_by_enterprise(self, enterprise_id: UUID) -> list[User]:
        """Get every user of an enterprise, oldest first."""
        return await self.find_all(
            select(UserEntity)
            .where(UserEntity.enterprise_id == enterprise_id)
            .order_by(UserEntity.created_at, UserEntity.id)
        )
