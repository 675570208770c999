from uuid import UUID
from sqlalchemy import select

from src.app.core.domain.models import Contract
from src.shared.database.base_repo import BaseRepository
from src.shared.database.database import Database
from src.app.infrastructure.entities.contract_entity import ContractEntity
from src.app.infrastructure.mappers.contract_mapper import ContractMapper


class ContractRepository(BaseRepository[ContractEntity, Contract]):
    """Tenant-scoped read access to contracts."""

    def __init__(self, db: Database, mapper: ContractMapper, read_timeout: float | None = None):
        super().__init__(db, mapper, read_timeout)

    async def list_by_enterprise(self, enterprise_id: UUID) -> list[Contract]:
        """Get every contract of an enterprise, oldest first."""
        return await self.find_all(
            select(ContractEntity)
            .where(ContractEntity.enterprise_id == enterprise_id)
            .order_by(ContractEntity.created_at, ContractEntity.id)
        )
