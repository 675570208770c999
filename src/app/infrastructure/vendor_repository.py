from collections.abc import Iterable
from uuid import UUID
from sqlalchemy import select

from src.app.core.domain.models import Vendor
from src.shared.database.base_repo import BaseRepository
from src.shared.database.database import Database
from src.app.infrastructure.entities.vendor_entity import VendorEntity
from src.app.infrastructure.mappers.vendor_mapper import VendorMapper


class VendorRepository(BaseRepository[VendorEntity, Vendor]):
    """Tenant-scoped read access to vendors."""

    def __init__(self, db: Database, mapper: VendorMapper, read_timeout: float | None = None):
        super().__init__(db, mapper, read_timeout)

    async def list_by_enterprise(self, enterprise_id: UUID) -> list[Vendor]:
        """Get every vendor of an enterprise, oldest first."""
        return await self.find_all(
            select(VendorEntity)
            .where(VendorEntity.enterprise_id == enterprise_id)
            .order_by(VendorEntity.created_at, VendorEntity.id)
        )

    async def get_by_ids(self, enterprise_id: UUID, vendor_ids: Iterable[UUID]) -> list[Vendor]:
        """
        Get the vendors with the given IDs that belong to the enterprise.

        IDs of other tenants' vendors, or unknown IDs, are silently absent
        from the result.
        """
        ids = list(dict.fromkeys(vendor_ids))
        if not ids:
            return []
        return await self.find_all(
            select(VendorEntity).where(
                VendorEntity.enterprise_id == enterprise_id,
                VendorEntity.id.in_(ids),
            )
        )
