from src.shared.database.base_mapper import BaseEntityMapper
from src.app.core.domain.models import Vendor, VendorCategory
from src.app.infrastructure.entities.vendor_entity import (
    VendorEntity,
    VendorCategory as EntityVendorCategory,
)


class VendorMapper(BaseEntityMapper[Vendor, VendorEntity]):
    """Mapper for converting between Vendor domain model and VendorEntity."""

    @staticmethod
    def to_entity(model_instance: Vendor) -> VendorEntity:
        """Convert Vendor (domain model) to VendorEntity (database entity)."""
        return VendorEntity(
            id=model_instance.id,
            enterprise_id=model_instance.enterprise_id,
            name=model_instance.name,
            contact_email=model_instance.contact_email,
            website=model_instance.website,
            notes=model_instance.notes,
            address=model_instance.address,
            category=EntityVendorCategory(model_instance.category.value) if model_instance.category else None,
            created_at=model_instance.created_at,
        )

    @staticmethod
    def to_model(entity: VendorEntity) -> Vendor:
        """Convert VendorEntity (database entity) to Vendor (domain model)."""
        return Vendor(
            id=entity.id,
            enterprise_id=entity.enterprise_id,
            name=entity.name,
            contact_email=entity.contact_email,
            website=entity.website,
            notes=entity.notes,
            address=entity.address,
            category=VendorCategory(entity.category.value) if entity.category else None,
            created_at=entity.created_at,
        )
