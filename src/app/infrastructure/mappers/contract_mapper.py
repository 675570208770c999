from src.shared.database.base_mapper import BaseEntityMapper
from src.app.core.domain.models import Contract, ContractStatus, ContractType
from src.app.infrastructure.entities.contract_entity import (
    ContractEntity,
    ContractStatus as EntityContractStatus,
    ContractType as EntityContractType,
)


class ContractMapper(BaseEntityMapper[Contract, ContractEntity]):
    """Mapper for converting between Contract domain model and ContractEntity."""

    @staticmethod
    def to_entity(model_instance: Contract) -> ContractEntity:
        """Convert Contract (domain model) to ContractEntity (database entity)."""
        return ContractEntity(
            id=model_instance.id,
            enterprise_id=model_instance.enterprise_id,
            vendor_id=model_instance.vendor_id,
            title=model_instance.title,
            file_name=model_instance.file_name,
            notes=model_instance.notes,
            status=EntityContractStatus(model_instance.status.value),
            contract_type=(
                EntityContractType(model_instance.contract_type.value)
                if model_instance.contract_type else None
            ),
            extracted_parties=list(model_instance.extracted_parties),
            extracted_scope=model_instance.extracted_scope,
            extracted_pricing=model_instance.extracted_pricing,
            extracted_start_date=model_instance.extracted_start_date,
            extracted_end_date=model_instance.extracted_end_date,
            created_at=model_instance.created_at,
        )

    @staticmethod
    def to_model(entity: ContractEntity) -> Contract:
        """Convert ContractEntity (database entity) to Contract (domain model)."""
        return Contract(
            id=entity.id,
            enterprise_id=entity.enterprise_id,
            vendor_id=entity.vendor_id,
            title=entity.title,
            file_name=entity.file_name or "",
            notes=entity.notes,
            status=ContractStatus(entity.status.value),
            contract_type=ContractType(entity.contract_type.value) if entity.contract_type else None,
            extracted_parties=list(entity.extracted_parties or []),
            extracted_scope=entity.extracted_scope,
            extracted_pricing=entity.extracted_pricing,
            extracted_start_date=entity.extracted_start_date,
            extracted_end_date=entity.extracted_end_date,
            created_at=entity.created_at,
        )
