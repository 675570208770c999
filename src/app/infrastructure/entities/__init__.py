"""Database entities for the infrastructure layer."""
from src.app.infrastructure.entities.contract_entity import ContractEntity, ContractStatus, ContractType
from src.app.infrastructure.entities.vendor_entity import VendorEntity, VendorCategory
from src.app.infrastructure.entities.user_entity import UserEntity, UserRole

__all__ = [
    "ContractEntity",
    "ContractStatus",
    "ContractType",
    "VendorEntity",
    "VendorCategory",
    "UserEntity",
    "UserRole",
]
