"""Infrastructure mappers for converting between domain models and database entities."""
from src.app.infrastructure.mappers.contract_mapper import ContractMapper
from src.app.infrastructure.mappers.vendor_mapper import VendorMapper
from src.app.infrastructure.mappers.user_mapper import UserMapper

__all__ = [
    "ContractMapper",
    "VendorMapper",
    "UserMapper",
]
