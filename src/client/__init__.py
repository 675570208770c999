from src.client.search_client import SearchClient
from src.client.schemas import (
    ContractSearchRequestBody,
    UserSearchRequestBody,
    VendorSearchRequestBody,
)

__all__ = [
    "SearchClient",
    "ContractSearchRequestBody",
    "UserSearchRequestBody",
    "VendorSearchRequestBody",
]
