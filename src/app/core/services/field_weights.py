"""Field weight table and searchable field lists for relevance scoring."""
from collections.abc import Mapping
from types import MappingProxyType

from src.app.core.domain.models import EntityType

DEFAULT_FIELD_WEIGHT = 1.0

# Scan order matters: highlights are reported in this order.
CONTRACT_SEARCH_FIELDS: tuple[str, ...] = (
    "title",
    "file_name",
    "notes",
    "extracted_parties",
    "extracted_scope",
)
VENDOR_SEARCH_FIELDS: tuple[str, ...] = (
    "name",
    "contact_email",
    "website",
    "notes",
    "address",
)
USER_SEARCH_FIELDS: tuple[str, ...] = (
    "first_name",
    "last_name",
    "email",
    "department",
    "title",
)


class FieldWeightTable:
    """
    Immutable mapping of "{entity_type}.{field}" to a relevance weight.

    Built once from settings and injected into each scorer, so tests and
    tenants can supply their own table.
    """

    __slots__ = ("_weights", "default")

    def __init__(self, weights: Mapping[str, float], default: float = DEFAULT_FIELD_WEIGHT):
        for key, weight in weights.items():
            if "." not in key:
                raise ValueError(f"Weight key '{key}' must look like '<entity_type>.<field>'")
            if weight <= 0:
                raise ValueError(f"Weight for '{key}' must be positive, got {weight}")
        self._weights = MappingProxyType(dict(weights))
        self.default = default

    @staticmethod
    def key(entity_type: EntityType, field: str) -> str:
        return f"{entity_type.value}.{field}"

    def weight(self, entity_type: EntityType, field: str) -> float:
        """Weight for a field of an entity type, or the default when unlisted."""
        return self._weights.get(self.key(entity_type, field), self.default)

    def __repr__(self) -> str:
        return f"FieldWeightTable({len(self._weights)} weights, default={self.default})"
