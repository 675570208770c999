"""Sort engine over search matches with a closed set of typed sort keys."""
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any, Protocol, TypeVar
from uuid import UUID

from src.app.core.domain.models import (
    ContractMatch,
    EntityType,
    SortField,
    SortOrder,
    SortSpec,
    UserMatch,
    VendorMatch,
)
from src.app.core.services.pricing import parse_price
from src.shared.exceptions import UnsupportedSortField


class _Identified(Protocol):
    @property
    def id(self) -> UUID: ...


M = TypeVar("M", bound=_Identified)

SortKey = Callable[[Any], Any]

CONTRACT_SORT_KEYS: Mapping[SortField, Callable[[ContractMatch], Any]] = MappingProxyType({
    SortField.RELEVANCE: lambda m: m.relevance,
    SortField.TITLE: lambda m: m.contract.title,
    SortField.CREATED_AT: lambda m: m.contract.created_at.timestamp(),
    SortField.VALUE: lambda m: parse_price(m.contract.extracted_pricing),
    SortField.END_DATE: lambda m: m.contract.extracted_end_date or "",
})

VENDOR_SORT_KEYS: Mapping[SortField, Callable[[VendorMatch], Any]] = MappingProxyType({
    SortField.RELEVANCE: lambda m: m.relevance,
    SortField.NAME: lambda m: m.vendor.name,
    SortField.CONTRACT_COUNT: lambda m: m.contract_count,
    SortField.TOTAL_VALUE: lambda m: m.total_value,
})

USER_SORT_KEYS: Mapping[SortField, Callable[[UserMatch], Any]] = MappingProxyType({
    SortField.RELEVANCE: lambda m: m.relevance,
})

SORT_KEYS: Mapping[EntityType, Mapping[SortField, SortKey]] = MappingProxyType({
    EntityType.CONTRACTS: CONTRACT_SORT_KEYS,
    EntityType.VENDORS: VENDOR_SORT_KEYS,
    EntityType.USERS: USER_SORT_KEYS,
})

DEFAULT_SORT = SortSpec(field=SortField.RELEVANCE, order=SortOrder.DESC)


def sort_key_for(entity_type: EntityType, field: SortField | str) -> SortKey:
    """
    Accessor for a sort field of an entity type.

    Raises:
        UnsupportedSortField: If the field is not a sort key of that entity type
    """
    keys = SORT_KEYS[entity_type]
    try:
        return keys[SortField(field)]
    except (KeyError, ValueError) as e:
        raise UnsupportedSortField(entity_type.value, field) from e


def sort_matches(matches: list[M], entity_type: EntityType, sort: SortSpec | None = None) -> list[M]:
    """
    Return a new list of matches ordered by the sort spec.

    Ties on the sort key are broken by entity id ascending, for both
    orders, so the output is fully deterministic.

    Args:
        matches: Matches to order (not modified)
        entity_type: Entity type of the matches; selects the valid sort keys
        sort: Field and order, relevance descending when omitted

    Raises:
        UnsupportedSortField: If the sort field does not apply to the entity type
    """
    spec = sort or DEFAULT_SORT
    key = sort_key_for(entity_type, spec.field)

    ordered = sorted(matches, key=lambda m: str(m.id))
    # Stable sort (also with reverse=True) keeps the id order among ties
    ordered.sort(key=key, reverse=spec.order == SortOrder.DESC)
    return ordered
