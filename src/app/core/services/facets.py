"""
Facet aggregation.

Two facet semantics exist side by side:

- ``*_facets_over_candidates`` count the filtered candidate set before the
  text query drops anything and before pagination. The advanced search
  endpoints report these.
- ``facets_over_visible_results`` counts only the truncated, merged list
  the unified search actually returns.
"""
from collections import Counter
from collections.abc import Iterable

from src.app.core.domain.models import (
    VALUE_BUCKETS,
    Contract,
    ContractFacets,
    SearchResult,
    SearchResultType,
    User,
    UserFacets,
    Vendor,
    VendorFacets,
    VisibleResultFacets,
)
from src.app.core.services.pricing import parse_price

OTHER_BUCKET = "other"


def value_bucket(value: float) -> str:
    """Label of the value-range bucket a monetary value falls into."""
    for label, upper in VALUE_BUCKETS:
        if value < upper:
            return label
    return VALUE_BUCKETS[-1][0]


def _counts(values: Iterable[str]) -> dict[str, int]:
    return dict(Counter(values))


def contract_facets_over_candidates(contracts: list[Contract]) -> ContractFacets:
    facets = ContractFacets(
        status=_counts(c.status.value for c in contracts),
        contract_type=_counts(
            c.contract_type.value if c.contract_type else OTHER_BUCKET for c in contracts
        ),
    )
    for contract in contracts:
        facets.value_ranges[value_bucket(parse_price(contract.extracted_pricing))] += 1
    return facets


def vendor_facets_over_candidates(vendors: list[Vendor]) -> VendorFacets:
    return VendorFacets(
        categories=_counts(v.category.value if v.category else OTHER_BUCKET for v in vendors)
    )


def user_facets_over_candidates(users: list[User]) -> UserFacets:
    # Users without a department are left out rather than bucketed
    return UserFacets(
        roles=_counts(u.role.value for u in users),
        departments=_counts(u.department for u in users if u.department),
    )


def facets_over_visible_results(results: list[SearchResult]) -> VisibleResultFacets:
    return VisibleResultFacets(
        type=_counts(r.type.value for r in results),
        status=_counts(
            r.entity.status.value
            for r in results
            if r.type == SearchResultType.CONTRACT and isinstance(r.entity, Contract)
        ),
    )
