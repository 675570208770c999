"""Service for ranked and filtered vendor search with contract aggregates."""
import logging
from collections import defaultdict
from dataclasses import dataclass
from uuid import UUID

from src.app.config import SearchSettings
from src.app.core.domain.models import (
    Contract,
    ContractStatus,
    EntityType,
    ScoredResult,
    Vendor,
    VendorMatch,
    VendorSearchPage,
    VendorSearchRequest,
)
from src.app.core.services.facets import vendor_facets_over_candidates
from src.app.core.services.filters import filter_vendors, filter_vendors_by_activity
from src.app.core.services.paging import resolve_limit
from src.app.core.services.pricing import parse_price
from src.app.core.services.scoring import EntityScorer
from src.app.core.services.sorting import sort_matches
from src.app.infrastructure.contract_repository import ContractRepository
from src.app.infrastructure.vendor_repository import VendorRepository
from src.shared.concurrency import gather_or_fail

logger = logging.getLogger(__name__)


@dataclass
class VendorContractStats:
    contract_count: int = 0
    active_contract_count: int = 0
    total_value: float = 0.0


def aggregate_contracts_by_vendor(contracts: list[Contract]) -> dict[UUID, VendorContractStats]:
    """Group an enterprise's contracts by vendor in a single pass."""
    stats: dict[UUID, VendorContractStats] = defaultdict(VendorContractStats)
    for contract in contracts:
        if contract.vendor_id is None:
            continue
        entry = stats[contract.vendor_id]
        entry.contract_count += 1
        if contract.status == ContractStatus.ACTIVE:
            entry.active_contract_count += 1
        entry.total_value += parse_price(contract.extracted_pricing)
    return dict(stats)


class VendorSearchService:
    """Vendor search within one enterprise."""

    def __init__(
        self,
        vendor_repository: VendorRepository,
        contract_repository: ContractRepository,
        scorer: EntityScorer[Vendor],
        settings: SearchSettings,
    ):
        """
        Initialize the vendor search service.

        Args:
            vendor_repository: Tenant-scoped vendor reads
            contract_repository: Tenant-scoped contract reads for aggregates
            scorer: Weighted field scorer for vendors
            settings: Query length threshold and page size limits
        """
        self.vendor_repository = vendor_repository
        self.contract_repository = contract_repository
        self.scorer = scorer
        self.settings = settings

    async def rank(self, enterprise_id: UUID, query: str, limit: int) -> list[ScoredResult[Vendor]]:
        """Top scored vendors for the unified search."""
        vendors = await self.vendor_repository.list_by_enterprise(enterprise_id)
        return self.scorer.score(vendors, query)[:limit]

    async def search(self, enterprise_id: UUID, request: VendorSearchRequest) -> VendorSearchPage:
        """
        Search vendors with category/activity filters and sorting.

        Contract aggregates (count, active count, total value) are computed
        for every candidate from one read of the enterprise's contracts, so
        they are available to the activity filter and to sorting.

        Args:
            enterprise_id: Caller's tenant
            request: Query, filters, sort and limit

        Returns:
            Up to limit vendors, the total number of hits and category facets
            over the category-filtered candidates

        Raises:
            UnsupportedSortField: If the sort field does not apply to vendors
        """
        query = request.normalized_query
        limit = resolve_limit(request.limit, self.settings.default_limit, self.settings.max_limit)

        vendors, contracts = await gather_or_fail(
            self.vendor_repository.list_by_enterprise(enterprise_id),
            self.contract_repository.list_by_enterprise(enterprise_id),
        )

        candidates = filter_vendors(vendors, request.filters)
        stats = aggregate_contracts_by_vendor(contracts)

        logger.info(
            "Vendor search for query: '%s' (limit=%d, candidates=%d)",
            query[:100], limit, len(candidates),
        )

        if len(query) >= self.settings.min_query_length:
            scored = [(r.item, r.score, r.highlights) for r in self.scorer.score(candidates, query)]
        else:
            scored = [(v, 1.0, []) for v in candidates]

        matches = []
        for vendor, relevance, highlights in scored:
            entry = stats.get(vendor.id, VendorContractStats())
            matches.append(VendorMatch(
                vendor=vendor,
                relevance=relevance,
                matched_fields=highlights,
                contract_count=entry.contract_count,
                active_contract_count=entry.active_contract_count,
                total_value=entry.total_value,
            ))

        matches = filter_vendors_by_activity(matches, request.filters)
        ordered = sort_matches(matches, EntityType.VENDORS, request.sort)

        return VendorSearchPage(
            results=ordered[:limit],
            total=len(ordered),
            facets=vendor_facets_over_candidates(candidates),
        )
