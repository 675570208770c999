"""Service for ranked and filtered contract search."""
import logging
from uuid import UUID

from src.app.config import SearchSettings
from src.app.core.domain.models import (
    Contract,
    ContractMatch,
    ContractSearchPage,
    ContractSearchRequest,
    EntityType,
    ScoredResult,
    VendorSummary,
)
from src.app.core.services.facets import contract_facets_over_candidates
from src.app.core.services.filters import exclude_archived, filter_contracts
from src.app.core.services.paging import paginate, resolve_limit
from src.app.core.services.scoring import EntityScorer
from src.app.core.services.sorting import sort_matches
from src.app.infrastructure.contract_repository import ContractRepository
from src.app.infrastructure.vendor_repository import VendorRepository

logger = logging.getLogger(__name__)


class ContractSearchService:
    """
    Contract search within one enterprise.

    Pipeline for the advanced search: tenant read, filters, scoring (or a
    flat relevance of 1 for short queries), sort, page slice, vendor
    enrichment of the page, facets over the filtered candidates.
    """

    def __init__(
        self,
        contract_repository: ContractRepository,
        vendor_repository: VendorRepository,
        scorer: EntityScorer[Contract],
        settings: SearchSettings,
    ):
        """
        Initialize the contract search service.

        Args:
            contract_repository: Tenant-scoped contract reads
            vendor_repository: Vendor lookups for enriching contract hits
            scorer: Weighted field scorer for contracts
            settings: Query length threshold and page size limits
        """
        self.contract_repository = contract_repository
        self.vendor_repository = vendor_repository
        self.scorer = scorer
        self.settings = settings

    async def rank(
        self,
        enterprise_id: UUID,
        query: str,
        limit: int,
        include_archived: bool = False,
    ) -> list[ScoredResult[Contract]]:
        """
        Top scored contracts for the unified search.

        Args:
            enterprise_id: Caller's tenant
            query: Trimmed, lowercased query
            limit: Maximum number of results
            include_archived: Whether archived contracts are searchable

        Returns:
            Matching contracts, highest score first
        """
        contracts = await self.contract_repository.list_by_enterprise(enterprise_id)
        if not include_archived:
            contracts = exclude_archived(contracts)
        return self.scorer.score(contracts, query)[:limit]

    async def search(self, enterprise_id: UUID, request: ContractSearchRequest) -> ContractSearchPage:
        """
        Search contracts with filters, sorting and pagination.

        Args:
            enterprise_id: Caller's tenant
            request: Query, filters, sort and paging parameters

        Returns:
            The requested page, the total number of hits, whether more pages
            exist, and facets over every filtered candidate

        Raises:
            UnsupportedSortField: If the sort field does not apply to contracts
        """
        query = request.normalized_query
        limit = resolve_limit(request.limit, self.settings.default_limit, self.settings.max_limit)
        offset = request.offset

        contracts = await self.contract_repository.list_by_enterprise(enterprise_id)
        candidates = filter_contracts(contracts, request.filters)

        logger.info(
            "Contract search for query: '%s' (limit=%d, offset=%d, candidates=%d)",
            query[:100], limit, offset, len(candidates),
        )

        matches = self._match(candidates, query)
        ordered = sort_matches(matches, EntityType.CONTRACTS, request.sort)
        page = await self._with_vendors(enterprise_id, paginate(ordered, offset, limit))

        return ContractSearchPage(
            results=page,
            total=len(ordered),
            has_more=offset + limit < len(ordered),
            facets=contract_facets_over_candidates(candidates),
        )

    def _match(self, candidates: list[Contract], query: str) -> list[ContractMatch]:
        if len(query) >= self.settings.min_query_length:
            return [
                ContractMatch(contract=r.item, relevance=r.score, matched_fields=r.highlights)
                for r in self.scorer.score(candidates, query)
            ]
        return [ContractMatch(contract=c, relevance=1.0) for c in candidates]

    async def _with_vendors(self, enterprise_id: UUID, page: list[ContractMatch]) -> list[ContractMatch]:
        """Attach a vendor summary to each contract of the page; unknown vendors become None."""
        vendor_ids = [m.contract.vendor_id for m in page if m.contract.vendor_id is not None]
        if not vendor_ids:
            return page

        vendors = await self.vendor_repository.get_by_ids(enterprise_id, vendor_ids)
        summaries = {
            v.id: VendorSummary(id=v.id, name=v.name, category=v.category)
            for v in vendors
            if v.enterprise_id == enterprise_id
        }
        return [
            m.model_copy(update={"vendor": summaries.get(m.contract.vendor_id)})
            if m.contract.vendor_id is not None else m
            for m in page
        ]
