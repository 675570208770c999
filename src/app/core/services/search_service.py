"""
Fan-out search over one enterprise's contracts, vendors and users.

The three ranked lists are read concurrently and merged by score, with a
fixed contract, vendor, user order between equal scores.
"""
import logging
from uuid import UUID

from src.app.config import SearchSettings
from src.app.core.domain.models import (
    Contract,
    ResultsByType,
    ScoredResult,
    SearchAllRequest,
    SearchAllResult,
    SearchResult,
    SearchResultType,
    User,
    Vendor,
)
from src.app.core.services.contract_search_service import ContractSearchService
from src.app.core.services.facets import facets_over_visible_results
from src.app.core.services.paging import resolve_limit
from src.app.core.services.user_search_service import UserSearchService
from src.app.core.services.vendor_search_service import VendorSearchService
from src.shared.concurrency import gather_or_fail

logger = logging.getLogger(__name__)


class SearchService:
    """
    Runs the per-entity rankings for search_all and shapes the response.

    A failure in any ranking fails the call; there are no partial results.
    """

    def __init__(
        self,
        contract_search_service: ContractSearchService,
        vendor_search_service: VendorSearchService,
        user_search_service: UserSearchService,
        settings: SearchSettings,
    ):
        """
        Initialize the unified search service.

        Args:
            contract_search_service: Service for searching contracts
            vendor_search_service: Service for searching vendors
            user_search_service: Service for searching users
            settings: Query length threshold and limit bounds
        """
        self.contract_search_service = contract_search_service
        self.vendor_search_service = vendor_search_service
        self.user_search_service = user_search_service
        self.settings = settings

    async def search_all(self, enterprise_id: UUID, request: SearchAllRequest) -> SearchAllResult:
        """
        Search across contracts, vendors and users of one enterprise.

        Queries shorter than the minimum length return an empty result
        without reading the store. Otherwise the three per-entity searches
        run concurrently, each capped to the limit; if any of them fails the
        whole search fails.

        Args:
            enterprise_id: Caller's tenant
            request: Search request with query, limit and archive flag

        Returns:
            Merged results sorted by score descending and truncated to the
            limit, a per-type breakdown truncated to limit // 3 each, the
            merged count before truncation, and facets over the visible list
        """
        query = request.normalized_query
        if len(query) < self.settings.min_query_length:
            logger.info("Skipping unified search for short query '%s'", query)
            return SearchAllResult(query=query)

        limit = resolve_limit(request.limit, self.settings.default_limit, self.settings.max_limit)

        logger.info(
            "Unified search for query: '%s' (limit=%d, include_archived=%s)",
            query[:100], limit, request.include_archived,
        )

        contract_results, vendor_results, user_results = await gather_or_fail(
            self.contract_search_service.rank(enterprise_id, query, limit, request.include_archived),
            self.vendor_search_service.rank(enterprise_id, query, limit),
            self.user_search_service.rank(enterprise_id, query, limit),
        )

        merged = merge_results(contract_results, vendor_results, user_results)
        visible = merged[:limit]
        per_type = limit // 3

        logger.info(
            "Returning %d of %d unified results (contracts=%d, vendors=%d, users=%d)",
            len(visible), len(merged), len(contract_results), len(vendor_results), len(user_results),
        )

        return SearchAllResult(
            results=visible,
            by_type=ResultsByType(
                contracts=contract_results[:per_type],
                vendors=vendor_results[:per_type],
                users=user_results[:per_type],
            ),
            total_results=len(merged),
            query=query,
            facets=facets_over_visible_results(visible),
        )


def merge_results(
    contract_results: list[ScoredResult[Contract]],
    vendor_results: list[ScoredResult[Vendor]],
    user_results: list[ScoredResult[User]],
) -> list[SearchResult]:
    """
    Tag per-type results and rank them together by score descending.

    Equal scores keep the fixed type order contracts, vendors, users and
    each type's own ranking.
    """
    merged: list[SearchResult] = []
    for result_type, results in (
        (SearchResultType.CONTRACT, contract_results),
        (SearchResultType.VENDOR, vendor_results),
        (SearchResultType.USER, user_results),
    ):
        merged.extend(
            SearchResult(type=result_type, entity=r.item, score=r.score, highlights=r.highlights)
            for r in results
        )
    merged.sort(key=lambda r: r.score, reverse=True)
    return merged
