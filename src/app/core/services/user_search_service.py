"""Service for searching users within the caller's enterprise."""
import logging
from uuid import UUID

from src.app.config import SearchSettings
from src.app.core.domain.models import (
    EntityType,
    ScoredResult,
    User,
    UserMatch,
    UserSearchPage,
    UserSearchRequest,
)
from src.app.core.services.facets import user_facets_over_candidates
from src.app.core.services.filters import filter_users, visible_users
from src.app.core.services.paging import resolve_limit
from src.app.core.services.scoring import EntityScorer
from src.app.core.services.sorting import sort_matches
from src.app.infrastructure.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UserSearchService:
    """User search within one enterprise, always ordered by relevance."""

    def __init__(
        self,
        user_repository: UserRepository,
        scorer: EntityScorer[User],
        settings: SearchSettings,
    ):
        self.user_repository = user_repository
        self.scorer = scorer
        self.settings = settings

    async def rank(self, enterprise_id: UUID, query: str, limit: int) -> list[ScoredResult[User]]:
        """Top scored users for the unified search; deactivated users are skipped."""
        users = visible_users(await self.user_repository.list_by_enterprise(enterprise_id))
        return self.scorer.score(users, query)[:limit]

    async def search(self, enterprise_id: UUID, request: UserSearchRequest) -> UserSearchPage:
        """
        Search users with role, department and activity filters.

        Facets are computed over the filtered users, before the text query
        drops anything.
        """
        query = request.normalized_query
        limit = resolve_limit(request.limit, self.settings.default_limit, self.settings.max_limit)

        users = await self.user_repository.list_by_enterprise(enterprise_id)
        candidates = filter_users(users, request.filters)

        logger.info(
            "User search for query: '%s' (limit=%d, candidates=%d)",
            query[:100], limit, len(candidates),
        )

        if len(query) >= self.settings.min_query_length:
            matches = [
                UserMatch(user=r.item, relevance=r.score, matched_fields=r.highlights)
                for r in self.scorer.score(candidates, query)
            ]
        else:
            matches = [UserMatch(user=u, relevance=1.0) for u in candidates]

        ordered = sort_matches(matches, EntityType.USERS)

        return UserSearchPage(
            results=ordered[:limit],
            total=len(ordered),
            facets=user_facets_over_candidates(candidates),
        )
