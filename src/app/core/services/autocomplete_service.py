"""Substring autocomplete over the primary display field of each entity type."""
import logging
from collections.abc import Awaitable
from uuid import UUID

from src.app.config import AutocompleteSettings
from src.app.core.domain.models import (
    AutocompleteRequest,
    AutocompleteResult,
    AutocompleteScope,
    Suggestion,
    SearchResultType,
)
from src.app.core.services.paging import resolve_limit
from src.app.infrastructure.contract_repository import ContractRepository
from src.app.infrastructure.user_repository import UserRepository
from src.app.infrastructure.vendor_repository import VendorRepository
from src.shared.concurrency import gather_or_fail

logger = logging.getLogger(__name__)


class AutocompleteService:
    """
    Label suggestions for a partial query.

    No weights, no scoring: a record is suggested when its display field
    contains the query. Suggestions are grouped in the fixed order contracts,
    vendors, users, each group capped to the limit, then the whole list is
    capped to the limit.
    """

    def __init__(
        self,
        contract_repository: ContractRepository,
        vendor_repository: VendorRepository,
        user_repository: UserRepository,
        settings: AutocompleteSettings,
    ):
        self.contract_repository = contract_repository
        self.vendor_repository = vendor_repository
        self.user_repository = user_repository
        self.settings = settings

    async def suggest(self, enterprise_id: UUID, request: AutocompleteRequest) -> AutocompleteResult:
        query = request.normalized_query
        if len(query) < self.settings.min_query_length:
            return AutocompleteResult()

        limit = resolve_limit(request.limit, self.settings.default_limit, self.settings.max_limit)
        scope = request.type

        reads: list[Awaitable[list[Suggestion]]] = []
        if scope in (AutocompleteScope.ALL, AutocompleteScope.CONTRACTS):
            reads.append(self._contracts(enterprise_id, query, limit))
        if scope in (AutocompleteScope.ALL, AutocompleteScope.VENDORS):
            reads.append(self._vendors(enterprise_id, query, limit))
        if scope in (AutocompleteScope.ALL, AutocompleteScope.USERS):
            reads.append(self._users(enterprise_id, query, limit))

        groups = await gather_or_fail(*reads)
        suggestions = [s for group in groups for s in group][:limit]

        logger.debug("Autocomplete '%s' (%s): %d suggestions", query, scope.value, len(suggestions))
        return AutocompleteResult(suggestions=suggestions)

    async def _contracts(self, enterprise_id: UUID, query: str, limit: int) -> list[Suggestion]:
        contracts = await self.contract_repository.list_by_enterprise(enterprise_id)
        return [
            Suggestion(value=c.title, label=c.title, type=SearchResultType.CONTRACT, id=c.id)
            for c in contracts
            if query in c.title.lower()
        ][:limit]

    async def _vendors(self, enterprise_id: UUID, query: str, limit: int) -> list[Suggestion]:
        vendors = await self.vendor_repository.list_by_enterprise(enterprise_id)
        return [
            Suggestion(value=v.name, label=v.name, type=SearchResultType.VENDOR, id=v.id)
            for v in vendors
            if query in v.name.lower()
        ][:limit]

    async def _users(self, enterprise_id: UUID, query: str, limit: int) -> list[Suggestion]:
        users = await self.user_repository.list_by_enterprise(enterprise_id)
        suggestions = []
        for user in users:
            full_name = f"{user.first_name or ''} {user.last_name or ''}".lower()
            if query in full_name or query in str(user.email).lower():
                name = user.display_name
                suggestions.append(Suggestion(value=name, label=name, type=SearchResultType.USER, id=user.id))
        return suggestions[:limit]
