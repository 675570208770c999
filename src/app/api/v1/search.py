"""Search API endpoints for ranked search across contracts, vendors and users."""
from typing import Annotated

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Query, status

from src.app.api.dependencies import CurrentUser
from src.app.api.mappers import (
    to_autocomplete_response,
    to_contract_search_request,
    to_contract_search_response,
    to_search_all_response,
    to_user_search_request,
    to_user_search_response,
    to_vendor_search_request,
    to_vendor_search_response,
)
from src.app.containers import Container
from src.app.core.domain.models import AutocompleteRequest, AutocompleteScope, SearchAllRequest
from src.app.core.services.autocomplete_service import AutocompleteService
from src.app.core.services.contract_search_service import ContractSearchService
from src.app.core.services.search_service import SearchService
from src.app.core.services.user_search_service import UserSearchService
from src.app.core.services.vendor_search_service import VendorSearchService
from src.app.logging import get_logger
from src.client.schemas import (
    AutocompleteResponse,
    AutocompleteTypeEnum,
    ContractSearchRequestBody,
    ContractSearchResponse,
    SearchAllResponse,
    UserSearchRequestBody,
    UserSearchResponse,
    VendorSearchRequestBody,
    VendorSearchResponse,
)
from src.shared.exceptions import StoreReadTimeout, UnsupportedSortField

router = APIRouter(prefix="/search", tags=["search"])
logger = get_logger(__name__)


def _store_timeout(e: StoreReadTimeout) -> HTTPException:
    logger.error("Search failed on store timeout: %s", e)
    return HTTPException(status_code=status.HTTP_504_GATEWAY_TIMEOUT, detail=str(e))


@router.get("/", response_model=SearchAllResponse)
@inject
async def search_all(
    user: CurrentUser,
    q: Annotated[str, Query(description="Search query string")] = "",
    limit: Annotated[int | None, Query(gt=0, description="Maximum number of merged results")] = None,
    include_archived: Annotated[bool, Query(description="Include archived contracts")] = False,
    service: SearchService = Depends(Provide[Container.search_service]),
) -> SearchAllResponse:
    """
    Search across contracts, vendors and users of the caller's enterprise.

    Args:
        q: The search query string; shorter than two characters yields an empty result
        limit: Maximum number of merged results (default and cap from config)
        include_archived: Whether archived contracts are searchable

    Returns:
        Merged results ranked by relevance score, a per-type breakdown,
        the merged count and facets over the returned results
    """
    request = SearchAllRequest(query=q, limit=limit, include_archived=include_archived)
    try:
        result = await service.search_all(user.enterprise_id, request)
    except StoreReadTimeout as e:
        raise _store_timeout(e)
    return to_search_all_response(result)


@router.post("/contracts", response_model=ContractSearchResponse)
@inject
async def search_contracts(
    body: ContractSearchRequestBody,
    user: CurrentUser,
    service: ContractSearchService = Depends(Provide[Container.contract_search_service]),
) -> ContractSearchResponse:
    """Filtered, sorted and paginated contract search with vendor details and facets."""
    try:
        request = to_contract_search_request(body)
        page = await service.search(user.enterprise_id, request)
    except UnsupportedSortField as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StoreReadTimeout as e:
        raise _store_timeout(e)
    return to_contract_search_response(page)


@router.post("/vendors", response_model=VendorSearchResponse)
@inject
async def search_vendors(
    body: VendorSearchRequestBody,
    user: CurrentUser,
    service: VendorSearchService = Depends(Provide[Container.vendor_search_service]),
) -> VendorSearchResponse:
    """Vendor search with contract aggregates and category facets."""
    try:
        request = to_vendor_search_request(body)
        page = await service.search(user.enterprise_id, request)
    except UnsupportedSortField as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StoreReadTimeout as e:
        raise _store_timeout(e)
    return to_vendor_search_response(page)


@router.post("/users", response_model=UserSearchResponse)
@inject
async def search_users(
    body: UserSearchRequestBody,
    user: CurrentUser,
    service: UserSearchService = Depends(Provide[Container.user_search_service]),
) -> UserSearchResponse:
    """User directory search with role and department facets."""
    try:
        page = await service.search(user.enterprise_id, to_user_search_request(body))
    except StoreReadTimeout as e:
        raise _store_timeout(e)
    return to_user_search_response(page)


@router.get("/autocomplete", response_model=AutocompleteResponse)
@inject
async def autocomplete(
    user: CurrentUser,
    q: Annotated[str, Query(description="Partial query")] = "",
    type: Annotated[AutocompleteTypeEnum, Query(description="Entity types to suggest")] = AutocompleteTypeEnum.ALL,
    limit: Annotated[int | None, Query(gt=0, description="Maximum number of suggestions")] = None,
    service: AutocompleteService = Depends(Provide[Container.autocomplete_service]),
) -> AutocompleteResponse:
    """Suggest contract titles, vendor names and user names containing the query."""
    request = AutocompleteRequest(query=q, limit=limit, type=AutocompleteScope(type.value))
    try:
        result = await service.suggest(user.enterprise_id, request)
    except StoreReadTimeout as e:
        raise _store_timeout(e)
    return to_autocomplete_response(result)
