"""Mappers for converting between domain models and API schemas."""
from src.app.core.domain.models import (
    AutocompleteResult,
    Contract,
    ContractFilters,
    ContractMatch,
    ContractSearchPage,
    ContractSearchRequest,
    DateRange,
    EntityType,
    ScoredResult,
    SearchAllResult,
    SearchResult,
    SearchResultType,
    SortField,
    SortOrder,
    SortSpec,
    User,
    UserFilters,
    UserMatch,
    UserSearchPage,
    UserSearchRequest,
    ValueRange,
    Vendor,
    VendorFilters,
    VendorMatch,
    VendorSearchPage,
    VendorSearchRequest,
)
from src.app.core.services.sorting import sort_key_for
from src.client.schemas import (
    AutocompleteResponse,
    ContractFacetsResponse,
    ContractFiltersRequest,
    ContractHitResponse,
    ContractResponse,
    ContractSearchRequestBody,
    ContractSearchResponse,
    ResultsByTypeResponse,
    ScoredContractResponse,
    ScoredUserResponse,
    ScoredVendorResponse,
    SearchAllResponse,
    SearchResultResponse,
    SearchResultTypeEnum,
    SortRequest,
    SuggestionResponse,
    UserFacetsResponse,
    UserHitResponse,
    UserResponse,
    UserSearchRequestBody,
    UserSearchResponse,
    VendorFacetsResponse,
    VendorHitResponse,
    VendorResponse,
    VendorSearchRequestBody,
    VendorSearchResponse,
    VendorSummaryResponse,
    VisibleFacetsResponse,
)


# =============================================================================
# Requests
# =============================================================================

def to_sort_spec(entity_type: EntityType, sort: SortRequest | None) -> SortSpec | None:
    """
    Convert a sort request into a SortSpec for the given entity type.

    Raises:
        UnsupportedSortField: If the field is not a sort key of the entity type
    """
    if sort is None:
        return None
    sort_key_for(entity_type, sort.field)
    return SortSpec(field=SortField(sort.field), order=SortOrder(sort.order.value))


def to_contract_filters(filters: ContractFiltersRequest | None) -> ContractFilters | None:
    if filters is None:
        return None
    return ContractFilters(
        status=[s.value for s in filters.status],
        contract_type=[t.value for t in filters.contract_type],
        vendor_id=filters.vendor_id,
        date_range=(
            DateRange(**filters.date_range.model_dump(mode="json"))
            if filters.date_range is not None else None
        ),
        value_range=(
            ValueRange(**filters.value_range.model_dump())
            if filters.value_range is not None else None
        ),
    )


def to_contract_search_request(body: ContractSearchRequestBody) -> ContractSearchRequest:
    return ContractSearchRequest(
        query=body.query,
        limit=body.limit,
        offset=body.offset,
        filters=to_contract_filters(body.filters),
        sort=to_sort_spec(EntityType.CONTRACTS, body.sort),
    )


def to_vendor_search_request(body: VendorSearchRequestBody) -> VendorSearchRequest:
    filters = None
    if body.filters is not None:
        filters = VendorFilters(
            category=[c.value for c in body.filters.category],
            has_active_contracts=body.filters.has_active_contracts,
        )
    return VendorSearchRequest(
        query=body.query,
        limit=body.limit,
        filters=filters,
        sort=to_sort_spec(EntityType.VENDORS, body.sort),
    )


def to_user_search_request(body: UserSearchRequestBody) -> UserSearchRequest:
    filters = None
    if body.filters is not None:
        filters = UserFilters(
            role=[r.value for r in body.filters.role],
            department=body.filters.department,
            is_active=body.filters.is_active,
        )
    return UserSearchRequest(query=body.query, limit=body.limit, filters=filters)


# =============================================================================
# Entities
# =============================================================================

def to_contract_response(contract: Contract) -> ContractResponse:
    """
    Convert a Contract domain model to ContractResponse API schema.

    Args:
        contract: Domain model

    Returns:
        API response schema
    """
    return ContractResponse.model_validate(contract.model_dump(mode="json"))


def to_vendor_response(vendor: Vendor) -> VendorResponse:
    return VendorResponse.model_validate(vendor.model_dump(mode="json"))


def to_user_response(user: User) -> UserResponse:
    # auth_subject stays server-side
    return UserResponse.model_validate(user.model_dump(mode="json", exclude={"auth_subject"}))


_ENTITY_RESPONSES = {
    SearchResultType.CONTRACT: to_contract_response,
    SearchResultType.VENDOR: to_vendor_response,
    SearchResultType.USER: to_user_response,
}


# =============================================================================
# Unified search
# =============================================================================

def to_search_result_response(result: SearchResult) -> SearchResultResponse:
    """
    Convert a SearchResult domain model to SearchResultResponse API schema.

    Args:
        result: Domain model containing a Contract, Vendor or User

    Returns:
        API response schema with the appropriate entity type
    """
    return SearchResultResponse(
        type=SearchResultTypeEnum(result.type.value),
        entity=_ENTITY_RESPONSES[result.type](result.entity),  # type: ignore[operator]
        score=result.score,
        highlights=result.highlights,
    )


def _scored_contract(result: ScoredResult[Contract]) -> ScoredContractResponse:
    return ScoredContractResponse(
        item=to_contract_response(result.item), score=result.score, highlights=result.highlights
    )


def _scored_vendor(result: ScoredResult[Vendor]) -> ScoredVendorResponse:
    return ScoredVendorResponse(
        item=to_vendor_response(result.item), score=result.score, highlights=result.highlights
    )


def _scored_user(result: ScoredResult[User]) -> ScoredUserResponse:
    return ScoredUserResponse(
        item=to_user_response(result.item), score=result.score, highlights=result.highlights
    )


def to_search_all_response(result: SearchAllResult) -> SearchAllResponse:
    return SearchAllResponse(
        results=[to_search_result_response(r) for r in result.results],
        by_type=ResultsByTypeResponse(
            contracts=[_scored_contract(r) for r in result.by_type.contracts],
            vendors=[_scored_vendor(r) for r in result.by_type.vendors],
            users=[_scored_user(r) for r in result.by_type.users],
        ),
        total_results=result.total_results,
        query=result.query,
        facets=VisibleFacetsResponse(**result.facets.model_dump()),
    )


# =============================================================================
# Advanced search pages
# =============================================================================

def to_contract_hit_response(match: ContractMatch) -> ContractHitResponse:
    return ContractHitResponse(
        **to_contract_response(match.contract).model_dump(),
        relevance=match.relevance,
        matched_fields=match.matched_fields,
        vendor=(
            VendorSummaryResponse(**match.vendor.model_dump(mode="json"))
            if match.vendor is not None else None
        ),
    )


def to_contract_search_response(page: ContractSearchPage) -> ContractSearchResponse:
    return ContractSearchResponse(
        results=[to_contract_hit_response(m) for m in page.results],
        total=page.total,
        has_more=page.has_more,
        facets=ContractFacetsResponse(**page.facets.model_dump()),
    )


def to_vendor_hit_response(match: VendorMatch) -> VendorHitResponse:
    return VendorHitResponse(
        **to_vendor_response(match.vendor).model_dump(),
        relevance=match.relevance,
        matched_fields=match.matched_fields,
        contract_count=match.contract_count,
        active_contract_count=match.active_contract_count,
        total_value=match.total_value,
    )


def to_vendor_search_response(page: VendorSearchPage) -> VendorSearchResponse:
    return VendorSearchResponse(
        results=[to_vendor_hit_response(m) for m in page.results],
        total=page.total,
        facets=VendorFacetsResponse(**page.facets.model_dump()),
    )


def to_user_hit_response(match: UserMatch) -> UserHitResponse:
    return UserHitResponse(
        **to_user_response(match.user).model_dump(),
        relevance=match.relevance,
        matched_fields=match.matched_fields,
    )


def to_user_search_response(page: UserSearchPage) -> UserSearchResponse:
    return UserSearchResponse(
        results=[to_user_hit_response(m) for m in page.results],
        total=page.total,
        facets=UserFacetsResponse(**page.facets.model_dump()),
    )


def to_autocomplete_response(result: AutocompleteResult) -> AutocompleteResponse:
    return AutocompleteResponse(
        suggestions=[
            SuggestionResponse(value=s.value, label=s.label, type=SearchResultTypeEnum(s.type.value), id=s.id)
            for s in result.suggestions
        ]
    )
