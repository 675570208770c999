"""API schemas for search requests and responses."""
from datetime import date, datetime
from enum import Enum
from typing import Union
from uuid import UUID

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# Enumerations
# =============================================================================

class ContractStatusEnum(str, Enum):
    DRAFT = "draft"
    PENDING_ANALYSIS = "pending_analysis"
    ACTIVE = "active"
    EXPIRED = "expired"
    TERMINATED = "terminated"
    ARCHIVED = "archived"


class ContractTypeEnum(str, Enum):
    NDA = "nda"
    MSA = "msa"
    SOW = "sow"
    SAAS = "saas"
    LEASE = "lease"
    EMPLOYMENT = "employment"
    PARTNERSHIP = "partnership"
    OTHER = "other"


class VendorCategoryEnum(str, Enum):
    TECHNOLOGY = "technology"
    MARKETING = "marketing"
    LEGAL = "legal"
    FINANCE = "finance"
    HR = "hr"
    FACILITIES = "facilities"
    LOGISTICS = "logistics"
    MANUFACTURING = "manufacturing"
    CONSULTING = "consulting"
    OTHER = "other"


class UserRoleEnum(str, Enum):
    OWNER = "owner"
    ADMIN = "admin"
    MANAGER = "manager"
    USER = "user"
    VIEWER = "viewer"


class SearchResultTypeEnum(str, Enum):
    """Type of entity in a search result."""
    CONTRACT = "contract"
    VENDOR = "vendor"
    USER = "user"


class SortOrderEnum(str, Enum):
    ASC = "asc"
    DESC = "desc"


class DateFieldEnum(str, Enum):
    CREATED = "created"
    START = "start"
    END = "end"


class AutocompleteTypeEnum(str, Enum):
    ALL = "all"
    CONTRACTS = "contracts"
    VENDORS = "vendors"
    USERS = "users"


# =============================================================================
# Request Schemas
# =============================================================================

class DateRangeRequest(BaseModel):
    start_date: date
    end_date: date
    date_field: DateFieldEnum = DateFieldEnum.CREATED

    @model_validator(mode="after")
    def validate_order(self) -> "DateRangeRequest":
        if self.start_date > self.end_date:
            raise ValueError("start_date must not be after end_date")
        return self


class ValueRangeRequest(BaseModel):
    min: float | None = None
    max: float | None = None

    @model_validator(mode="after")
    def validate_order(self) -> "ValueRangeRequest":
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError("min must not be greater than max")
        return self


class ContractFiltersRequest(BaseModel):
    status: list[ContractStatusEnum] = Field(default_factory=list)
    contract_type: list[ContractTypeEnum] = Field(default_factory=list)
    vendor_id: list[UUID] = Field(default_factory=list)
    date_range: DateRangeRequest | None = None
    value_range: ValueRangeRequest | None = None


class SortRequest(BaseModel):
    """Sort key and direction. Valid keys depend on the searched entity type."""
    field: str = "relevance"
    order: SortOrderEnum = SortOrderEnum.DESC


class ContractSearchRequestBody(BaseModel):
    """Request body for the advanced contract search."""
    query: str = ""
    filters: ContractFiltersRequest | None = None
    sort: SortRequest | None = None
    limit: int | None = Field(default=None, gt=0)
    offset: int = Field(default=0, ge=0)


class VendorFiltersRequest(BaseModel):
    category: list[VendorCategoryEnum] = Field(default_factory=list)
    has_active_contracts: bool | None = None


class VendorSearchRequestBody(BaseModel):
    """Request body for the vendor search."""
    query: str = ""
    filters: VendorFiltersRequest | None = None
    sort: SortRequest | None = None
    limit: int | None = Field(default=None, gt=0)


class UserFiltersRequest(BaseModel):
    role: list[UserRoleEnum] = Field(default_factory=list)
    department: list[str] = Field(default_factory=list)
    is_active: bool | None = None


class UserSearchRequestBody(BaseModel):
    """Request body for the enterprise user search."""
    query: str = ""
    filters: UserFiltersRequest | None = None
    limit: int | None = Field(default=None, gt=0)


# =============================================================================
# Entity Responses
# =============================================================================

class ContractResponse(BaseModel):
    """Response schema for contract data returned by the API."""
    id: UUID
    enterprise_id: UUID
    vendor_id: UUID | None = None
    title: str
    file_name: str
    notes: str | None = None
    status: ContractStatusEnum
    contract_type: ContractTypeEnum | None = None
    extracted_parties: list[str] = Field(default_factory=list)
    extracted_scope: str | None = None
    extracted_pricing: str | None = None
    extracted_start_date: str | None = None
    extracted_end_date: str | None = None
    created_at: datetime

    model_config = {"from_attributes": True}


class VendorResponse(BaseModel):
    """Response schema for vendor data returned by the API."""
    id: UUID
    enterprise_id: UUID
    name: str
    contact_email: str | None = None
    website: str | None = None
    notes: str | None = None
    address: str | None = None
    category: VendorCategoryEnum | None = None
    created_at: datetime

    model_config = {"from_attributes": True}


class UserResponse(BaseModel):
    """Response schema for user data returned by the API."""
    id: UUID
    enterprise_id: UUID
    email: str
    first_name: str | None = None
    last_name: str | None = None
    department: str | None = None
    title: str | None = None
    role: UserRoleEnum
    is_active: bool | None = None
    created_at: datetime

    model_config = {"from_attributes": True}


class VendorSummaryResponse(BaseModel):
    id: UUID
    name: str
    category: VendorCategoryEnum | None = None


# =============================================================================
# Search Responses
# =============================================================================

class SearchResultResponse(BaseModel):
    """
    Response schema for a unified search result.

    Can contain a Contract, Vendor or User entity with its relevance score.
    Results are sorted by score descending.
    """
    type: SearchResultTypeEnum = Field(..., description="Type of entity in the result")
    entity: Union[ContractResponse, VendorResponse, UserResponse] = Field(
        ..., description="The matched entity"
    )
    score: float = Field(..., description="Relevance score (higher is more relevant)")
    highlights: list[str] = Field(default_factory=list, description="Matched field names")


class ScoredContractResponse(BaseModel):
    item: ContractResponse
    score: float
    highlights: list[str] = Field(default_factory=list)


class ScoredVendorResponse(BaseModel):
    item: VendorResponse
    score: float
    highlights: list[str] = Field(default_factory=list)


class ScoredUserResponse(BaseModel):
    item: UserResponse
    score: float
    highlights: list[str] = Field(default_factory=list)


class ResultsByTypeResponse(BaseModel):
    contracts: list[ScoredContractResponse] = Field(default_factory=list)
    vendors: list[ScoredVendorResponse] = Field(default_factory=list)
    users: list[ScoredUserResponse] = Field(default_factory=list)


class VisibleFacetsResponse(BaseModel):
    type: dict[str, int] = Field(default_factory=dict)
    status: dict[str, int] = Field(default_factory=dict)


class SearchAllResponse(BaseModel):
    """Response schema for the unified search."""
    results: list[SearchResultResponse] = Field(default_factory=list)
    by_type: ResultsByTypeResponse = Field(default_factory=ResultsByTypeResponse)
    total_results: int = 0
    query: str = ""
    facets: VisibleFacetsResponse = Field(default_factory=VisibleFacetsResponse)


class ContractHitResponse(ContractResponse):
    relevance: float
    matched_fields: list[str] = Field(default_factory=list)
    vendor: VendorSummaryResponse | None = None


class ContractFacetsResponse(BaseModel):
    status: dict[str, int] = Field(default_factory=dict)
    contract_type: dict[str, int] = Field(default_factory=dict)
    value_ranges: dict[str, int] = Field(default_factory=dict)


class ContractSearchResponse(BaseModel):
    results: list[ContractHitResponse]
    total: int
    has_more: bool
    facets: ContractFacetsResponse


class VendorHitResponse(VendorResponse):
    relevance: float
    matched_fields: list[str] = Field(default_factory=list)
    contract_count: int = 0
    active_contract_count: int = 0
    total_value: float = 0.0


class VendorFacetsResponse(BaseModel):
    categories: dict[str, int] = Field(default_factory=dict)


class VendorSearchResponse(BaseModel):
    results: list[VendorHitResponse]
    total: int
    facets: VendorFacetsResponse


class UserHitResponse(UserResponse):
    relevance: float
    matched_fields: list[str] = Field(default_factory=list)


class UserFacetsResponse(BaseModel):
    roles: dict[str, int] = Field(default_factory=dict)
    departments: dict[str, int] = Field(default_factory=dict)


class UserSearchResponse(BaseModel):
    results: list[UserHitResponse]
    total: int
    facets: UserFacetsResponse


class SuggestionResponse(BaseModel):
    value: str
    label: str
    type: SearchResultTypeEnum
    id: UUID


class AutocompleteResponse(BaseModel):
    suggestions: list[SuggestionResponse] = Field(default_factory=list)
