"""Domain models used in business logic."""
import uuid
from datetime import date, datetime, UTC
from enum import StrEnum
from typing import Generic, TypeVar, Union
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, model_validator


# =============================================================================
# Enumerations
# =============================================================================

class ContractStatus(StrEnum):
    """Contract lifecycle status."""
    DRAFT = "draft"
    PENDING_ANALYSIS = "pending_analysis"
    ACTIVE = "active"
    EXPIRED = "expired"
    TERMINATED = "terminated"
    ARCHIVED = "archived"


class ContractType(StrEnum):
    """Kind of agreement a contract represents."""
    NDA = "nda"
    MSA = "msa"
    SOW = "sow"
    SAAS = "saas"
    LEASE = "lease"
    EMPLOYMENT = "employment"
    PARTNERSHIP = "partnership"
    OTHER = "other"


class VendorCategory(StrEnum):
    """Vendor business category."""
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


class UserRole(StrEnum):
    """User role within an enterprise, highest privilege first."""
    OWNER = "owner"
    ADMIN = "admin"
    MANAGER = "manager"
    USER = "user"
    VIEWER = "viewer"


class EntityType(StrEnum):
    """Searchable collections. Values are also the field weight key prefixes."""
    CONTRACTS = "contracts"
    VENDORS = "vendors"
    USERS = "users"


class SearchResultType(StrEnum):
    """Discriminator attached to each hit of the unified search."""
    CONTRACT = "contract"
    VENDOR = "vendor"
    USER = "user"


# =============================================================================
# Entities (read-only projections of records owned elsewhere)
# =============================================================================

class Contract(BaseModel):
    """Domain model for Contract used in business logic."""
    id: UUID = Field(default_factory=uuid.uuid4, description="Unique contract ID")
    enterprise_id: UUID = Field(..., description="Owning tenant")
    vendor_id: UUID | None = Field(default=None, description="Counterparty vendor, if assigned")
    title: str = Field(..., min_length=1, description="Contract title")
    file_name: str = Field(default="", description="Name of the uploaded contract file")
    notes: str | None = None
    status: ContractStatus = Field(default=ContractStatus.DRAFT, description="Lifecycle status")
    contract_type: ContractType | None = None
    extracted_parties: list[str] = Field(default_factory=list, description="Parties found in the document")
    extracted_scope: str | None = None
    extracted_pricing: str | None = Field(default=None, description="Free-text price, e.g. '$12,500.00'")
    extracted_start_date: str | None = None
    extracted_end_date: str | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC), description="Creation timestamp")

    model_config = {"from_attributes": True}


class Vendor(BaseModel):
    """Domain model for Vendor used in business logic."""
    id: UUID = Field(default_factory=uuid.uuid4, description="Unique vendor ID")
    enterprise_id: UUID = Field(..., description="Owning tenant")
    name: str = Field(..., min_length=1, description="Vendor name")
    contact_email: str | None = None
    website: str | None = None
    notes: str | None = None
    address: str | None = None
    category: VendorCategory | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC), description="Creation timestamp")

    model_config = {"from_attributes": True}


class User(BaseModel):
    """Domain model for User used in business logic."""
    id: UUID = Field(default_factory=uuid.uuid4, description="Unique user ID")
    enterprise_id: UUID = Field(..., description="Tenant the user belongs to")
    auth_subject: str | None = Field(default=None, description="Identity provider subject")
    email: EmailStr = Field(..., description="Email address is required")
    first_name: str | None = None
    last_name: str | None = None
    department: str | None = None
    title: str | None = None
    role: UserRole = UserRole.USER
    is_active: bool | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC), description="Creation timestamp")

    model_config = {"from_attributes": True}

    @property
    def display_name(self) -> str:
        """Full name, falling back to the email address when no name is set."""
        full_name = f"{self.first_name or ''} {self.last_name or ''}".strip()
        return full_name or str(self.email)


class VendorSummary(BaseModel):
    """Vendor fields attached to contract hits."""
    id: UUID
    name: str
    category: VendorCategory | None = None


# =============================================================================
# Scoring Types
# =============================================================================

T = TypeVar("T")


class ScoredResult(BaseModel, Generic[T]):
    """
    An entity with its relevance score and the fields that matched.

    Attributes:
        item: The entity being scored (Contract, Vendor or User)
        score: Sum of the weights of every matched field
        highlights: Matched field names, in the scan order of the entity's
            searchable field list
    """
    item: T
    score: float = Field(..., description="Summed weighted-field-match score")
    highlights: list[str] = Field(default_factory=list, description="Matched field names")

    model_config = {"from_attributes": True, "arbitrary_types_allowed": True}


class ContractMatch(BaseModel):
    """A contract row of the advanced contract search."""
    contract: Contract
    relevance: float
    matched_fields: list[str] = Field(default_factory=list)
    vendor: VendorSummary | None = None

    @property
    def id(self) -> UUID:
        return self.contract.id


class VendorMatch(BaseModel):
    """A vendor row of the vendor search, with its contract aggregates."""
    vendor: Vendor
    relevance: float
    matched_fields: list[str] = Field(default_factory=list)
    contract_count: int = 0
    active_contract_count: int = 0
    total_value: float = 0.0

    @property
    def id(self) -> UUID:
        return self.vendor.id


class UserMatch(BaseModel):
    """A user row of the enterprise user search."""
    user: User
    relevance: float
    matched_fields: list[str] = Field(default_factory=list)

    @property
    def id(self) -> UUID:
        return self.user.id


# =============================================================================
# Filters and Sorting
# =============================================================================

class DateField(StrEnum):
    """Contract date a date range filter applies to."""
    CREATED = "created"
    START = "start"
    END = "end"


class DateRange(BaseModel):
    """Inclusive calendar date range, compared in UTC."""
    start_date: date
    end_date: date
    date_field: DateField = DateField.CREATED

    @model_validator(mode="after")
    def validate_order(self) -> "DateRange":
        if self.start_date > self.end_date:
            raise ValueError("start_date must not be after end_date")
        return self


class ValueRange(BaseModel):
    """Inclusive monetary range. A missing bound is unbounded."""
    min: float | None = None
    max: float | None = None

    @model_validator(mode="after")
    def validate_order(self) -> "ValueRange":
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError("min must not be greater than max")
        return self


class ContractFilters(BaseModel):
    """Structured contract predicates, combined with AND. Empty lists impose no constraint."""
    status: list[ContractStatus] = Field(default_factory=list)
    contract_type: list[ContractType] = Field(default_factory=list)
    vendor_id: list[UUID] = Field(default_factory=list)
    date_range: DateRange | None = None
    value_range: ValueRange | None = None


class VendorFilters(BaseModel):
    """Vendor predicates."""
    category: list[VendorCategory] = Field(default_factory=list)
    has_active_contracts: bool | None = None


class UserFilters(BaseModel):
    """User predicates."""
    role: list[UserRole] = Field(default_factory=list)
    department: list[str] = Field(default_factory=list)
    is_active: bool | None = None


class SortField(StrEnum):
    """Closed set of sort keys. Each entity type supports a subset."""
    RELEVANCE = "relevance"
    TITLE = "title"
    NAME = "name"
    CREATED_AT = "created_at"
    VALUE = "value"
    TOTAL_VALUE = "total_value"
    END_DATE = "end_date"
    CONTRACT_COUNT = "contract_count"


class SortOrder(StrEnum):
    ASC = "asc"
    DESC = "desc"


class SortSpec(BaseModel):
    field: SortField = SortField.RELEVANCE
    order: SortOrder = SortOrder.DESC


# =============================================================================
# Search Requests
# =============================================================================

class _QueryRequest(BaseModel):
    """
    Base for requests carrying a free-text query.

    The raw query is kept as given; a short or blank query is a valid
    request that simply does not trigger scoring.
    """
    query: str = ""
    limit: int | None = Field(default=None, gt=0, description="Requested page size, capped by settings")

    @property
    def normalized_query(self) -> str:
        """Trimmed, lowercased query used for matching."""
        return self.query.strip().lower()


class SearchAllRequest(_QueryRequest):
    """Request for the unified search across contracts, vendors and users."""
    include_archived: bool = False


class ContractSearchRequest(_QueryRequest):
    filters: ContractFilters | None = None
    sort: SortSpec | None = None
    offset: int = Field(default=0, ge=0)


class VendorSearchRequest(_QueryRequest):
    filters: VendorFilters | None = None
    sort: SortSpec | None = None


class UserSearchRequest(_QueryRequest):
    filters: UserFilters | None = None


class AutocompleteScope(StrEnum):
    ALL = "all"
    CONTRACTS = "contracts"
    VENDORS = "vendors"
    USERS = "users"


class AutocompleteRequest(_QueryRequest):
    type: AutocompleteScope = AutocompleteScope.ALL


# =============================================================================
# Facets
# =============================================================================

VALUE_BUCKETS: tuple[tuple[str, float], ...] = (
    ("0-10k", 10_000),
    ("10k-50k", 50_000),
    ("50k-100k", 100_000),
    ("100k-500k", 500_000),
    ("500k+", float("inf")),
)


class ContractFacets(BaseModel):
    status: dict[str, int] = Field(default_factory=dict)
    contract_type: dict[str, int] = Field(default_factory=dict)
    value_ranges: dict[str, int] = Field(
        default_factory=lambda: {label: 0 for label, _ in VALUE_BUCKETS}
    )


class VendorFacets(BaseModel):
    categories: dict[str, int] = Field(default_factory=dict)


class UserFacets(BaseModel):
    roles: dict[str, int] = Field(default_factory=dict)
    departments: dict[str, int] = Field(default_factory=dict)


class VisibleResultFacets(BaseModel):
    """Counts over the truncated, merged list returned by the unified search."""
    type: dict[str, int] = Field(default_factory=dict)
    status: dict[str, int] = Field(default_factory=dict)


# =============================================================================
# Search Results
# =============================================================================

class SearchResult(BaseModel):
    """
    Unified search result that can contain a Contract, Vendor or User.

    Used by the unified SearchService to return heterogeneous search results
    sorted by score descending.
    """
    type: SearchResultType = Field(..., description="Type of entity in the result")
    entity: Union[Contract, Vendor, User] = Field(..., description="The matched entity")
    score: float = Field(..., description="Relevance score from the search")
    highlights: list[str] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class ResultsByType(BaseModel):
    contracts: list[ScoredResult[Contract]] = Field(default_factory=list)
    vendors: list[ScoredResult[Vendor]] = Field(default_factory=list)
    users: list[ScoredResult[User]] = Field(default_factory=list)


class SearchAllResult(BaseModel):
    results: list[SearchResult] = Field(default_factory=list)
    by_type: ResultsByType = Field(default_factory=ResultsByType)
    total_results: int = 0
    query: str = ""
    facets: VisibleResultFacets = Field(default_factory=VisibleResultFacets)


class ContractSearchPage(BaseModel):
    results: list[ContractMatch]
    total: int
    has_more: bool
    facets: ContractFacets


class VendorSearchPage(BaseModel):
    results: list[VendorMatch]
    total: int
    facets: VendorFacets


class UserSearchPage(BaseModel):
    results: list[UserMatch]
    total: int
    facets: UserFacets


class Suggestion(BaseModel):
    value: str
    label: str
    type: SearchResultType
    id: UUID


class AutocompleteResult(BaseModel):
    suggestions: list[Suggestion] = Field(default_factory=list)
