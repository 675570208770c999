"""HTTP client for consuming the Contract Search API."""
from typing import Optional

from httpx import AsyncClient, Response

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

AUTH_SUBJECT_HEADER = "X-Auth-Subject"


class SearchClient:
    """HTTP client for interacting with the Contract Search API as one caller."""

    def __init__(self, base_url: str, auth_subject: str | None = None, client: Optional[AsyncClient] = None):
        """
        Initialize the search client.

        Args:
            base_url: Base URL of the API (e.g., "http://localhost:8000")
            auth_subject: Identity provider subject sent with every request.
                Requests without it are rejected with 401.
            client: Optional httpx.AsyncClient instance. If not provided, a new one will be created.
        """
        self.base_url = base_url.rstrip("/")
        self.auth_subject = auth_subject
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self):
        """Async context manager entry."""
        if self._owns_client:
            self._client = AsyncClient(base_url=self.base_url)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self._owns_client and self._client:
            await self._client.aclose()

    @property
    def client(self) -> AsyncClient:
        """Get the underlying httpx client."""
        if self._client is None:
            raise RuntimeError("Client not initialized. Use async context manager.")
        return self._client

    @property
    def _headers(self) -> dict[str, str]:
        return {AUTH_SUBJECT_HEADER: self.auth_subject} if self.auth_subject else {}

    async def search_all(
        self,
        query: str,
        limit: int | None = None,
        include_archived: bool = False,
    ) -> SearchAllResponse:
        """
        Search across contracts, vendors and users.

        Args:
            query: Search query string
            limit: Maximum number of merged results (server default when omitted)
            include_archived: Whether archived contracts are searchable

        Returns:
            Merged results, per-type breakdown, total count and facets

        Raises:
            httpx.HTTPStatusError: If the request fails
        """
        params: dict[str, str | int | bool] = {"q": query, "include_archived": include_archived}
        if limit is not None:
            params["limit"] = limit
        response: Response = await self.client.get("/api/v1/search/", params=params, headers=self._headers)
        response.raise_for_status()
        return SearchAllResponse(**response.json())

    async def search_contracts(self, request: ContractSearchRequestBody) -> ContractSearchResponse:
        """
        Advanced contract search.

        Raises:
            httpx.HTTPStatusError: If the request fails (400 on an unsupported sort field)
        """
        response: Response = await self.client.post(
            "/api/v1/search/contracts",
            json=request.model_dump(mode="json", exclude_none=True),
            headers=self._headers,
        )
        response.raise_for_status()
        return ContractSearchResponse(**response.json())

    async def search_vendors(self, request: VendorSearchRequestBody) -> VendorSearchResponse:
        """
        Vendor search with contract aggregates.

        Raises:
            httpx.HTTPStatusError: If the request fails
        """
        response: Response = await self.client.post(
            "/api/v1/search/vendors",
            json=request.model_dump(mode="json", exclude_none=True),
            headers=self._headers,
        )
        response.raise_for_status()
        return VendorSearchResponse(**response.json())

    async def search_users(self, request: UserSearchRequestBody) -> UserSearchResponse:
        """
        User directory search.

        Raises:
            httpx.HTTPStatusError: If the request fails
        """
        response: Response = await self.client.post(
            "/api/v1/search/users",
            json=request.model_dump(mode="json", exclude_none=True),
            headers=self._headers,
        )
        response.raise_for_status()
        return UserSearchResponse(**response.json())

    async def autocomplete(
        self,
        query: str,
        type: AutocompleteTypeEnum = AutocompleteTypeEnum.ALL,
        limit: int | None = None,
    ) -> AutocompleteResponse:
        """
        Suggestions for a partial query.

        Raises:
            httpx.HTTPStatusError: If the request fails
        """
        params: dict[str, str | int] = {"q": query, "type": type.value}
        if limit is not None:
            params["limit"] = limit
        response: Response = await self.client.get(
            "/api/v1/search/autocomplete", params=params, headers=self._headers
        )
        response.raise_for_status()
        return AutocompleteResponse(**response.json())
