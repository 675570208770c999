"""Dependency injection container using dependency-injector library."""
from dependency_injector import containers, providers

from src.app.config import Settings
from src.shared.database.database import Database, DatabaseSettings

from src.app.infrastructure.mappers.contract_mapper import ContractMapper
from src.app.infrastructure.mappers.user_mapper import UserMapper
from src.app.infrastructure.mappers.vendor_mapper import VendorMapper

from src.app.infrastructure.contract_repository import ContractRepository
from src.app.infrastructure.user_repository import UserRepository
from src.app.infrastructure.vendor_repository import VendorRepository

from src.app.core.services.autocomplete_service import AutocompleteService
from src.app.core.services.contract_search_service import ContractSearchService
from src.app.core.services.field_weights import FieldWeightTable
from src.app.core.services.identity import IdentityResolver
from src.app.core.services import scoring
from src.app.core.services.search_service import SearchService
from src.app.core.services.user_search_service import UserSearchService
from src.app.core.services.vendor_search_service import VendorSearchService


class Container(containers.DeclarativeContainer):
    """Main application dependency injection container."""

    wiring_config = containers.WiringConfiguration(
        modules=[
            "src.app.api.dependencies",
            "src.app.api.v1.search",
        ]
    )

    # =========================================================================
    # CONFIGURATION - Singleton (loaded once, cached)
    # =========================================================================
    config = providers.Singleton(Settings)

    # =========================================================================
    # SINGLETONS - Stateless Mappers (reusable across all requests)
    # =========================================================================
    contract_mapper = providers.Singleton(ContractMapper)
    vendor_mapper = providers.Singleton(VendorMapper)
    user_mapper = providers.Singleton(UserMapper)

    # =========================================================================
    # SINGLETONS - Relevance scoring
    # The weight table is immutable and shared by the three scorers.
    # =========================================================================
    field_weights = providers.Singleton(
        FieldWeightTable,
        weights=config.provided.field_weights.weights,
    )

    contract_scorer = providers.Singleton(scoring.contract_scorer, weights=field_weights)
    vendor_scorer = providers.Singleton(scoring.vendor_scorer, weights=field_weights)
    user_scorer = providers.Singleton(scoring.user_scorer, weights=field_weights)

    # =========================================================================
    # SINGLETON - Database (shared connection pool)
    # =========================================================================
    database_settings = providers.Singleton(
        DatabaseSettings,
        db_url=config.provided.database_url,
    )

    database = providers.Singleton(
        Database,
        db_settings=database_settings,
    )

    # =========================================================================
    # FACTORIES - Repositories (per-request, share database singleton)
    # =========================================================================
    contract_repository = providers.Factory(
        ContractRepository,
        db=database,
        mapper=contract_mapper,
        read_timeout=config.provided.store.read_timeout_seconds,
    )

    vendor_repository = providers.Factory(
        VendorRepository,
        db=database,
        mapper=vendor_mapper,
        read_timeout=config.provided.store.read_timeout_seconds,
    )

    user_repository = providers.Factory(
        UserRepository,
        db=database,
        mapper=user_mapper,
        read_timeout=config.provided.store.read_timeout_seconds,
    )

    # =========================================================================
    # FACTORIES - Services
    # =========================================================================
    identity_resolver = providers.Factory(
        IdentityResolver,
        user_repository=user_repository,
    )

    contract_search_service = providers.Factory(
        ContractSearchService,
        contract_repository=contract_repository,
        vendor_repository=vendor_repository,
        scorer=contract_scorer,
        settings=config.provided.search,
    )

    vendor_search_service = providers.Factory(
        VendorSearchService,
        vendor_repository=vendor_repository,
        contract_repository=contract_repository,
        scorer=vendor_scorer,
        settings=config.provided.search,
    )

    user_search_service = providers.Factory(
        UserSearchService,
        user_repository=user_repository,
        scorer=user_scorer,
        settings=config.provided.search,
    )

    search_service = providers.Factory(
        SearchService,
        contract_search_service=contract_search_service,
        vendor_search_service=vendor_search_service,
        user_search_service=user_search_service,
        settings=config.provided.search,
    )

    autocomplete_service = providers.Factory(
        AutocompleteService,
        contract_repository=contract_repository,
        vendor_repository=vendor_repository,
        user_repository=user_repository,
        settings=config.provided.autocomplete,
    )
