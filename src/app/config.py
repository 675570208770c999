"""Application configuration with structured settings groups."""
import logging
from functools import lru_cache

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


# =============================================================================
# Nested Settings Models
# =============================================================================


class SearchSettings(BaseModel):
    """
    Ranked search settings shared by the fan-out and advanced endpoints.

    Queries shorter than min_query_length (after trimming) are not scored:
    the fan-out returns an empty result, the advanced endpoints list every
    filtered candidate with relevance 1.
    """

    min_query_length: int = 2
    default_limit: int = 20
    max_limit: int = 50


class AutocompleteSettings(BaseModel):
    """Autocomplete suggestion settings."""

    min_query_length: int = 1
    default_limit: int = 10
    max_limit: int = 20


class FieldWeightSettings(BaseModel):
    """
    Relevance weight per searchable field.

    Keys are "{entity_type}.{field}". Fields that match but have no entry
    here contribute a weight of 1.0.
    """

    weights: dict[str, float] = {
        "contracts.title": 3.0,
        "contracts.file_name": 2.0,
        "contracts.extracted_parties": 2.5,
        "contracts.extracted_scope": 1.5,
        "contracts.notes": 1.0,
        "vendors.name": 3.0,
        "vendors.contact_email": 2.0,
        "vendors.website": 1.5,
        "vendors.notes": 1.0,
        "vendors.address": 1.0,
        "users.first_name": 2.5,
        "users.last_name": 2.5,
        "users.email": 2.0,
        "users.department": 1.5,
        "users.title": 1.5,
    }


class StoreSettings(BaseModel):
    """
    Document store access settings.

    read_timeout_seconds: Upper bound for a single repository read. A read
        that exceeds it fails the whole search request.
    """

    read_timeout_seconds: float = 5.0


# =============================================================================
# Main Settings Class
# =============================================================================


class Settings(BaseSettings):
    """
    Application settings with nested configuration groups.

    Environment variables use double underscore as delimiter for nested values.
    Example: SEARCH__MAX_LIMIT=100, STORE__READ_TIMEOUT_SECONDS=2.5
    """

    # Application metadata
    app_name: str = "Contract Search API"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # Database
    database_url: str = "postgresql+asyncpg://localhost/contracts"

    # Nested settings groups
    search: SearchSettings = SearchSettings()
    autocomplete: AutocompleteSettings = AutocompleteSettings()
    field_weights: FieldWeightSettings = FieldWeightSettings()
    store: StoreSettings = StoreSettings()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
