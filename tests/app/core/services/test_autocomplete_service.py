"""Tests for AutocompleteService."""
import pytest

from src.app.config import AutocompleteSettings
from src.app.core.domain.models import AutocompleteRequest, AutocompleteScope, SearchResultType
from src.app.core.services.autocomplete_service import AutocompleteService
from tests.builders import ENTERPRISE_A, ENTERPRISE_B, make_contract, make_user, make_vendor


@pytest.fixture
def service(contract_repository, vendor_repository, user_repository):
    return AutocompleteService(
        contract_repository=contract_repository,
        vendor_repository=vendor_repository,
        user_repository=user_repository,
        settings=AutocompleteSettings(),
    )


@pytest.mark.asyncio
async def test_suggestions_grouped_contracts_vendors_users(service, store):
    store.users.append(make_user(first_name="Globe", last_name="Trotter"))
    store.vendors.append(make_vendor(name="Globex"))
    store.contracts.append(make_contract(title="Global MSA"))

    result = await service.suggest(ENTERPRISE_A, AutocompleteRequest(query="glob"))

    assert [(s.type, s.label) for s in result.suggestions] == [
        (SearchResultType.CONTRACT, "Global MSA"),
        (SearchResultType.VENDOR, "Globex"),
        (SearchResultType.USER, "Globe Trotter"),
    ]


@pytest.mark.asyncio
async def test_single_character_query_is_accepted(service, store):
    store.contracts.append(make_contract(title="Xylophone lease"))

    result = await service.suggest(ENTERPRISE_A, AutocompleteRequest(query="x"))

    assert [s.value for s in result.suggestions] == ["Xylophone lease"]


@pytest.mark.asyncio
async def test_blank_query_returns_nothing(service, store):
    store.contracts.append(make_contract(title="Anything"))

    result = await service.suggest(ENTERPRISE_A, AutocompleteRequest(query="   "))

    assert result.suggestions == []


@pytest.mark.asyncio
async def test_scope_selects_one_type(service, store):
    store.contracts.append(make_contract(title="Acme MSA"))
    store.vendors.append(make_vendor(name="Acme"))

    result = await service.suggest(ENTERPRISE_A, AutocompleteRequest(query="acme", type=AutocompleteScope.VENDORS))

    assert [s.type for s in result.suggestions] == [SearchResultType.VENDOR]


@pytest.mark.asyncio
async def test_limit_applies_per_group_and_overall(service, store):
    store.contracts.extend(make_contract(title=f"Acme {i}") for i in range(4))
    store.vendors.extend(make_vendor(name=f"Acme {i}") for i in range(4))

    result = await service.suggest(ENTERPRISE_A, AutocompleteRequest(query="acme", limit=3))

    # contracts fill the whole list before vendors get a slot
    assert len(result.suggestions) == 3
    assert {s.type for s in result.suggestions} == {SearchResultType.CONTRACT}


@pytest.mark.asyncio
async def test_limit_is_capped(service, store):
    store.contracts.extend(make_contract(title=f"Acme {i}") for i in range(30))

    result = await service.suggest(ENTERPRISE_A, AutocompleteRequest(query="acme", limit=100))

    assert len(result.suggestions) == 20


@pytest.mark.asyncio
async def test_users_match_on_email_and_fall_back_to_email_label(service, store):
    nameless = make_user(email="ops-desk@acme.com")
    store.users.append(nameless)

    result = await service.suggest(ENTERPRISE_A, AutocompleteRequest(query="ops-desk", type=AutocompleteScope.USERS))

    [suggestion] = result.suggestions
    assert suggestion.id == nameless.id
    assert suggestion.label == "ops-desk@acme.com"


@pytest.mark.asyncio
async def test_other_tenant_records_never_suggested(service, store):
    store.contracts.append(make_contract(ENTERPRISE_B, title="Secret deal"))

    result = await service.suggest(ENTERPRISE_A, AutocompleteRequest(query="secret"))

    assert result.suggestions == []
