"""Integration tests for ContractRepository against PostgreSQL."""
from datetime import timedelta
from uuid import UUID

import pytest
import pytest_asyncio

from src.app.core.domain.models import ContractStatus, ContractType
from src.app.infrastructure.contract_repository import ContractRepository
from src.app.infrastructure.mappers.contract_mapper import ContractMapper
from tests.builders import ENTERPRISE_A, ENTERPRISE_B, make_contract

pytestmark = pytest.mark.integration


async def _seed(db, *contracts):
    async with db.session_maker() as session:
        session.add_all([ContractMapper.to_entity(c) for c in contracts])
        await session.commit()


@pytest_asyncio.fixture
async def repository(clean_database):
    return ContractRepository(clean_database, ContractMapper(), read_timeout=5.0)


@pytest.mark.asyncio
async def test_list_by_enterprise_is_tenant_scoped(repository, clean_database):
    mine = make_contract(ENTERPRISE_A, title="Mine")
    theirs = make_contract(ENTERPRISE_B, title="Theirs")
    await _seed(clean_database, mine, theirs)

    contracts = await repository.list_by_enterprise(ENTERPRISE_A)

    assert [c.id for c in contracts] == [mine.id]


@pytest.mark.asyncio
async def test_list_by_enterprise_orders_by_creation_then_id(repository, clean_database):
    newest = make_contract(title="Newest")
    oldest = make_contract(title="Oldest", created_at=newest.created_at - timedelta(days=1))
    tie_high = make_contract(
        title="Tie high", id=UUID(int=2), created_at=newest.created_at - timedelta(hours=1)
    )
    tie_low = make_contract(title="Tie low", id=UUID(int=1), created_at=tie_high.created_at)
    await _seed(clean_database, newest, tie_high, oldest, tie_low)

    contracts = await repository.list_by_enterprise(ENTERPRISE_A)

    assert [c.title for c in contracts] == ["Oldest", "Tie low", "Tie high", "Newest"]


@pytest.mark.asyncio
async def test_extracted_fields_round_trip(repository, clean_database):
    contract = make_contract(
        title="Cloud hosting MSA",
        status=ContractStatus.ACTIVE,
        contract_type=ContractType.MSA,
        vendor_id=UUID(int=99),
        extracted_parties=["Acme Corp", "Globex LLC"],
        extracted_pricing="$12,500.00",
        extracted_start_date="2024-01-01",
        extracted_end_date="2024-12-31",
    )
    await _seed(clean_database, contract)

    [loaded] = await repository.list_by_enterprise(ENTERPRISE_A)

    assert loaded.extracted_parties == ["Acme Corp", "Globex LLC"]
    assert loaded.status == ContractStatus.ACTIVE
    assert loaded.contract_type == ContractType.MSA
    assert loaded.vendor_id == UUID(int=99)
    assert loaded.extracted_pricing == "$12,500.00"
    assert loaded.created_at == contract.created_at


@pytest.mark.asyncio
async def test_empty_enterprise(repository):
    assert await repository.list_by_enterprise(ENTERPRISE_A) == []
