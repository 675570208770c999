"""Tests for the repository read deadline."""
import asyncio
from contextlib import asynccontextmanager
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from sqlalchemy import select

from src.app.infrastructure.entities.vendor_entity import VendorEntity
from src.app.infrastructure.mappers.vendor_mapper import VendorMapper
from src.app.infrastructure.vendor_repository import VendorRepository
from src.shared.exceptions import StoreReadTimeout
from tests.builders import ENTERPRISE_A, make_vendor


class _Session:
    def __init__(self, delay: float, entities: list):
        self.delay = delay
        self.entities = entities

    async def execute(self, statement):
        await asyncio.sleep(self.delay)
        result = MagicMock()
        result.scalars.return_value.all.return_value = self.entities
        result.scalars.return_value.first.return_value = self.entities[0] if self.entities else None
        return result


def _fake_db(delay: float, entities: list | None = None):
    @asynccontextmanager
    async def session_maker():
        yield _Session(delay, entities or [])

    return SimpleNamespace(session_maker=session_maker)


@pytest.mark.asyncio
async def test_slow_read_raises_store_timeout():
    repository = VendorRepository(_fake_db(delay=1.0), VendorMapper(), read_timeout=0.01)

    with pytest.raises(StoreReadTimeout) as exc_info:
        await repository.list_by_enterprise(ENTERPRISE_A)

    assert exc_info.value.operation == "VendorRepository.find_all"
    assert exc_info.value.timeout == 0.01


@pytest.mark.asyncio
async def test_fast_read_maps_entities_to_models():
    vendor = make_vendor(name="Acme")
    repository = VendorRepository(
        _fake_db(delay=0.0, entities=[VendorMapper.to_entity(vendor)]), VendorMapper(), read_timeout=1.0
    )

    [loaded] = await repository.list_by_enterprise(ENTERPRISE_A)

    assert loaded.id == vendor.id
    assert loaded.name == "Acme"


@pytest.mark.asyncio
async def test_no_timeout_configured_waits_for_result():
    repository = VendorRepository(_fake_db(delay=0.05), VendorMapper())

    assert await repository.find_one(select(VendorEntity)) is None
