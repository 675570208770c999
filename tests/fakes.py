"""In-memory repositories with the same read contract as the SQL ones."""
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID

from src.app.core.domain.models import Contract, User, Vendor


def _store_order(records):
    return sorted(records, key=lambda r: (r.created_at, str(r.id)))


@dataclass
class InMemoryStore:
    contracts: list[Contract] = field(default_factory=list)
    vendors: list[Vendor] = field(default_factory=list)
    users: list[User] = field(default_factory=list)


class InMemoryContractRepository:
    def __init__(self, store: InMemoryStore):
        self.store = store
        self.reads = 0

    async def list_by_enterprise(self, enterprise_id: UUID) -> list[Contract]:
        self.reads += 1
        return _store_order(c for c in self.store.contracts if c.enterprise_id == enterprise_id)


class InMemoryVendorRepository:
    def __init__(self, store: InMemoryStore):
        self.store = store
        self.reads = 0

    async def list_by_enterprise(self, enterprise_id: UUID) -> list[Vendor]:
        self.reads += 1
        return _store_order(v for v in self.store.vendors if v.enterprise_id == enterprise_id)

    async def get_by_ids(self, enterprise_id: UUID, vendor_ids: Iterable[UUID]) -> list[Vendor]:
        self.reads += 1
        ids = set(vendor_ids)
        return [v for v in self.store.vendors if v.enterprise_id == enterprise_id and v.id in ids]


class InMemoryUserRepository:
    def __init__(self, store: InMemoryStore):
        self.store = store
        self.reads = 0

    async def get_by_auth_subject(self, subject: str) -> Optional[User]:
        return next((u for u in self.store.users if u.auth_subject == subject), None)

    async def list_by_enterprise(self, enterprise_id: UUID) -> list[User]:
        self.reads += 1
        return _store_order(u for u in self.store.users if u.enterprise_id == enterprise_id)
