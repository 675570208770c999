"""Tests for the sort engine."""
from datetime import datetime, UTC
from uuid import UUID

import pytest

from src.app.core.domain.models import (
    ContractMatch,
    EntityType,
    SortField,
    SortOrder,
    SortSpec,
    UserMatch,
    VendorMatch,
)
from src.app.core.services.sorting import sort_key_for, sort_matches
from src.shared.exceptions import UnsupportedSortField
from tests.builders import make_contract, make_user, make_vendor


def vendor_match(name: str, total_value: float = 0.0, relevance: float = 1.0, **vendor_fields) -> VendorMatch:
    return VendorMatch(vendor=make_vendor(name=name, **vendor_fields), relevance=relevance, total_value=total_value)


class TestVendorSorting:

    def test_total_value_descending(self):
        b = vendor_match("B", total_value=100)
        a = vendor_match("A", total_value=200)

        ordered = sort_matches([b, a], EntityType.VENDORS, SortSpec(field=SortField.TOTAL_VALUE, order=SortOrder.DESC))

        assert [m.vendor.name for m in ordered] == ["A", "B"]

    def test_name_ascending(self):
        b = vendor_match("B", total_value=100)
        a = vendor_match("A", total_value=200)

        ordered = sort_matches([b, a], EntityType.VENDORS, SortSpec(field=SortField.NAME, order=SortOrder.ASC))

        assert [m.vendor.name for m in ordered] == ["A", "B"]

    def test_contract_count(self):
        few = VendorMatch(vendor=make_vendor(name="Few"), relevance=1.0, contract_count=1)
        many = VendorMatch(vendor=make_vendor(name="Many"), relevance=1.0, contract_count=5)

        ordered = sort_matches([few, many], EntityType.VENDORS, SortSpec(field=SortField.CONTRACT_COUNT))

        assert [m.vendor.name for m in ordered] == ["Many", "Few"]


class TestContractSorting:

    def test_default_is_relevance_descending(self):
        low = ContractMatch(contract=make_contract(title="Low"), relevance=1.0)
        high = ContractMatch(contract=make_contract(title="High"), relevance=4.5)

        assert [m.contract.title for m in sort_matches([low, high], EntityType.CONTRACTS)] == ["High", "Low"]

    def test_value_uses_parsed_price(self):
        small = ContractMatch(contract=make_contract(title="Small", extracted_pricing="$9,999"), relevance=1.0)
        large = ContractMatch(contract=make_contract(title="Large", extracted_pricing="$100,000"), relevance=1.0)
        unknown = ContractMatch(contract=make_contract(title="Unknown", extracted_pricing="TBD"), relevance=1.0)

        ordered = sort_matches(
            [small, large, unknown], EntityType.CONTRACTS, SortSpec(field=SortField.VALUE, order=SortOrder.ASC)
        )

        assert [m.contract.title for m in ordered] == ["Unknown", "Small", "Large"]

    def test_created_at(self):
        older = ContractMatch(contract=make_contract(title="Older", created_at=datetime(2023, 1, 1, tzinfo=UTC)), relevance=1.0)
        newer = ContractMatch(contract=make_contract(title="Newer", created_at=datetime(2024, 1, 1, tzinfo=UTC)), relevance=1.0)

        ordered = sort_matches([older, newer], EntityType.CONTRACTS, SortSpec(field=SortField.CREATED_AT))

        assert [m.contract.title for m in ordered] == ["Newer", "Older"]

    def test_input_is_not_modified(self):
        matches = [
            ContractMatch(contract=make_contract(title="B"), relevance=1.0),
            ContractMatch(contract=make_contract(title="A"), relevance=1.0),
        ]
        snapshot = list(matches)

        sort_matches(matches, EntityType.CONTRACTS, SortSpec(field=SortField.TITLE, order=SortOrder.ASC))

        assert matches == snapshot


class TestTieBreak:

    @pytest.mark.parametrize("order", [SortOrder.ASC, SortOrder.DESC])
    def test_ties_are_ordered_by_id(self, order):
        ids = [UUID(int=3), UUID(int=1), UUID(int=2)]
        matches = [VendorMatch(vendor=make_vendor(id=i, name="Same"), relevance=1.0) for i in ids]

        ordered = sort_matches(matches, EntityType.VENDORS, SortSpec(field=SortField.NAME, order=order))

        assert [m.id for m in ordered] == [UUID(int=1), UUID(int=2), UUID(int=3)]

    def test_order_independent_of_input_order(self):
        matches = [
            UserMatch(user=make_user(id=UUID(int=n)), relevance=float(n % 2))
            for n in range(1, 7)
        ]

        forward = sort_matches(matches, EntityType.USERS)
        backward = sort_matches(list(reversed(matches)), EntityType.USERS)

        assert [m.id for m in forward] == [m.id for m in backward]


class TestUnsupportedFields:

    def test_vendor_cannot_sort_by_end_date(self):
        with pytest.raises(UnsupportedSortField):
            sort_key_for(EntityType.VENDORS, SortField.END_DATE)

    def test_contract_cannot_sort_by_contract_count(self):
        with pytest.raises(UnsupportedSortField):
            sort_matches([], EntityType.CONTRACTS, SortSpec(field=SortField.CONTRACT_COUNT))

    def test_users_sort_by_relevance_only(self):
        assert sort_key_for(EntityType.USERS, SortField.RELEVANCE) is not None
        with pytest.raises(UnsupportedSortField):
            sort_key_for(EntityType.USERS, SortField.NAME)

    def test_unknown_key_is_rejected(self):
        with pytest.raises(UnsupportedSortField) as exc_info:
            sort_key_for(EntityType.CONTRACTS, "__class__")

        assert isinstance(exc_info.value, ValueError)
