"""Tests for the field weight table."""
import pytest

from src.app.config import FieldWeightSettings
from src.app.core.domain.models import EntityType
from src.app.core.services.field_weights import (
    CONTRACT_SEARCH_FIELDS,
    USER_SEARCH_FIELDS,
    VENDOR_SEARCH_FIELDS,
    FieldWeightTable,
)


def test_weight_uses_entity_prefixed_key():
    table = FieldWeightTable({"vendors.name": 3.0, "contracts.name": 9.0})

    assert table.weight(EntityType.VENDORS, "name") == 3.0


def test_unlisted_field_gets_default_weight():
    table = FieldWeightTable({"contracts.title": 3.0})

    assert table.weight(EntityType.CONTRACTS, "notes") == 1.0
    assert table.weight(EntityType.USERS, "title") == 1.0


def test_table_is_not_affected_by_later_changes_to_source():
    source = {"contracts.title": 3.0}
    table = FieldWeightTable(source)
    source["contracts.title"] = 100.0

    assert table.weight(EntityType.CONTRACTS, "title") == 3.0
    with pytest.raises(TypeError):
        table._weights["contracts.title"] = 5.0  # type: ignore[index]


@pytest.mark.parametrize("weights", [{"title": 3.0}, {"contracts.title": 0.0}, {"contracts.title": -1.0}])
def test_invalid_weights_are_rejected(weights):
    with pytest.raises(ValueError):
        FieldWeightTable(weights)


def test_default_settings_cover_every_searchable_field():
    weights = FieldWeightSettings().weights
    searchable = [
        (EntityType.CONTRACTS, CONTRACT_SEARCH_FIELDS),
        (EntityType.VENDORS, VENDOR_SEARCH_FIELDS),
        (EntityType.USERS, USER_SEARCH_FIELDS),
    ]

    for entity_type, fields in searchable:
        for field in fields:
            assert FieldWeightTable.key(entity_type, field) in weights


def test_default_contract_weights():
    table = FieldWeightTable(FieldWeightSettings().weights)

    assert table.weight(EntityType.CONTRACTS, "title") == 3.0
    assert table.weight(EntityType.CONTRACTS, "extracted_parties") == 2.5
    assert table.weight(EntityType.USERS, "email") == 2.0
