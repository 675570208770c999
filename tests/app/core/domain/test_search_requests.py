"""Tests for search request and filter models."""
from datetime import date

import pytest
from pydantic import ValidationError

from src.app.core.domain.models import (
    ContractSearchRequest,
    DateField,
    DateRange,
    SearchAllRequest,
    User,
    ValueRange,
)
from src.client.schemas import DateRangeRequest, ValueRangeRequest
from tests.builders import make_user


@pytest.mark.parametrize(
    "query, expected",
    [
        ("  Acme Corp ", "acme corp"),
        ("ACME", "acme"),
        ("", ""),
        ("   ", ""),
    ],
)
def test_normalized_query(query, expected):
    assert SearchAllRequest(query=query).normalized_query == expected


def test_raw_query_is_kept():
    assert SearchAllRequest(query="  Acme ").query == "  Acme "


@pytest.mark.parametrize("limit", [0, -1])
def test_non_positive_limit_rejected(limit):
    with pytest.raises(ValidationError):
        SearchAllRequest(query="acme", limit=limit)


def test_negative_offset_rejected():
    with pytest.raises(ValidationError):
        ContractSearchRequest(offset=-1)


def test_date_range_defaults_to_created():
    date_range = DateRange(start_date=date(2024, 1, 1), end_date=date(2024, 1, 1))

    assert date_range.date_field == DateField.CREATED


def test_date_range_must_be_ordered():
    with pytest.raises(ValidationError, match="start_date must not be after end_date"):
        DateRange(start_date=date(2024, 2, 1), end_date=date(2024, 1, 1))


def test_value_range_bounds_are_optional():
    assert ValueRange(min=100).max is None
    assert ValueRange(max=100).min is None


def test_value_range_must_be_ordered():
    with pytest.raises(ValidationError, match="min must not be greater than max"):
        ValueRange(min=10, max=5)


def test_display_name_falls_back_to_email():
    assert make_user(first_name="Ada", last_name="Lovelace").display_name == "Ada Lovelace"
    assert make_user(first_name="Ada").display_name == "Ada"
    assert make_user(email="ops@acme.com").display_name == "ops@acme.com"


def test_user_email_is_validated():
    with pytest.raises(ValidationError):
        make_user(email="not-an-email")


def test_user_requires_enterprise():
    with pytest.raises(ValidationError):
        User(email="ops@acme.com")


def test_inverted_range_request_bodies_rejected():
    with pytest.raises(ValidationError, match="start_date must not be after end_date"):
        DateRangeRequest(start_date=date(2024, 2, 1), end_date=date(2024, 1, 1))
    with pytest.raises(ValidationError, match="min must not be greater than max"):
        ValueRangeRequest(min=500, max=10)
