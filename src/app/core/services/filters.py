"""
Structured predicate filters applied to candidate sets before scoring.

All filters of one call are combined with AND. A filter that is absent
(None, or an empty list) imposes no constraint.
"""
from collections.abc import Callable
from datetime import date, datetime, UTC

from src.app.core.domain.models import (
    Contract,
    ContractFilters,
    ContractStatus,
    DateField,
    DateRange,
    User,
    UserFilters,
    Vendor,
    VendorFilters,
    VendorMatch,
    ValueRange,
)
from src.app.core.services.pricing import parse_price


def _to_utc_date(value: datetime | str | None) -> date | None:
    """
    Calendar date of a timestamp or ISO 8601 string, in UTC.

    Naive values are taken to be UTC already. Unparseable strings yield None.
    """
    if value is None:
        return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        parsed = value
    if parsed.tzinfo is None:
        return parsed.date()
    return parsed.astimezone(UTC).date()


_CONTRACT_DATES: dict[DateField, Callable[[Contract], datetime | str | None]] = {
    DateField.CREATED: lambda c: c.created_at,
    DateField.START: lambda c: c.extracted_start_date,
    DateField.END: lambda c: c.extracted_end_date,
}


def in_date_range(contract: Contract, date_range: DateRange) -> bool:
    day = _to_utc_date(_CONTRACT_DATES[date_range.date_field](contract))
    if day is None:
        return False
    return date_range.start_date <= day <= date_range.end_date


def in_value_range(contract: Contract, value_range: ValueRange) -> bool:
    value = parse_price(contract.extracted_pricing)
    if value_range.min is not None and value < value_range.min:
        return False
    if value_range.max is not None and value > value_range.max:
        return False
    return True


def filter_contracts(contracts: list[Contract], filters: ContractFilters | None) -> list[Contract]:
    """Narrow contracts by status, type, vendor, date range and value range."""
    if filters is None:
        return list(contracts)

    filtered = list(contracts)
    if filters.status:
        statuses = set(filters.status)
        filtered = [c for c in filtered if c.status in statuses]
    if filters.contract_type:
        types = set(filters.contract_type)
        filtered = [c for c in filtered if c.contract_type is not None and c.contract_type in types]
    if filters.vendor_id:
        vendor_ids = set(filters.vendor_id)
        filtered = [c for c in filtered if c.vendor_id is not None and c.vendor_id in vendor_ids]
    if filters.date_range is not None:
        filtered = [c for c in filtered if in_date_range(c, filters.date_range)]
    if filters.value_range is not None:
        filtered = [c for c in filtered if in_value_range(c, filters.value_range)]
    return filtered


def exclude_archived(contracts: list[Contract]) -> list[Contract]:
    return [c for c in contracts if c.status != ContractStatus.ARCHIVED]


def filter_vendors(vendors: list[Vendor], filters: VendorFilters | None) -> list[Vendor]:
    """Narrow vendors by category. Vendors without a category never match a category filter."""
    if filters is None or not filters.category:
        return list(vendors)
    categories = set(filters.category)
    return [v for v in vendors if v.category is not None and v.category in categories]


def filter_vendors_by_activity(matches: list[VendorMatch], filters: VendorFilters | None) -> list[VendorMatch]:
    """Keep vendors with (True) or without (False) active contracts; needs aggregates computed."""
    if filters is None or filters.has_active_contracts is None:
        return list(matches)
    if filters.has_active_contracts:
        return [m for m in matches if m.active_contract_count > 0]
    return [m for m in matches if m.active_contract_count == 0]


def filter_users(users: list[User], filters: UserFilters | None) -> list[User]:
    """Narrow users by role, department and active flag."""
    if filters is None:
        return list(users)

    filtered = list(users)
    if filters.role:
        roles = set(filters.role)
        filtered = [u for u in filtered if u.role in roles]
    if filters.department:
        departments = set(filters.department)
        filtered = [u for u in filtered if u.department and u.department in departments]
    if filters.is_active is not None:
        filtered = [u for u in filtered if u.is_active == filters.is_active]
    return filtered


def visible_users(users: list[User]) -> list[User]:
    """Users shown by the unified search: everyone not explicitly deactivated."""
    return [u for u in users if u.is_active is not False]
