"""Limit resolution and page slicing shared by the search services."""
from typing import TypeVar

T = TypeVar("T")


def resolve_limit(requested: int | None, default: int, maximum: int) -> int:
    """
    Effective page size for a request.

    A missing (or zero) limit falls back to the default; anything above the
    maximum is capped rather than rejected.
    """
    return min(requested or default, maximum)


def paginate(items: list[T], offset: int, limit: int) -> list[T]:
    return items[offset:offset + limit]
