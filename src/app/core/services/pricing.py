"""Monetary value derivation from free-text price strings."""
import re

_NON_NUMERIC = re.compile(r"[^0-9.\-]")
_LEADING_NUMBER = re.compile(r"-?(?:\d+\.?\d*|\.\d+)")


def parse_price(text: str | None) -> float:
    """
    Derive a monetary value from a loosely formatted price string.

    Every character other than digits, '.' and '-' is stripped, then the
    longest leading number is parsed. Missing or unparseable input is 0.

        >>> parse_price("$12,500.00 per year")
        12500.0
        >>> parse_price("TBD")
        0.0
    """
    if not text:
        return 0.0
    match = _LEADING_NUMBER.match(_NON_NUMERIC.sub("", text))
    if match is None:
        return 0.0
    return float(match.group())
