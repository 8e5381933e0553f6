"""Shared utilities for the finance tracker."""

from datetime import datetime, timezone

DECIMALS = 2


def utcnow() -> datetime:
    """Current UTC time as a naive datetime (the storage convention)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: datetime | None) -> datetime | None:
    """Convert an aware datetime to naive UTC; naive values are assumed UTC already."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def round2(x: float | None) -> float:
    """Round a value to 2 decimal places; None counts as zero."""
    if x is None:
        return 0.0
    return round(float(x), DECIMALS)
