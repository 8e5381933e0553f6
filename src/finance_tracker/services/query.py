"""Query building blocks shared by the record stores.

Filters are plain SQL expressions ANDed together by the caller; this module
owns the parts with rules attached: date windows, pagination and sorting.
"""
import calendar
import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from finance_tracker.core.exceptions import ValidationError
from finance_tracker.schemas import PaginationInfo
from finance_tracker.utils import to_naive_utc

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


def month_window(month: int, year: int) -> tuple[datetime, datetime]:
    """Return the inclusive [first instant, last instant] of a calendar month.

    The upper bound is the last millisecond of the month's last day, so
    February of a leap year ends at 29 23:59:59.999.
    """
    if not 1 <= month <= 12:
        raise ValidationError(errors=["month: must be between 1 and 12"])
    last_day = calendar.monthrange(year, month)[1]
    return (
        datetime(year, month, 1),
        datetime(year, month, last_day, 23, 59, 59, 999000),
    )


@dataclass(frozen=True)
class DateRange:
    """Optional inclusive bounds on a record's date column."""

    start: datetime | None = None
    end: datetime | None = None

    @classmethod
    def resolve(
        cls,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
        month: int | None = None,
        year: int | None = None,
    ) -> "DateRange":
        """Build the range from request parameters; month + year beats start/end."""
        if (month is None) != (year is None):
            raise ValidationError(errors=["month, year: must be provided together"])
        if month is not None and year is not None:
            return cls(*month_window(month, year))
        return cls(to_naive_utc(start_date), to_naive_utc(end_date))

    def clauses(self, column: Any) -> list[Any]:
        """SQL conditions bounding `column` to this range."""
        conditions = []
        if self.start is not None:
            conditions.append(column >= self.start)
        if self.end is not None:
            conditions.append(column <= self.end)
        return conditions


@dataclass(frozen=True)
class Page:
    """1-based page request."""

    number: int = 1
    size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        errors = []
        if self.number < 1:
            errors.append("page: must be at least 1")
        if self.size < 1:
            errors.append("limit: must be at least 1")
        elif self.size > MAX_PAGE_SIZE:
            errors.append(f"limit: must be at most {MAX_PAGE_SIZE}")
        if errors:
            raise ValidationError(errors=errors)

    @property
    def offset(self) -> int:
        return (self.number - 1) * self.size

    def info(self, total: int) -> PaginationInfo:
        return PaginationInfo(
            current_page=self.number,
            total_pages=math.ceil(total / self.size),
            total_items=total,
            items_per_page=self.size,
        )


def parse_sort(
    sort: str | None,
    columns: dict[str, Any],
    default: str,
    tiebreaker: Any,
) -> list[Any]:
    """Turn "field" / "-field" into ORDER BY clauses.

    Only names in `columns` are accepted. The tiebreaker (normally the primary
    key) follows in the same direction so paging is stable.
    """
    sort_key = (sort or "").strip() or default
    descending = sort_key.startswith("-")
    field = sort_key[1:] if descending else sort_key
    if field not in columns:
        allowed = ", ".join(sorted(columns))
        raise ValidationError(errors=[f"sort: unknown field '{field}' (allowed: {allowed})"])
    if descending:
        return [columns[field].desc(), tiebreaker.desc()]
    return [columns[field].asc(), tiebreaker.asc()]


def parse_id_list(raw: str | None, field: str) -> list[int] | None:
    """Parse a comma-separated id list ("3,7, 9"); None when absent or blank."""
    if raw is None or not raw.strip():
        return None
    try:
        return [int(part.strip()) for part in raw.split(",") if part.strip()]
    except ValueError as exc:
        raise ValidationError(errors=[f"{field}: expected comma-separated ids"]) from exc
